"""Tests for the cascading bank search state container."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy.exc import OperationalError

from ifsc_bharat.db.directory_manager import BranchDirectoryManager
from ifsc_bharat.views.search_view import (
    NO_MATCH_MESSAGE,
    SEARCH_FAILED_MESSAGE,
    SELECT_MESSAGES,
    BankSearchView,
)


@pytest.fixture()
def directory(tmp_path: Path):
    manager = BranchDirectoryManager(tmp_path / "branches.db")
    yield manager
    manager.close()


class _FailingDirectory:
    def _fail(self, *_args, **_kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    list_banks = list_states = list_districts = list_branches = find_branch = _fail


def test_empty_directory_behaves_like_disabled_search(directory: BranchDirectoryManager) -> None:
    view = BankSearchView(directory)
    view.load_options()
    view.select_bank("HDFC Bank")
    view.select_state("KARNATAKA")
    view.select_district("BANGALORE URBAN")
    view.select_branch("BANGALORE - KORAMANGALA")

    assert view.banks == []
    assert view.states == []
    assert view.districts == []
    assert view.branches == []
    assert view.search() is None
    assert view.error == NO_MATCH_MESSAGE


def test_selections_are_required_in_cascade_order(directory: BranchDirectoryManager) -> None:
    view = BankSearchView(directory)

    view.search()
    assert view.error == SELECT_MESSAGES["bank"]
    view.select_bank("HDFC Bank")
    view.search()
    assert view.error == SELECT_MESSAGES["state"]
    view.select_state("KARNATAKA")
    view.search()
    assert view.error == SELECT_MESSAGES["district"]
    view.select_district("BANGALORE URBAN")
    view.search()
    assert view.error == SELECT_MESSAGES["branch"]


def test_changing_state_resets_district_and_branch(directory: BranchDirectoryManager, make_record) -> None:
    directory.insert_branches(
        [make_record(), make_record(ifsc="HDFC0000100", branch="PUNE - CAMP", district="PUNE", state="MAHARASHTRA")]
    )
    view = BankSearchView(directory)
    view.load_options()
    view.select_bank("HDFC Bank")
    view.select_state("KARNATAKA")
    view.select_district("BANGALORE URBAN")
    view.select_branch("BANGALORE - KORAMANGALA")

    view.select_state("MAHARASHTRA")

    assert view.districts == ["PUNE"]
    assert view.branches == []
    assert view.params.district is None
    assert view.params.branch is None


def test_full_cascade_resolves_ifsc(directory: BranchDirectoryManager, hdfc_record) -> None:
    directory.insert_branches([hdfc_record])
    view = BankSearchView(directory)
    view.load_options()
    assert view.banks == ["HDFC Bank"]
    assert view.states == ["KARNATAKA"]

    view.select_bank("HDFC Bank")
    view.select_state("KARNATAKA")
    assert view.districts == ["BANGALORE URBAN"]
    view.select_district("BANGALORE URBAN")
    assert view.branches == ["BANGALORE - KORAMANGALA"]
    view.select_branch("BANGALORE - KORAMANGALA")

    record = view.search()

    assert record == hdfc_record
    assert view.error is None
    assert view.loading is False


def test_directory_errors_are_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    view = BankSearchView(_FailingDirectory())  # type: ignore[arg-type]
    view.load_options()
    view.select_bank("HDFC Bank")
    view.select_state("KARNATAKA")
    view.params.district = "BANGALORE URBAN"
    view.select_branch("BANGALORE - KORAMANGALA")

    assert view.search() is None
    assert view.error == SEARCH_FAILED_MESSAGE
    assert view.loading_options is False
    assert "Error fetching initial options" in caplog.text
    assert "Error fetching districts" in caplog.text
