"""Tests for the public package facade."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import requests

from ifsc_bharat import (
    BankSearchParams,
    BranchRecord,
    IFSCBharat,
    LookupConfig,
    RazorpayIFSCClient,
    __version__,
)
from ifsc_bharat.ingestion.razorpay import IFSCLookupError
from ifsc_bharat.views.search_view import SEARCH_UNAVAILABLE_MESSAGE


class _DummyResponse:
    def __init__(self, payload: Any = None, *, status_code: int = 200, invalid_json: bool = False) -> None:
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)  # type: ignore[arg-type]

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class _DummySession:
    def __init__(self, response: _DummyResponse | Exception) -> None:
        self.response = response
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float) -> _DummyResponse:
        self.calls.append((url, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def close(self) -> None:
        self.closed = True


class _DummyClient:
    def __init__(self, record: BranchRecord | Exception | None) -> None:
        self.record = record
        self.codes: list[str] = []

    def fetch(self, code: str) -> BranchRecord:
        self.codes.append(code)
        if isinstance(self.record, Exception):
            raise self.record
        assert self.record is not None
        return self.record


def test_ifsc_bharat_class_exposes_version() -> None:
    assert IFSCBharat.__version__ == __version__


def test_defaults_to_razorpay_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IFSC_BHARAT_TIMEOUT", "7")

    facade = IFSCBharat()

    assert isinstance(facade.client, RazorpayIFSCClient)
    assert facade.config.timeout == 7.0


def test_lookup_normalises_input(tmp_path: Path, hdfc_record) -> None:
    client = _DummyClient(hdfc_record)
    facade = IFSCBharat(tmp_path / "b.db", client=client)

    assert facade.lookup(" hdfc0000053 ") is hdfc_record
    assert client.codes == ["HDFC0000053"]


@pytest.mark.parametrize("code, message", [("", "Please enter an IFSC code"), ("ABCD1234567", "valid IFSC code")])
def test_lookup_rejects_bad_codes_without_request(tmp_path: Path, code: str, message: str) -> None:
    client = _DummyClient(None)
    facade = IFSCBharat(tmp_path / "b.db", client=client)

    with pytest.raises(ValueError, match=message):
        facade.lookup(code)
    assert client.codes == []


def test_lookup_failure_returns_none(tmp_path: Path) -> None:
    facade = IFSCBharat(tmp_path / "b.db", client=_DummyClient(IFSCLookupError("HTTP 404")))

    assert facade.lookup("SBIN0009999") is None


def test_lookup_uses_config_with_session(tmp_path: Path, hdfc_payload) -> None:
    session = _DummySession(_DummyResponse(hdfc_payload))
    client = RazorpayIFSCClient(LookupConfig(base_url="http://mirror.local"), session=session)  # type: ignore[arg-type]
    facade = IFSCBharat(tmp_path / "b.db", client=client)

    record = facade.lookup("HDFC0000053")

    assert record is not None and record.bank == "HDFC Bank"
    assert session.calls[0][0] == "http://mirror.local/HDFC0000053"


def test_support_email_and_readout(hdfc_record) -> None:
    assert IFSCBharat.support_email("HDFC Bank") == "support@hdfcbank.com"
    assert IFSCBharat.support_email("Unknown Bank") is None
    assert IFSCBharat.readout_text(hdfc_record).startswith("Bank: HDFC Bank")
    assert IFSCBharat.validate("SBIN0001234") is True


def test_search_unavailable_until_directory_has_branches(tmp_path: Path, hdfc_record) -> None:
    facade = IFSCBharat(tmp_path / "b.db", client=_DummyClient(hdfc_record))
    try:
        assert facade.search_available() is False
        assert facade.search_notice() == SEARCH_UNAVAILABLE_MESSAGE
        assert facade.banks() == []
        assert facade.find_ifsc(BankSearchParams(bank="HDFC Bank")) is None

        result = facade.remember(hdfc_record)

        assert result.inserted == 1
        assert facade.search_available() is True
        assert facade.search_notice() is None
        assert facade.banks() == ["HDFC Bank"]
        assert facade.states("HDFC Bank") == ["KARNATAKA"]
        assert facade.districts("KARNATAKA") == ["BANGALORE URBAN"]
        assert facade.branches("BANGALORE URBAN", state="KARNATAKA") == ["BANGALORE - KORAMANGALA"]
        found = facade.find_ifsc(
            BankSearchParams(
                bank="HDFC Bank",
                state="KARNATAKA",
                district="BANGALORE URBAN",
                branch="BANGALORE - KORAMANGALA",
            )
        )
        assert found is not None and found.ifsc == "HDFC0000053"
    finally:
        facade.close()


def test_unopenable_directory_reports_search_unavailable(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, hdfc_record
) -> None:
    facade = IFSCBharat(tmp_path / "missing" / "branches.db", client=_DummyClient(hdfc_record))

    assert facade.search_available() is False
    assert facade.search_notice() == SEARCH_UNAVAILABLE_MESSAGE
    assert "Branch directory unavailable" in caplog.text
