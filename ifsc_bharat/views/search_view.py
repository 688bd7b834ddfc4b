"""State container for the Bank → State → District → Branch search."""

from __future__ import annotations

from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError

from ifsc_bharat.ingestion.models import BankSearchParams, BranchRecord
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

SEARCH_UNAVAILABLE_MESSAGE = (
    "The Bank to IFSC Code feature is currently unavailable because no branch "
    "directory has been loaded."
)
SELECT_MESSAGES = {
    "bank": "Please select a bank",
    "state": "Please select a state",
    "district": "Please select a district",
    "branch": "Please select a branch",
}
NO_MATCH_MESSAGE = "No IFSC code found matching the selected bank details."
SEARCH_FAILED_MESSAGE = "Failed to fetch IFSC code. Please try again later."


class BranchDirectory(Protocol):
    """Queries the cascade needs from a branch directory."""

    def list_banks(self) -> list[str]: ...  # pragma: no cover - protocol definition

    def list_states(self, bank: str | None = None) -> list[str]: ...  # pragma: no cover

    def list_districts(self, state: str, bank: str | None = None) -> list[str]: ...  # pragma: no cover

    def list_branches(
        self, district: str, *, state: str | None = None, bank: str | None = None
    ) -> list[str]: ...  # pragma: no cover

    def find_branch(self, params: BankSearchParams) -> BranchRecord | None: ...  # pragma: no cover


class BankSearchView:
    """Cascading dropdown state; changing a level resets everything below it."""

    def __init__(self, directory: BranchDirectory) -> None:
        self.directory = directory
        self.params = BankSearchParams()
        self.banks: list[str] = []
        self.states: list[str] = []
        self.districts: list[str] = []
        self.branches: list[str] = []
        self.record: BranchRecord | None = None
        self.error: str | None = None
        self.loading = False
        self.loading_options = False

    def load_options(self) -> None:
        self.loading_options = True
        try:
            self.banks = self.directory.list_banks()
            self.states = self.directory.list_states()
        except SQLAlchemyError as exc:
            LOGGER.error("Error fetching initial options: %s", exc)
        finally:
            self.loading_options = False

    def select_bank(self, bank: str | None) -> None:
        self.params.bank = bank or None

    def select_state(self, state: str | None) -> None:
        self.params.state = state or None
        self.params.district = None
        self.params.branch = None
        self.districts = []
        self.branches = []
        if not self.params.state:
            return
        self.loading_options = True
        try:
            self.districts = self.directory.list_districts(self.params.state, bank=self.params.bank)
        except SQLAlchemyError as exc:
            LOGGER.error("Error fetching districts: %s", exc)
        finally:
            self.loading_options = False

    def select_district(self, district: str | None) -> None:
        self.params.district = district or None
        self.params.branch = None
        self.branches = []
        if not self.params.district:
            return
        self.loading_options = True
        try:
            self.branches = self.directory.list_branches(
                self.params.district,
                state=self.params.state,
                bank=self.params.bank,
            )
        except SQLAlchemyError as exc:
            LOGGER.error("Error fetching branches: %s", exc)
        finally:
            self.loading_options = False

    def select_branch(self, branch: str | None) -> None:
        self.params.branch = branch or None

    def search(self) -> BranchRecord | None:
        self.record = None
        self.error = None
        for field, message in SELECT_MESSAGES.items():
            if not getattr(self.params, field):
                self.error = message
                return None

        self.loading = True
        try:
            record = self.directory.find_branch(self.params)
        except SQLAlchemyError as exc:
            LOGGER.error("Error searching for IFSC code: %s", exc)
            self.error = SEARCH_FAILED_MESSAGE
            return None
        finally:
            self.loading = False

        if record is None:
            self.error = NO_MATCH_MESSAGE
            return None
        self.record = record
        return record


__all__ = [
    "BankSearchView",
    "BranchDirectory",
    "NO_MATCH_MESSAGE",
    "SEARCH_FAILED_MESSAGE",
    "SEARCH_UNAVAILABLE_MESSAGE",
    "SELECT_MESSAGES",
]
