"""Public interface for the ifsc_bharat package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from ifsc_bharat.db import DEFAULT_SQLITE_DB_PATH
from ifsc_bharat.db.directory_manager import BranchDirectoryManager, PersistenceResult
from ifsc_bharat.ingestion.models import BankSearchParams, BranchRecord
from ifsc_bharat.ingestion.razorpay import (
    IFSCLookupError,
    LookupConfig,
    RazorpayIFSCClient,
    get_bank_details_by_ifsc,
)
from ifsc_bharat.ingestion.strategy import LookupStrategy
from ifsc_bharat.readout import build_readout_text, get_customer_support_email
from ifsc_bharat.utils.ifsc import check_ifsc, normalise_ifsc_input, validate_ifsc
from ifsc_bharat.utils.logger import get_logger
from ifsc_bharat.views.search_view import SEARCH_UNAVAILABLE_MESSAGE

__all__ = [
    "__version__",
    "BankSearchParams",
    "BranchDirectoryManager",
    "BranchRecord",
    "IFSCBharat",
    "IFSCLookupError",
    "LookupConfig",
    "PersistenceResult",
    "RazorpayIFSCClient",
    "get_bank_details_by_ifsc",
    "get_customer_support_email",
    "seed_branch_directory",
    "validate_ifsc",
]

try:
    __version__ = importlib_metadata.version("ifsc-bharat")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"

LOGGER = get_logger(__name__)


class IFSCBharat:
    """Package facade tying the IFSC lookup to the optional branch directory."""

    __slots__ = ("config", "client", "db_location", "_directory")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        db_config: str | Path | None = None,
        *,
        client: LookupStrategy | None = None,
        config: LookupConfig | None = None,
    ) -> None:
        """Configure the lookup provider and where the branch directory lives.

        ``db_config`` accepts a SQLite file path or a SQLAlchemy URL and
        defaults to the bundled ``branches.db``. The directory is only opened
        when a bank search or :meth:`remember` needs it.
        """

        self.config = config or LookupConfig.from_env()
        self.client: LookupStrategy = client or RazorpayIFSCClient(self.config)
        self.db_location: str | Path = db_config or DEFAULT_SQLITE_DB_PATH
        self._directory: BranchDirectoryManager | None = None

    @staticmethod
    def validate(code: str) -> bool:
        return validate_ifsc(code)

    def lookup(self, code: str) -> BranchRecord | None:
        """Resolve ``code`` (case-insensitive input) into a :class:`BranchRecord`.

        Raises ``ValueError`` when the code is empty or malformed; returns
        ``None`` when the provider cannot be reached or has no such branch.
        """

        normalised = normalise_ifsc_input(code)
        problem = check_ifsc(normalised)
        if problem is not None:
            raise ValueError(problem)
        return get_bank_details_by_ifsc(normalised, client=self.client)

    @staticmethod
    def support_email(bank: str) -> str | None:
        return get_customer_support_email(bank)

    @staticmethod
    def readout_text(record: BranchRecord) -> str:
        return build_readout_text(record)

    def directory(self) -> BranchDirectoryManager:
        if self._directory is None:
            self._directory = BranchDirectoryManager(self.db_location)
        return self._directory

    def remember(self, record: BranchRecord) -> PersistenceResult:
        """Store a resolved record so the bank search can find it later."""

        return self.directory().insert_branches([record])

    def search_available(self) -> bool:
        """Return True once the branch directory holds at least one branch.

        A directory that cannot be opened or queried (for example a
        read-only install location) counts as unavailable.
        """

        try:
            return self.directory().count() > 0
        except SQLAlchemyError as exc:
            LOGGER.error("Branch directory unavailable at %s: %s", self.db_location, exc)
            return False

    def search_notice(self) -> str | None:
        """Return the notice to show while the bank search has no data."""

        return None if self.search_available() else SEARCH_UNAVAILABLE_MESSAGE

    def banks(self) -> list[str]:
        return self.directory().list_banks()

    def states(self, bank: str | None = None) -> list[str]:
        return self.directory().list_states(bank)

    def districts(self, state: str, bank: str | None = None) -> list[str]:
        return self.directory().list_districts(state, bank)

    def branches(
        self, district: str, *, state: str | None = None, bank: str | None = None
    ) -> list[str]:
        return self.directory().list_branches(district, state=state, bank=bank)

    def find_ifsc(self, params: BankSearchParams) -> BranchRecord | None:
        return self.directory().find_branch(params)

    def close(self) -> None:
        if self._directory is not None:
            self._directory.close()
            self._directory = None


def __getattr__(name: str) -> Any:
    """Lazily import the dataset seeder to avoid a mandatory pandas import."""

    if name == "seed_branch_directory":
        from ifsc_bharat.seeds.populate_branches import seed_branch_directory as _seed

        return _seed
    raise AttributeError(f"module 'ifsc_bharat' has no attribute {name}")
