"""SQLAlchemy-backed directory of bank branches used by the bank search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, cast

from sqlalchemy import Boolean, Column, String, create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from ifsc_bharat.db import DEFAULT_SQLITE_DB_PATH
from ifsc_bharat.ingestion.models import BankSearchParams, BranchRecord
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Base(DeclarativeBase):
    pass


class _Branch(Base):
    __tablename__ = "branches"

    ifsc = Column(String(11), primary_key=True)
    bank = Column(String, nullable=False, index=True)
    branch = Column(String, nullable=False)
    address = Column(String, nullable=False, default="")
    city = Column(String, nullable=False, default="")
    district = Column(String, nullable=False, index=True)
    state = Column(String, nullable=False, index=True)
    micr = Column(String, nullable=True)
    contact = Column(String, nullable=True)
    upi = Column(Boolean, nullable=False, default=True)
    rtgs = Column(Boolean, nullable=False, default=True)
    neft = Column(Boolean, nullable=False, default=True)
    imps = Column(Boolean, nullable=False, default=True)


@dataclass(slots=True)
class PersistenceResult:
    """Represents how many rows were inserted or updated in a batch."""

    inserted: int = 0
    updated: int = 0

    @property
    def total(self) -> int:
        """Return the total number of affected rows."""

        return self.inserted + self.updated


def _database_url(location: str | Path) -> str:
    if isinstance(location, str) and "://" in location:
        return location
    db_path = Path(location).expanduser().resolve()
    return f"sqlite:///{db_path}"


class BranchDirectoryManager:
    """Store branch records and answer the Bank → State → District → Branch cascade.

    ``location`` is either a filesystem path for SQLite or any SQLAlchemy
    database URL (``postgresql://...``, ``mysql+pymysql://...``).
    """

    def __init__(self, location: str | Path = DEFAULT_SQLITE_DB_PATH) -> None:
        self.url = _database_url(location)
        connect_args = {"check_same_thread": False} if self.url.startswith("sqlite") else {}
        self.engine: Engine = create_engine(
            self.url,
            echo=False,
            future=True,
            connect_args=connect_args,
        )
        Base.metadata.create_all(self.engine)
        self._SessionFactory: sessionmaker[Session] = sessionmaker(
            bind=self.engine, expire_on_commit=False, future=True
        )

    def insert_branches(self, rows: Sequence[BranchRecord]) -> PersistenceResult:
        """Insert new branches and update existing ones keyed by IFSC."""

        result = PersistenceResult()
        with self._SessionFactory() as session:
            for row in rows:
                values = {
                    "bank": row.bank,
                    "branch": row.branch,
                    "address": row.address,
                    "city": row.city,
                    "district": row.district,
                    "state": row.state,
                    "micr": row.micr,
                    "contact": row.contact,
                    "upi": row.upi,
                    "rtgs": row.rtgs,
                    "neft": row.neft,
                    "imps": row.imps,
                }
                existing = session.get(_Branch, row.ifsc)
                if existing is None:
                    session.add(_Branch(ifsc=row.ifsc, **values))
                    result.inserted += 1
                else:
                    for key, value in values.items():
                        setattr(existing, key, value)
                    result.updated += 1
            session.commit()
        LOGGER.info(
            "Inserted %s branches, updated %s branches (total %s)",
            result.inserted,
            result.updated,
            result.total,
        )
        return result

    def count(self) -> int:
        with self._SessionFactory() as session:
            return int(session.execute(select(func.count()).select_from(_Branch)).scalar_one())

    def list_banks(self) -> list[str]:
        return self._distinct(_Branch.bank)

    def list_states(self, bank: str | None = None) -> list[str]:
        return self._distinct(_Branch.state, bank=bank)

    def list_districts(self, state: str, bank: str | None = None) -> list[str]:
        return self._distinct(_Branch.district, bank=bank, state=state)

    def list_branches(
        self,
        district: str,
        *,
        state: str | None = None,
        bank: str | None = None,
    ) -> list[str]:
        return self._distinct(_Branch.branch, bank=bank, state=state, district=district)

    def find_branch(self, params: BankSearchParams) -> BranchRecord | None:
        """Return the first branch matching every selection in ``params``."""

        with self._SessionFactory() as session:
            stmt = self._filtered(
                select(_Branch),
                bank=params.bank,
                state=params.state,
                district=params.district,
                branch=params.branch,
            ).order_by(_Branch.ifsc)
            model = session.execute(stmt).scalars().first()
            if model is None:
                return None
            return self._to_record(cast(_Branch, model))

    def _distinct(self, column, **filters: str | None) -> list[str]:
        with self._SessionFactory() as session:
            stmt = self._filtered(select(column).distinct(), **filters).order_by(column)
            return [value for value in session.execute(stmt).scalars() if value]

    @staticmethod
    def _filtered(stmt, **filters: str | None):
        for name, value in filters.items():
            if value:
                stmt = stmt.where(getattr(_Branch, name) == value)
        return stmt

    @staticmethod
    def _to_record(model: _Branch) -> BranchRecord:
        return BranchRecord(
            bank=cast(str, model.bank),
            ifsc=cast(str, model.ifsc),
            branch=cast(str, model.branch),
            address=cast(str, model.address),
            city=cast(str, model.city),
            district=cast(str, model.district),
            state=cast(str, model.state),
            micr=cast("str | None", model.micr),
            contact=cast("str | None", model.contact),
            upi=bool(model.upi),
            rtgs=bool(model.rtgs),
            neft=bool(model.neft),
            imps=bool(model.imps),
        )

    def close(self) -> None:  # pragma: no cover - trivial
        self.engine.dispose()

    def __enter__(self) -> "BranchDirectoryManager":  # pragma: no cover - trivial
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - trivial
        self.close()


__all__ = ["BranchDirectoryManager", "PersistenceResult"]
