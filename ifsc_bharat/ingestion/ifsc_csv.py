"""Parse Razorpay's published ``IFSC.csv`` dataset into branch records."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from ifsc_bharat.ingestion.models import BranchRecord
from ifsc_bharat.utils.ifsc import validate_ifsc
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

REQUIRED_COLUMNS = ("BANK", "IFSC", "BRANCH", "DISTRICT", "STATE")
_TRUE_VALUES = {"true", "yes", "y", "1"}


def _flag(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def _text(value: object) -> str | None:
    cleaned = str(value).strip() if value is not None else ""
    return cleaned or None


class IFSCCSVParser:
    """Read the bank/branch dataset with pandas and return the valid records."""

    def parse(self, csv_path: str | Path) -> list[BranchRecord]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(path)

        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
        frame.columns = [str(column).strip().upper() for column in frame.columns]
        self._validate_header(frame.columns)

        records: list[BranchRecord] = []
        skipped = 0
        for row in frame.to_dict(orient="records"):
            ifsc = (_text(row.get("IFSC")) or "").upper()
            if not validate_ifsc(ifsc):
                skipped += 1
                continue
            records.append(
                BranchRecord(
                    bank=_text(row.get("BANK")) or "",
                    ifsc=ifsc,
                    branch=_text(row.get("BRANCH")) or "",
                    address=_text(row.get("ADDRESS")) or "",
                    city=_text(row.get("CITY")) or _text(row.get("CENTRE")) or "",
                    district=_text(row.get("DISTRICT")) or "",
                    state=_text(row.get("STATE")) or "",
                    micr=_text(row.get("MICR")),
                    contact=_text(row.get("CONTACT")),
                    upi=_flag(row.get("UPI", "")),
                    rtgs=_flag(row.get("RTGS", "")),
                    neft=_flag(row.get("NEFT", "")),
                    imps=_flag(row.get("IMPS", "")),
                )
            )
        if skipped:
            LOGGER.warning("Skipped %s rows with malformed IFSC codes in %s", skipped, path)
        return records

    @staticmethod
    def _validate_header(columns: Iterable[str]) -> None:
        missing = [column for column in REQUIRED_COLUMNS if column not in set(columns)]
        if missing:
            raise ValueError(f"IFSC dataset is missing required columns: {', '.join(missing)}")


__all__ = ["IFSCCSVParser", "REQUIRED_COLUMNS"]
