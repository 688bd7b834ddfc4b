"""Data models shared across lookup and directory modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PAYMENT_METHODS = ("NEFT", "RTGS", "IMPS", "UPI")


@dataclass(slots=True)
class BranchRecord:
    """Canonical branch metadata returned by a successful IFSC lookup."""

    bank: str
    ifsc: str
    branch: str
    address: str
    city: str
    district: str
    state: str
    micr: str | None = None
    contact: str | None = None
    upi: bool = True
    rtgs: bool = True
    neft: bool = True
    imps: bool = True

    @property
    def payment_methods(self) -> list[str]:
        """Return supported payment methods in display order."""

        flags = {"NEFT": self.neft, "RTGS": self.rtgs, "IMPS": self.imps, "UPI": self.upi}
        return [method for method in PAYMENT_METHODS if flags[method]]

    def to_dict(self) -> dict[str, Any]:
        """Return the provider-style upper-case mapping for this record."""

        return {
            "BANK": self.bank,
            "IFSC": self.ifsc,
            "BRANCH": self.branch,
            "ADDRESS": self.address,
            "CITY": self.city,
            "DISTRICT": self.district,
            "STATE": self.state,
            "MICR": self.micr,
            "CONTACT": self.contact,
            "UPI": self.upi,
            "RTGS": self.rtgs,
            "NEFT": self.neft,
            "IMPS": self.imps,
        }


@dataclass(slots=True)
class BankSearchParams:
    """Selections made in the Bank → State → District → Branch cascade."""

    bank: str | None = None
    state: str | None = None
    district: str | None = None
    branch: str | None = None
