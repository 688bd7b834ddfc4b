from __future__ import annotations

from typing import Any, Callable

import pytest

from ifsc_bharat.ingestion.models import BranchRecord

HDFC_PAYLOAD: dict[str, Any] = {
    "BANK": "HDFC Bank",
    "IFSC": "HDFC0000053",
    "BRANCH": "BANGALORE - KORAMANGALA",
    "ADDRESS": "SHOP NO 1 KORAMANGALA BANGALORE 560034",
    "CITY": "BANGALORE",
    "DISTRICT": "BANGALORE URBAN",
    "STATE": "KARNATAKA",
    "MICR": "560240004",
    "CONTACT": "+911800227227",
    "UPI": True,
    "RTGS": True,
    "NEFT": True,
    "IMPS": True,
}


def _build_record(**overrides: Any) -> BranchRecord:
    values: dict[str, Any] = {
        "bank": "HDFC Bank",
        "ifsc": "HDFC0000053",
        "branch": "BANGALORE - KORAMANGALA",
        "address": "SHOP NO 1 KORAMANGALA BANGALORE 560034",
        "city": "BANGALORE",
        "district": "BANGALORE URBAN",
        "state": "KARNATAKA",
        "micr": "560240004",
        "contact": "+911800227227",
    }
    values.update(overrides)
    return BranchRecord(**values)


@pytest.fixture()
def make_record() -> Callable[..., BranchRecord]:
    """Factory for branch records based on HDFC0000053 with field overrides."""

    return _build_record


@pytest.fixture()
def hdfc_record() -> BranchRecord:
    return _build_record()


@pytest.fixture()
def hdfc_payload() -> dict[str, Any]:
    return dict(HDFC_PAYLOAD)
