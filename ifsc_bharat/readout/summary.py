"""Assemble the multi-line readout for a :class:`BranchRecord`."""

from __future__ import annotations

from ifsc_bharat.ingestion.models import BranchRecord
from ifsc_bharat.readout.support import get_customer_support_email

NOT_AVAILABLE = "Not Available"


def build_readout_text(record: BranchRecord) -> str:
    """Return one ``Label: value`` line per field, ending with payment methods."""

    lines = [
        ("Bank", record.bank),
        ("Branch", record.branch),
        ("IFSC Code", record.ifsc),
        ("MICR", record.micr or NOT_AVAILABLE),
        ("City", record.city),
        ("District", record.district),
        ("State", record.state),
        ("Address", record.address),
        ("Contact", record.contact or NOT_AVAILABLE),
        ("Customer Support Email", get_customer_support_email(record.bank) or NOT_AVAILABLE),
        ("Payment Methods", ", ".join(record.payment_methods)),
    ]
    return "\n".join(f"{label}: {value}" for label, value in lines)


__all__ = ["NOT_AVAILABLE", "build_readout_text"]
