"""Static bank name → customer support email lookup."""

from __future__ import annotations

from typing import Final, Mapping

SUPPORT_EMAILS: Final[Mapping[str, str]] = {
    "State Bank of India": "customercare@sbi.co.in",
    "HDFC Bank": "support@hdfcbank.com",
    "ICICI Bank": "customer.care@icicibank.com",
    "Axis Bank": "customer.service@axisbank.com",
    "Bank of Baroda": "customercare@bankofbaroda.com",
    "Punjab National Bank": "customercare@pnb.co.in",
    "Canara Bank": "customercare@canarabank.com",
    "Union Bank of India": "customercare@unionbankofindia.com",
    "Bank of India": "customercare@bankofindia.co.in",
    "IDBI Bank": "customercare@idbi.co.in",
    "Indian Bank": "customercare@indianbank.co.in",
    "Central Bank of India": "customercare@centralbank.co.in",
}


def get_customer_support_email(bank: str | None) -> str | None:
    """Return the support address for an exact bank display name."""

    if not bank:
        return None
    return SUPPORT_EMAILS.get(bank)


__all__ = ["SUPPORT_EMAILS", "get_customer_support_email"]
