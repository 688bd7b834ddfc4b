"""IFSC-specific helpers and invariants used across the package."""

from __future__ import annotations

import re

IFSC_PATTERN = re.compile(r"^[A-Z]{4}0[A-Z0-9]{6}$")

EMPTY_CODE_MESSAGE = "Please enter an IFSC code"
INVALID_CODE_MESSAGE = "Please enter a valid IFSC code"
FETCH_FAILED_MESSAGE = "Failed to fetch bank details. Please try again."
FORMAT_WARNING_MESSAGE = (
    "Invalid IFSC format. IFSC should be 11 characters (e.g., SBIN0001234)."
)


def validate_ifsc(code: str) -> bool:
    """Return True when ``code`` has the shape ``AAAA0XXXXXX``.

    The check is case-sensitive: callers upper-case user input first (see
    :func:`normalise_ifsc_input`).
    """

    if not isinstance(code, str):
        return False
    return IFSC_PATTERN.fullmatch(code) is not None


def normalise_ifsc_input(raw: str | None) -> str:
    """Upper-case and trim free-form user input."""

    if not raw:
        return ""
    return raw.strip().upper()


def format_warning(code: str) -> str | None:
    """Return advisory text for a non-empty code that fails the format rule."""

    if not code:
        return None
    if validate_ifsc(code):
        return None
    return FORMAT_WARNING_MESSAGE


def check_ifsc(code: str) -> str | None:
    """Return the user-facing validation error for ``code`` or ``None``."""

    if not code:
        return EMPTY_CODE_MESSAGE
    if not validate_ifsc(code):
        return INVALID_CODE_MESSAGE
    return None


__all__ = [
    "EMPTY_CODE_MESSAGE",
    "FETCH_FAILED_MESSAGE",
    "FORMAT_WARNING_MESSAGE",
    "IFSC_PATTERN",
    "INVALID_CODE_MESSAGE",
    "check_ifsc",
    "format_warning",
    "normalise_ifsc_input",
    "validate_ifsc",
]
