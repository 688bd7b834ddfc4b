"""Tests for IFSC format validation helpers."""

from __future__ import annotations

import pytest

from ifsc_bharat.utils.ifsc import (
    EMPTY_CODE_MESSAGE,
    FORMAT_WARNING_MESSAGE,
    INVALID_CODE_MESSAGE,
    check_ifsc,
    format_warning,
    normalise_ifsc_input,
    validate_ifsc,
)


@pytest.mark.parametrize("code", ["SBIN0001234", "HDFC0000053", "ICIC0ABC123", "UTIB0000000"])
def test_validate_ifsc_accepts_well_formed_codes(code: str) -> None:
    assert validate_ifsc(code) is True


@pytest.mark.parametrize(
    "code",
    [
        "sbin0001234",
        "SBIN000123",
        "SBIN00012345",
        "SBIN1001234",
        "SBI00001234",
        "ABCD1234567",
        "SBIN0-01234",
        " SBIN0001234",
        "",
    ],
)
def test_validate_ifsc_rejects_malformed_codes(code: str) -> None:
    assert validate_ifsc(code) is False


def test_validate_ifsc_rejects_non_strings() -> None:
    assert validate_ifsc(None) is False  # type: ignore[arg-type]


def test_normalise_ifsc_input_uppercases_and_strips() -> None:
    assert normalise_ifsc_input("  sbin0001234 ") == "SBIN0001234"
    assert normalise_ifsc_input(None) == ""


def test_format_warning_is_advisory_only_for_non_empty_codes() -> None:
    assert format_warning("") is None
    assert format_warning("SBIN0001234") is None
    assert format_warning("SBIN") == FORMAT_WARNING_MESSAGE


def test_check_ifsc_messages() -> None:
    assert check_ifsc("") == EMPTY_CODE_MESSAGE
    assert check_ifsc("ABCD1234567") == INVALID_CODE_MESSAGE
    assert check_ifsc("SBIN0001234") is None
