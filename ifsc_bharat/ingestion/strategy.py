"""Abstractions for pluggable IFSC lookup providers."""

from __future__ import annotations

from typing import Protocol

from ifsc_bharat.ingestion.models import BranchRecord


class LookupStrategy(Protocol):
    """Contract for resolving a validated IFSC code into branch metadata.

    Implementations raise on transport or provider failures; the public
    lookup helpers translate those failures into an absent result.
    """

    def fetch(self, code: str) -> BranchRecord:
        ...  # pragma: no cover - protocol definition


__all__ = ["LookupStrategy"]
