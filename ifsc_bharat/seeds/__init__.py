"""Database seeding utilities for :mod:`ifsc_bharat`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = ["seed_branch_directory"]

if TYPE_CHECKING:  # pragma: no cover - import only for static analyzers
    from ifsc_bharat.seeds.populate_branches import seed_branch_directory as seed_branch_directory


def __getattr__(name: str) -> Any:
    """Lazily expose seed helpers so pandas is only imported when seeding."""

    if name == "seed_branch_directory":
        from ifsc_bharat.seeds.populate_branches import seed_branch_directory as _seed

        return _seed
    raise AttributeError(f"module 'ifsc_bharat.seeds' has no attribute {name}")
