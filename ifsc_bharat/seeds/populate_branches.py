"""CLI + helpers for populating (seeding) the branch directory from IFSC.csv."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ifsc_bharat.db import DEFAULT_SQLITE_DB_PATH
from ifsc_bharat.db.directory_manager import BranchDirectoryManager, PersistenceResult
from ifsc_bharat.ingestion.ifsc_csv import IFSCCSVParser
from ifsc_bharat.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["seed_branch_directory", "parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--csv", dest="csv_path", required=True, help="Path to IFSC.csv")
    parser.add_argument(
        "--db",
        dest="db_path",
        default=str(DEFAULT_SQLITE_DB_PATH),
        help="SQLite database path or SQLAlchemy URL",
    )
    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        help="Parse the dataset without writing to the database",
    )
    return parser.parse_args(argv)


def seed_branch_directory(
    csv_path: str | Path,
    *,
    db_path: str | Path = DEFAULT_SQLITE_DB_PATH,
    dry_run: bool = False,
) -> PersistenceResult:
    """Load every valid row of ``csv_path`` into the branch directory."""

    records = IFSCCSVParser().parse(csv_path)
    LOGGER.info("Parsed %s branches from %s", len(records), csv_path)
    if dry_run:
        LOGGER.info("Dry-run enabled; skipping directory writes")
        return PersistenceResult()
    with BranchDirectoryManager(db_path) as manager:
        result = manager.insert_branches(records)
    LOGGER.info(
        "Seeding finished: inserted %s branches, updated %s branches (total %s)",
        result.inserted,
        result.updated,
        result.total,
    )
    return result


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    seed_branch_directory(args.csv_path, db_path=args.db_path, dry_run=args.dry_run)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
