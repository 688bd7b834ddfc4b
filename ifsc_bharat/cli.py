"""Command line lookup of Indian bank branches by IFSC code."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence, TextIO

from ifsc_bharat import IFSCBharat, __version__
from ifsc_bharat.db import DEFAULT_SQLITE_DB_PATH
from ifsc_bharat.ingestion.razorpay import get_bank_details_by_ifsc
from ifsc_bharat.ingestion.strategy import LookupStrategy
from ifsc_bharat.readout import build_readout_text
from ifsc_bharat.views.lookup_view import LookupView

__all__ = ["parse_args", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ifsc-lookup", description=__doc__)
    parser.add_argument("code", help="IFSC code, e.g. SBIN0001234")
    parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON output")
    parser.add_argument("--speak", action="store_true", help="Read the result aloud")
    parser.add_argument("--copy", action="store_true", help="Copy the IFSC code to the clipboard")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Store the result in the branch directory used by the bank search",
    )
    parser.add_argument(
        "--db",
        dest="db_path",
        default=str(DEFAULT_SQLITE_DB_PATH),
        help="SQLite database path or SQLAlchemy URL for --remember",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(
    argv: Sequence[str] | None = None,
    *,
    client: LookupStrategy | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = parse_args(argv)
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    facade = IFSCBharat(args.db_path, client=client)
    view = LookupView(lambda code: get_bank_details_by_ifsc(code, client=facade.client))
    view.set_code(args.code)

    record = view.search()
    if record is None:
        print(view.error, file=err)
        return 1

    if args.as_json:
        print(json.dumps(record.to_dict(), indent=2), file=out)
    else:
        print(build_readout_text(record), file=out)

    if args.copy:
        if view.copy_ifsc():
            print(f"Copied {record.ifsc} to clipboard", file=err)
        else:
            print("Clipboard is not available", file=err)
    if args.remember:
        facade.remember(record)
        facade.close()
    if args.speak and not view.read_aloud():
        print("Speech synthesis is not available", file=err)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
