"""
Command line entry point.

Usage:
    python -m data_utilities title "the lord of the rings"
    python -m data_utilities csv uploads/grades.csv --no-labels
    python -m data_utilities overlap abcdefg fgjkli
    python -m data_utilities url /var/www/html/a.txt --server-name example.com \
        --document-root /var/www/html
    python -m data_utilities exists https://example.com
"""

import argparse
import json
import sys
from typing import List, Optional

from data_utilities.csv_loader import load_csv_to_list
from data_utilities.errors import DataUtilitiesError
from data_utilities.logger import console_log, get_logger
from data_utilities.overlap import overlap
from data_utilities.title_formatter import load_word_exceptions, title_case
from data_utilities.url_tools import DEFAULT_TIMEOUT, url_exists, url_from_path

# ============================================================
# CLI argument parsing
# ============================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="data-utilities",
        description="Small text and web helpers.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    title = commands.add_parser("title", help="Convert text to Title Case")
    title.add_argument("text")
    title.add_argument(
        "--exceptions",
        help="JSON file with extra lower_case_words / all_caps_words / "
        "camel_case_words / space_equivalents",
    )

    csv_cmd = commands.add_parser("csv", help="Print a CSV file's records as JSON")
    csv_cmd.add_argument("file")
    csv_cmd.add_argument(
        "--no-labels",
        dest="first_row_labels",
        action="store_false",
        help="The first row is data, not column labels",
    )

    ov = commands.add_parser("overlap", help="Suffix of A that is a prefix of B")
    ov.add_argument("a")
    ov.add_argument("b")
    ov.add_argument("--no-swap", dest="swap", action="store_false")

    url = commands.add_parser("url", help="Public URL of a file under the document root")
    url.add_argument("path")
    url.add_argument("--server-name", required=True)
    url.add_argument("--https", action="store_true")
    url.add_argument("--context-prefix", default="")
    url.add_argument("--document-root", required=True)
    url.add_argument("--base-path")

    exists = commands.add_parser("exists", help="Does a URL answer with status < 400?")
    exists.add_argument("url")
    exists.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)

    return parser


# ============================================================
# COMMANDS
# ============================================================


def _run(args: argparse.Namespace) -> int:
    if args.command == "title":
        exceptions = load_word_exceptions(args.exceptions) if args.exceptions else None
        print(title_case(args.text, exceptions))
        return 0

    if args.command == "csv":
        records = load_csv_to_list(args.file, args.first_row_labels)
        if records is None:
            console_log("No file given", level="error")
            return 1
        print(json.dumps(records, indent=2, ensure_ascii=False))
        return 0

    if args.command == "overlap":
        print(overlap(args.a, args.b, args.swap))
        return 0

    if args.command == "url":
        server_vars = {
            "HTTPS": "on" if args.https else "off",
            "SERVER_NAME": args.server_name,
            "CONTEXT_PREFIX": args.context_prefix,
            "CONTEXT_DOCUMENT_ROOT": args.document_root,
        }
        result = url_from_path(args.path, server_vars, args.base_path)
        if result is None:
            console_log(f"Cannot compute a URL for {args.path}", level="error")
            return 1
        print(result)
        return 0

    found = url_exists(args.url, timeout=args.timeout)
    print("yes" if found else "no")
    return 0 if found else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return _run(args)
    except (DataUtilitiesError, OSError) as e:
        get_logger().error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
