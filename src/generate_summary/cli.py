"""Command line entry point.

Without a subcommand the program acts as an mdBook preprocessor: it reads
``[context, book]`` JSON from stdin and writes the regenerated book to stdout.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence, TextIO

from generate_summary.config import BOOK_TOML, PREPROCESSOR_NAME, config_from_table, load_book_toml
from generate_summary.exceptions import SummaryError
from generate_summary.preprocessor import generate_summary, run_preprocessor, supports_renderer
from generate_summary.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_OVERRIDES = (
    "get_chapter_name_from_file",
    "chapter_file_name",
    "create_missing_chapter_files",
    "ignore_missing_chapter_files",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"mdbook-{PREPROCESSOR_NAME}",
        description="Generate SUMMARY.md from the layout of an mdBook source directory.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    subparsers = parser.add_subparsers(dest="command")

    supports = subparsers.add_parser("supports", help="Check whether a renderer is supported")
    supports.add_argument("renderer")

    generate = subparsers.add_parser("generate", help="Write SUMMARY.md without running mdBook")
    generate.add_argument("book_dir", nargs="?", default=".", help="Directory containing book.toml")
    generate.add_argument("--src", help="Source directory relative to BOOK_DIR (default: book.src or 'src')")
    generate.add_argument("--chapter-file-name", dest="chapter_file_name", help="Chapter file base name")
    for flag in ("get-chapter-name-from-file", "create-missing-chapter-files", "ignore-missing-chapter-files"):
        generate.add_argument(f"--{flag}", action=argparse.BooleanOptionalAction, default=None)
    generate.add_argument("--stdout", action="store_true", help="Print the summary instead of writing it")
    return parser


def main(argv: Sequence[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    if args.verbose:
        configure_logging("DEBUG" if args.verbose > 1 else "INFO")
    else:
        configure_logging()

    if args.command == "supports":
        return 0 if supports_renderer(args.renderer) else 1

    try:
        if args.command == "generate":
            return _generate(args, stdout)
        book = run_preprocessor(stdin.read())
    except SummaryError as exc:
        logger.error("%s", exc)
        return 1

    json.dump(book, stdout)
    return 0


def _generate(args: argparse.Namespace, stdout: TextIO) -> int:
    book_dir = Path(args.book_dir)
    table, src = load_book_toml(book_dir / BOOK_TOML)
    for option in _OVERRIDES:
        value = getattr(args, option)
        if value is not None:
            table[option] = value

    config = config_from_table(table)
    result = generate_summary(book_dir / (args.src or src), config, write=not args.stdout)
    if args.stdout:
        stdout.write(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
