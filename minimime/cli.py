"""Command-line lookups -- ``minimime report.pdf``."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from . import __version__, get_database
from .errors import LoadError
from .info import Info

console = Console()

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_LOAD_ERROR = 2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minimime",
        description="Look up MIME types by filename, extension or content type.",
    )
    parser.add_argument("queries", nargs="*", metavar="QUERY")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-e", "--ext", action="store_true", help="treat queries as bare extensions")
    mode.add_argument("-t", "--type", action="store_true", help="treat queries as content types")
    mode.add_argument("-l", "--list", action="store_true", help="print database sizes and exit")
    parser.add_argument("--json", action="store_true", help="emit JSON instead of a table")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _render(results: list[tuple[str, Info | None]], as_json: bool) -> None:
    if as_json:
        payload = {q: (info.to_dict() if info else None) for q, info in results}
        console.print_json(json.dumps(payload))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("query")
    table.add_column("extension")
    table.add_column("content type")
    table.add_column("encoding")
    table.add_column("binary")
    for query, info in results:
        if info is None:
            table.add_row(query, "[red]not found[/red]", "", "", "")
        else:
            table.add_row(
                query, info.extension, info.content_type, info.encoding,
                "yes" if info.is_binary else "no",
            )
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    if not args.queries and not args.list:
        parser.error("no queries given")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        db = get_database()
    except LoadError as exc:
        console.print(f"[bold red]error:[/bold red] {exc}")
        return EXIT_LOAD_ERROR

    if args.list:
        console.print(
            f"{db.extension_count} extensions, {db.content_type_count} content types"
        )
        return EXIT_OK

    if args.ext:
        lookup = db.lookup_by_extension
    elif args.type:
        lookup = db.lookup_by_content_type
    else:
        lookup = db.lookup_by_filename

    results = [(q, lookup(q)) for q in args.queries]
    _render(results, args.json)
    return EXIT_NOT_FOUND if any(info is None for _, info in results) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
