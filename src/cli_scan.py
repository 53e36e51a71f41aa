import argparse
import json
import sys
from typing import Optional

from src.config.settings import configure_logging
from src.container import container
from src.entities.scan_result import ScanResult
from src.exceptions import ArchiveIOError, InvalidArgumentError, NullInputError
from src.ports.archives.archive_repository_port import EntryFilter
from src.use_cases.archives.entry_filters import (
    all_of,
    directories_only,
    files_only,
    name_endswith,
    name_matches,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archive-scan",
        description="List the entries of a ZIP/JAR archive under a given path.",
    )
    parser.add_argument(
        "location",
        help="Archive path or URL, e.g. app.jar or jar:file:/opt/app.jar!/com/acme/",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Include descendants at any depth, not only immediate children",
    )
    parser.add_argument(
        "--suffix",
        action="append",
        default=[],
        help="Only keep entries ending with this suffix (repeatable)",
    )
    parser.add_argument(
        "--pattern", default=None, help="Only keep entries matching this glob"
    )
    kind = parser.add_mutually_exclusive_group()
    kind.add_argument("--files-only", action="store_true", help="Skip directories")
    kind.add_argument("--dirs-only", action="store_true", help="Skip files")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", action="store_true", help="Print a JSON document")
    output.add_argument(
        "--pretty", action="store_true", help="Print a table with colors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log scanning progress"
    )
    return parser


def build_entry_filter(args: argparse.Namespace) -> Optional[EntryFilter]:
    filters: list[EntryFilter] = []
    if args.files_only:
        filters.append(files_only)
    if args.dirs_only:
        filters.append(directories_only)
    if args.suffix:
        filters.append(name_endswith(*args.suffix))
    if args.pattern:
        filters.append(name_matches(args.pattern))
    if not filters:
        return None
    return all_of(*filters)


def _print_pretty(result: ScanResult) -> None:
    from rich import box
    from rich.console import Console
    from rich.table import Table

    title = result.relative_path or "/"
    table = Table(
        title=f"{title} ({'recursive' if result.recursive else 'immediate'})",
        box=box.ROUNDED,
    )
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Size", justify="right")
    table.add_column("Compressed", justify="right")
    for entry in result.entries:
        table.add_row(
            entry.name,
            entry.entry_type,
            str(entry.size),
            str(entry.compressed_size),
        )
    Console(soft_wrap=True).print(table)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        configure_logging()

    try:
        result = container.get_scan_entries_use_case().execute(
            args.location, args.recursive, build_entry_filter(args)
        )
    except (InvalidArgumentError, NullInputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ArchiveIOError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        document = {
            "relative_path": result.relative_path,
            "recursive": result.recursive,
            "entries": [e.get_details() for e in result.entries],
        }
        print(json.dumps(document, ensure_ascii=False, indent=2))
    elif args.pretty:
        _print_pretty(result)
    else:
        for name in result.names():
            print(name)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
