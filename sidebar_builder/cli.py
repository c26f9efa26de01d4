"""Command-line front door for sidebar-builder.

Parses CLI options, merges them over persisted config defaults, walks the
docs folder, and prints the sidebar tree as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import load_sidebar_options, load_style_name
from .highlight import colorize_json
from .paths import resolve_folder
from .sidebar_model import SidebarItem, SidebarOptions, build_sidebar, files_and_order, folders_and_order

LOG_FORMAT = "%(levelname)s %(message)s"


def _nonnegative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def _log_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sidebar-builder",
        description="Print the ordered sidebar tree of a markdown docs folder as JSON.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Folder to walk. Defaults to <root>/<docs-dir>.",
    )
    parser.add_argument("--root", default=None, help="Project root used for relative paths and links (default: cwd).")
    parser.add_argument("--docs-dir", default=None, help="Folder under root stripped from links (default: docs).")
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="TEXT",
        help="Skip markdown files whose path contains TEXT. Repeatable.",
    )
    parser.add_argument("--no-collapsible", action="store_true", help="Mark folders as not collapsible.")
    parser.add_argument("--collapsed", action="store_true", help="Mark folders as initially collapsed.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--files-only", action="store_true", help="List only the markdown files of PATH.")
    mode.add_argument("--folders-only", action="store_true", help="List only the titled subfolders of PATH.")
    parser.add_argument("--indent", type=_nonnegative_int, default=2, help="JSON indentation (default: 2).")
    parser.add_argument("--style", default=None, help="Pygments style name for colored output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log ignored files (-v) and folder walks (-vv).")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    return parser


def merge_options(args: argparse.Namespace, defaults: SidebarOptions) -> SidebarOptions:
    """Overlay command-line flags on persisted option defaults."""
    return SidebarOptions(
        partial_file_names_to_ignore=(*defaults.partial_file_names_to_ignore, *args.ignore),
        collapsible=False if args.no_collapsible else defaults.collapsible,
        collapsed=True if args.collapsed else defaults.collapsed,
        docs_dir=args.docs_dir if args.docs_dir is not None else defaults.docs_dir,
    )


def collect_items(args: argparse.Namespace, target: Path, options: SidebarOptions, root: Path) -> list[SidebarItem]:
    if args.files_only:
        return list(
            files_and_order(
                target,
                options.partial_file_names_to_ignore,
                root=root,
                docs_dir=options.docs_dir,
            )
        )
    if args.folders_only:
        return list(folders_and_order(target, options, root=root))
    return build_sidebar(target, options, root=root)


def render_items(items: list[SidebarItem], indent: int) -> str:
    """Serialize items to JSON; non-JSON front matter values become strings."""
    return json.dumps(
        [item.to_dict() for item in items],
        indent=indent if indent > 0 else None,
        ensure_ascii=False,
        default=str,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the sidebar for a docs folder.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=_log_level(args.verbose, args.quiet), format=LOG_FORMAT)

    root = Path(args.root).resolve() if args.root is not None else Path.cwd()
    options = merge_options(args, load_sidebar_options())
    target = resolve_folder(args.path if args.path is not None else options.docs_dir, root)
    if not target.exists():
        raise SystemExit(f"Path not found: {target}")
    if not target.is_dir():
        raise SystemExit(f"Not a directory: {target}")

    try:
        items = collect_items(args, target, options, root)
    except OSError as exc:
        raise SystemExit(f"Cannot read {exc.filename or target}: {exc.strerror or exc}") from exc

    output = render_items(items, args.indent)
    if not args.no_color and sys.stdout.isatty():
        style = args.style if args.style is not None else load_style_name()
        output = colorize_json(output, style).rstrip("\n")
    sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
