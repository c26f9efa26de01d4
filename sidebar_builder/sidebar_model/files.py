"""Markdown file discovery and ordering for a single folder."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..front_matter import read_metadata
from ..ignore import PartialNameMatcher
from ..paths import (
    DEFAULT_DOCS_DIR,
    INDEX_FILENAME,
    MARKDOWN_SUFFIX,
    derive_link,
    normalize_path,
    resolve_folder,
    resolve_root,
)
from .types import FileEntry, coerce_order, sort_by_order

logger = logging.getLogger(__name__)


def list_markdown_files(directory: Path) -> list[Path]:
    """Return ``*.md`` files directly inside ``directory`` sorted by name.

    Hidden files are skipped. Listing errors propagate.
    """
    files: list[Path] = []
    with os.scandir(directory) as entries:
        for child in entries:
            name = child.name
            if name.startswith(".") or not name.endswith(MARKDOWN_SUFFIX):
                continue
            if not child.is_file():
                continue
            files.append(Path(normalize_path(child.path)))
    files.sort(key=lambda path: path.name)
    return files


def build_file_entry(file_path: Path, root: Path, docs_dir: str = DEFAULT_DOCS_DIR) -> FileEntry:
    """Read ``file_path`` front matter and project it into a ``FileEntry``."""
    display_path = normalize_path(file_path)
    metadata = read_metadata(file_path)
    if not metadata.has_title:
        logger.warning("Missing Title Front Matter | %s", display_path)

    title = metadata.title
    return FileEntry(
        text=None if title is None else str(title),
        link=derive_link(file_path, root, docs_dir),
        order=coerce_order(metadata.data.get("order"), display_path),
        data=dict(metadata.data),
    )


def _files_and_order(
    folder: Path,
    matcher: PartialNameMatcher,
    root: Path,
    docs_dir: str,
) -> list[FileEntry]:
    entries: list[FileEntry] = []
    for file_path in list_markdown_files(folder):
        if file_path.name == INDEX_FILENAME:
            continue
        if matcher.is_ignored(file_path):
            logger.info("Ignored File | %s", normalize_path(file_path))
            continue
        entries.append(build_file_entry(file_path, root, docs_dir))
    return sort_by_order(entries)


def files_and_order(
    folder_path: str | os.PathLike[str],
    files_to_ignore: str | Iterable[str] | None = (),
    *,
    root: str | os.PathLike[str] | None = None,
    docs_dir: str = DEFAULT_DOCS_DIR,
) -> list[FileEntry]:
    """List the markdown documents directly inside ``folder_path`` by order.

    Relative ``folder_path`` values are resolved against ``root`` (the current
    working directory when omitted). The folder's own ``index.md`` and files
    whose path contains any of ``files_to_ignore`` are left out. Entries
    without ``order`` front matter sort as ``0``; ties keep file-name order.
    """
    root_path = resolve_root(root)
    folder = resolve_folder(folder_path, root_path)
    matcher = PartialNameMatcher.from_patterns(files_to_ignore)
    return _files_and_order(folder, matcher, root_path, docs_dir)


__all__ = [
    "build_file_entry",
    "files_and_order",
    "list_markdown_files",
]
