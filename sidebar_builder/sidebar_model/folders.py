"""Recursive folder discovery and ordering.

A subfolder appears in the sidebar only when it holds an ``index.md`` whose
front matter declares a ``title``. Everything beneath a folder that fails
this gate is invisible.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from ..front_matter import read_metadata
from ..ignore import PartialNameMatcher
from ..paths import INDEX_FILENAME, normalize_path, resolve_folder, resolve_root
from .files import _files_and_order
from .types import FolderNode, SidebarItem, SidebarOptions, coerce_order, sort_by_order

logger = logging.getLogger(__name__)


def list_subdirectories(directory: Path) -> list[Path]:
    """Return direct subdirectories of ``directory`` sorted by name.

    Hidden directories are included; an ``index.md`` still gates them.
    """
    folders: list[Path] = []
    with os.scandir(directory) as entries:
        for child in entries:
            if not child.is_dir():
                continue
            folders.append(Path(normalize_path(child.path)))
    folders.sort(key=lambda path: path.name)
    return folders


def _real_path(path: Path) -> str:
    return normalize_path(os.path.realpath(path))


class _FolderWalker:
    """Depth-first walk sharing one frozen options value and root."""

    def __init__(self, options: SidebarOptions, root: Path) -> None:
        self.options = options
        self.root = root
        self.matcher = PartialNameMatcher.from_patterns(options.partial_file_names_to_ignore)

    def folder_node(self, folder: Path, ancestors: frozenset[str]) -> FolderNode | None:
        """Build the node for ``folder`` or ``None`` when it is gated out."""
        index_path = folder / INDEX_FILENAME
        if not index_path.is_file():
            return None

        metadata = read_metadata(index_path)
        display_index = normalize_path(index_path)
        if not metadata.has_title:
            logger.warning("Missing Title Front Matter | %s", display_index)
            return None

        items: list[SidebarItem] = [
            *_files_and_order(folder, self.matcher, self.root, self.options.docs_dir),
            *self.folders(folder, ancestors),
        ]
        return FolderNode(
            text=str(metadata.title),
            items=tuple(sort_by_order(items)),
            order=coerce_order(metadata.data.get("order"), display_index),
            collapsible=self.options.is_collapsible,
            collapsed=self.options.is_collapsed,
            path=folder,
        )

    def folders(self, folder: Path, ancestors: frozenset[str]) -> list[FolderNode]:
        logger.debug("folders_and_order: %s", normalize_path(folder))
        ancestors = ancestors | {_real_path(folder)}
        nodes: list[FolderNode] = []
        for subfolder in list_subdirectories(folder):
            if _real_path(subfolder) in ancestors:
                logger.warning("Symlink Cycle | %s", normalize_path(subfolder))
                continue
            node = self.folder_node(subfolder, ancestors)
            if node is not None:
                nodes.append(node)
        return sort_by_order(nodes)


def folders_and_order(
    folder_path: str | os.PathLike[str],
    options: SidebarOptions | Mapping[str, object] | None = None,
    *,
    root: str | os.PathLike[str] | None = None,
) -> list[FolderNode]:
    """Recursively collect the titled subfolders of ``folder_path`` by order.

    Each ``FolderNode`` holds its own markdown files and nested folders merged
    into one list sorted by ``order``. ``options`` may be a ``SidebarOptions``
    or a plain mapping and is shared unchanged by the whole walk.
    """
    resolved_options = SidebarOptions.coerce(options)
    root_path = resolve_root(root)
    folder = resolve_folder(folder_path, root_path)
    return _FolderWalker(resolved_options, root_path).folders(folder, frozenset())


def build_sidebar(
    folder_path: str | os.PathLike[str],
    options: SidebarOptions | Mapping[str, object] | None = None,
    *,
    root: str | os.PathLike[str] | None = None,
) -> list[SidebarItem]:
    """Return the files and titled subfolders of ``folder_path`` sorted together."""
    resolved_options = SidebarOptions.coerce(options)
    root_path = resolve_root(root)
    folder = resolve_folder(folder_path, root_path)
    walker = _FolderWalker(resolved_options, root_path)
    items: list[SidebarItem] = [
        *_files_and_order(folder, walker.matcher, root_path, resolved_options.docs_dir),
        *walker.folders(folder, frozenset()),
    ]
    return sort_by_order(items)


__all__ = [
    "build_sidebar",
    "folders_and_order",
    "list_subdirectories",
]
