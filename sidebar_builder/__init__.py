"""Public package surface for sidebar_builder.

Exports the traversal operations, entry types, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .front_matter import DocumentMetadata, parse_front_matter, read_metadata
from .paths import normalize_path
from .sidebar_model import (
    FileEntry,
    FolderNode,
    SidebarItem,
    SidebarOptions,
    build_sidebar,
    files_and_order,
    folders_and_order,
)


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DocumentMetadata",
    "FileEntry",
    "FolderNode",
    "SidebarItem",
    "SidebarOptions",
    "build_sidebar",
    "files_and_order",
    "folders_and_order",
    "main",
    "normalize_path",
    "parse_front_matter",
    "read_metadata",
]
