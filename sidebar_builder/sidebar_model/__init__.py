"""Sidebar tree model built from markdown folders.

This package contains the traversal core:
- entry datatypes and traversal options
- per-folder markdown file listing
- recursive, index-gated folder walking
"""

from __future__ import annotations

from .types import FileEntry, FolderNode, SidebarItem, SidebarOptions, coerce_order, sort_by_order
from .files import build_file_entry, files_and_order, list_markdown_files
from .folders import build_sidebar, folders_and_order, list_subdirectories

__all__ = [
    "FileEntry",
    "FolderNode",
    "SidebarItem",
    "SidebarOptions",
    "coerce_order",
    "sort_by_order",
    "build_file_entry",
    "files_and_order",
    "list_markdown_files",
    "build_sidebar",
    "folders_and_order",
    "list_subdirectories",
]
