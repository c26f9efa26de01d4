"""Path normalization and link derivation.

Every path that is compared as a string or turned into a site link goes
through ``normalize_path`` first so results do not depend on the platform
separator.
"""

from __future__ import annotations

import os
from pathlib import Path

INDEX_FILENAME = "index.md"
MARKDOWN_SUFFIX = ".md"
DEFAULT_DOCS_DIR = "docs"


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Return ``path`` with every ``\\`` replaced by ``/``."""
    return os.fspath(path).replace("\\", "/")


def resolve_root(root: str | os.PathLike[str] | None) -> Path:
    """Return the traversal root, defaulting to the current working directory."""
    if root is None:
        return Path(normalize_path(os.path.normpath(Path.cwd())))
    return Path(normalize_path(os.path.normpath(root)))


def resolve_folder(folder_path: str | os.PathLike[str], root: Path) -> Path:
    """Resolve ``folder_path`` against ``root`` unless it is already absolute.

    ``..`` and ``.`` segments are collapsed so link prefixes compare cleanly.
    """
    candidate = Path(normalize_path(folder_path))
    if not candidate.is_absolute():
        candidate = root / candidate
    return Path(normalize_path(os.path.normpath(candidate)))


def derive_link(file_path: str | os.PathLike[str], root: Path, docs_dir: str = DEFAULT_DOCS_DIR) -> str:
    """Strip the ``<root>/<docs_dir>`` prefix from ``file_path``.

    Files outside that prefix keep their full normalized path.
    """
    normalized = normalize_path(file_path)
    prefix = normalize_path(root / docs_dir) if docs_dir else normalize_path(root)
    prefix = prefix.rstrip("/")
    if prefix and (normalized == prefix or normalized.startswith(prefix + "/")):
        return normalized[len(prefix) :]
    return normalized


__all__ = [
    "DEFAULT_DOCS_DIR",
    "INDEX_FILENAME",
    "MARKDOWN_SUFFIX",
    "derive_link",
    "normalize_path",
    "resolve_folder",
    "resolve_root",
]
