"""Domain datatypes for sidebar entries and traversal options."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from ..ignore import coerce_patterns
from ..paths import DEFAULT_DOCS_DIR

logger = logging.getLogger(__name__)

Order = int | float


def coerce_order(value: object, source: str | None = None) -> Order:
    """Return a sortable ``order`` value, defaulting to ``0``.

    Finite numbers pass through, numeric strings are parsed, and anything
    else (including NaN and infinities) falls back to ``0`` with a warning.
    """
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        try:
            return int(stripped)
        except ValueError:
            pass
        try:
            parsed = float(stripped)
        except ValueError:
            parsed = math.nan
        if math.isfinite(parsed):
            return parsed
    logger.warning("Invalid Order Front Matter | %s | %r", source or "<unknown>", value)
    return 0


@dataclass(frozen=True)
class FileEntry:
    """One markdown document listed directly under a folder."""

    kind: ClassVar[str] = "file"

    text: str | None
    link: str
    order: Order = 0
    data: Mapping[str, object] = field(default_factory=dict, hash=False)

    @property
    def title(self) -> str | None:
        return self.text

    def to_dict(self) -> dict[str, object]:
        """Front matter fields overlaid with ``text``, ``link`` and ``order``."""
        return {**self.data, "text": self.text, "link": self.link, "order": self.order}


@dataclass(frozen=True)
class FolderNode:
    """Titled folder with its files and nested folders sorted by order."""

    kind: ClassVar[str] = "folder"

    text: str
    items: tuple["SidebarItem", ...] = ()
    order: Order = 0
    collapsible: bool = True
    collapsed: bool = False
    path: Path | None = field(default=None, compare=False, repr=False)

    @property
    def title(self) -> str:
        return self.text

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "items": [item.to_dict() for item in self.items],
            "order": self.order,
            "collapsible": self.collapsible,
            "collapsed": self.collapsed,
        }


SidebarItem = FileEntry | FolderNode


def sort_by_order(items: Iterable[SidebarItem]) -> list[SidebarItem]:
    """Stable ascending sort on the shared ``order`` field."""
    return sorted(items, key=lambda item: item.order)


@dataclass(frozen=True)
class SidebarOptions:
    """Traversal settings shared unchanged by every recursive call.

    ``collapsible`` is true unless it is literally ``False``; ``collapsed``
    is true only when it is literally ``True``.
    """

    partial_file_names_to_ignore: tuple[str, ...] = ()
    collapsible: object = True
    collapsed: object = False
    docs_dir: str = DEFAULT_DOCS_DIR

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "partial_file_names_to_ignore",
            coerce_patterns(self.partial_file_names_to_ignore),
        )

    @property
    def is_collapsible(self) -> bool:
        return self.collapsible is not False

    @property
    def is_collapsed(self) -> bool:
        return self.collapsed is True

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object] | None) -> SidebarOptions:
        """Build options from a plain mapping.

        Both snake_case keys and the camelCase ``partialFileNamesToIgnore`` /
        ``docsDir`` spellings are accepted.
        """
        if not mapping:
            return cls()
        patterns = mapping.get("partial_file_names_to_ignore", mapping.get("partialFileNamesToIgnore"))
        docs_dir = mapping.get("docs_dir", mapping.get("docsDir", DEFAULT_DOCS_DIR))
        return cls(
            partial_file_names_to_ignore=coerce_patterns(patterns),
            collapsible=mapping.get("collapsible", True),
            collapsed=mapping.get("collapsed", False),
            docs_dir=str(docs_dir) if docs_dir is not None else DEFAULT_DOCS_DIR,
        )

    @classmethod
    def coerce(cls, options: SidebarOptions | Mapping[str, object] | None) -> SidebarOptions:
        if isinstance(options, SidebarOptions):
            return options
        return cls.from_mapping(options)


__all__ = [
    "FileEntry",
    "FolderNode",
    "Order",
    "SidebarItem",
    "SidebarOptions",
    "coerce_order",
    "sort_by_order",
]
