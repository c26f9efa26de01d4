"""Document metadata reading.

Reads a markdown file with tolerant decoding and splits off its YAML front
matter block. Malformed or non-mapping front matter is reported and treated
as an empty metadata map so traversal keeps going.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<header>.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)


@dataclass(frozen=True)
class DocumentMetadata:
    """Front matter fields of one document plus its unparsed body."""

    data: dict[str, object] = field(default_factory=dict)
    body: str = ""

    @property
    def title(self) -> object | None:
        return self.data.get("title")

    @property
    def has_title(self) -> bool:
        """Whether a non-null ``title`` field is declared."""
        return self.data.get("title") is not None


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1; as a final fallback decodes
    raw bytes with UTF-8 replacement semantics.
    """
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def parse_front_matter(text: str, source: str | None = None) -> DocumentMetadata:
    """Split ``text`` into front matter fields and body.

    ``source`` only labels diagnostics. Text without a leading ``---`` block
    yields empty metadata and the whole text as body.
    """
    text = text.lstrip("\ufeff")
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return DocumentMetadata(data={}, body=text)

    body = text[match.end() :]
    header = match.group("header")
    try:
        loaded = yaml.safe_load(header)
    except yaml.YAMLError as exc:
        logger.warning("Malformed Front Matter | %s | %s", source or "<text>", exc)
        return DocumentMetadata(data={}, body=body)

    if loaded is None:
        return DocumentMetadata(data={}, body=body)
    if not isinstance(loaded, dict):
        logger.warning("Malformed Front Matter | %s | expected a mapping", source or "<text>")
        return DocumentMetadata(data={}, body=body)
    return DocumentMetadata(data={str(key): value for key, value in loaded.items()}, body=body)


def read_metadata(path: str | Path) -> DocumentMetadata:
    """Read ``path`` and parse its front matter.

    Filesystem errors propagate to the caller.
    """
    target = Path(path)
    return parse_front_matter(read_text(target), source=str(target))


__all__ = [
    "DocumentMetadata",
    "parse_front_matter",
    "read_metadata",
    "read_text",
]
