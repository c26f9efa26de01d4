"""JSON output colorizing via Pygments.

Pygments is imported on first use so library callers never pay for it.
"""

from __future__ import annotations

_PYGMENTS_READY = False
_PYGMENTS_AVAILABLE = False
_PYGMENTS_HIGHLIGHT = None
_PYGMENTS_JSON_LEXER = None
_PYGMENTS_TERMINAL_FORMATTER = None
_PYGMENTS_GET_STYLE_BY_NAME = None
_PYGMENTS_FORMATTERS: dict[str, object] = {}

FALLBACK_STYLE = "monokai"


def _ensure_pygments_loaded() -> bool:
    """Lazily import and cache Pygments callables.

    Returns whether Pygments is available in the runtime environment.
    """
    global _PYGMENTS_READY
    global _PYGMENTS_AVAILABLE
    global _PYGMENTS_HIGHLIGHT
    global _PYGMENTS_JSON_LEXER
    global _PYGMENTS_TERMINAL_FORMATTER
    global _PYGMENTS_GET_STYLE_BY_NAME

    if _PYGMENTS_READY:
        return _PYGMENTS_AVAILABLE

    _PYGMENTS_READY = True
    try:
        from pygments import highlight as pygments_highlight
        from pygments.formatters import TerminalFormatter
        from pygments.lexers import JsonLexer
        from pygments.styles import get_style_by_name
    except ImportError:
        _PYGMENTS_AVAILABLE = False
        return False

    _PYGMENTS_HIGHLIGHT = pygments_highlight
    _PYGMENTS_JSON_LEXER = JsonLexer
    _PYGMENTS_TERMINAL_FORMATTER = TerminalFormatter
    _PYGMENTS_GET_STYLE_BY_NAME = get_style_by_name
    _PYGMENTS_AVAILABLE = True
    return True


def _formatter_for_style(style: str):
    """Return cached terminal formatter, falling back to ``monokai``."""
    formatter = _PYGMENTS_FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    assert _PYGMENTS_GET_STYLE_BY_NAME is not None
    assert _PYGMENTS_TERMINAL_FORMATTER is not None
    try:
        _PYGMENTS_GET_STYLE_BY_NAME(style)
        formatter = _PYGMENTS_TERMINAL_FORMATTER(style=style)
    except Exception:
        formatter = _PYGMENTS_TERMINAL_FORMATTER(style=FALLBACK_STYLE)
    _PYGMENTS_FORMATTERS[style] = formatter
    return formatter


def colorize_json(source: str, style: str = FALLBACK_STYLE) -> str:
    """Return ANSI-colored ``source``, or ``source`` unchanged without Pygments."""
    if not _ensure_pygments_loaded():
        return source
    formatter = _formatter_for_style(style)
    try:
        assert _PYGMENTS_HIGHLIGHT is not None
        assert _PYGMENTS_JSON_LEXER is not None
        return _PYGMENTS_HIGHLIGHT(source, _PYGMENTS_JSON_LEXER(), formatter)
    except Exception:
        return source


__all__ = ["colorize_json"]
