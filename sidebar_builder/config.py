"""Persistent JSON config helpers.

Stores default traversal options and the output color style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .paths import DEFAULT_DOCS_DIR
from .sidebar_model.types import SidebarOptions

APP_NAME = "sidebar-builder"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_ignore_patterns() -> tuple[str, ...]:
    """Load ignore substrings, dropping non-string and empty entries."""
    value = load_config().get("partial_file_names_to_ignore")
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def load_docs_dir() -> str:
    value = load_config().get("docs_dir")
    if not isinstance(value, str):
        return DEFAULT_DOCS_DIR
    return value.strip().strip("/")


def load_sidebar_options() -> SidebarOptions:
    """Build default ``SidebarOptions`` from persisted config.

    Only explicit booleans are honored for ``collapsible``/``collapsed``.
    """
    data = load_config()
    return SidebarOptions(
        partial_file_names_to_ignore=load_ignore_patterns(),
        collapsible=_load_bool(data, "collapsible", True),
        collapsed=_load_bool(data, "collapsed", False),
        docs_dir=load_docs_dir(),
    )


def save_sidebar_options(options: SidebarOptions) -> None:
    """Persist traversal defaults, keeping unrelated config keys."""
    config = load_config()
    config["partial_file_names_to_ignore"] = list(options.partial_file_names_to_ignore)
    config["collapsible"] = options.is_collapsible
    config["collapsed"] = options.is_collapsed
    config["docs_dir"] = options.docs_dir
    save_config(config)


def load_style_name() -> str:
    """Load persisted Pygments style name, defaulting to ``monokai``."""
    value = load_config().get("style")
    if not isinstance(value, str):
        return DEFAULT_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_STYLE
