import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml  # pip install pyyaml

from .paths import config_root as _config_root_base, state_root as _state_root_base

DEFAULT_MESSAGES_COUNT = 10
DEFAULT_BATCH_SIZE = 5
DEFAULT_PLACEHOLDERS = ("�", "□")

# ---------- Global config file ----------


def global_config_search_paths() -> list[Path]:
    """Return the ordered list of paths that will be checked for global config.

    Behavior matches global_config_path():
    - If EMOJIGUARD_CONFIG_FILE is set, only that single path is considered.
    - Otherwise, check in order:
        1) ${XDG_CONFIG_HOME:-~/.config}/emojiguard/config.yml
        2) sys.prefix/etc/emojiguard/config.yml
        3) /etc/emojiguard/config.yml
    """
    env_file = os.environ.get("EMOJIGUARD_CONFIG_FILE")
    if env_file:
        return [Path(env_file).expanduser().resolve()]

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    user_cfg = (
        (Path(xdg_home) if xdg_home else Path.home() / ".config") / "emojiguard" / "config.yml"
    )
    sp_cfg = Path(sys.prefix) / "etc" / "emojiguard" / "config.yml"
    etc_cfg = Path("/etc/emojiguard/config.yml")
    return [user_cfg, sp_cfg, etc_cfg]


def global_config_path() -> Path:
    """Global config file path (first existing search path wins).

    An explicit EMOJIGUARD_CONFIG_FILE is returned even if missing to make
    intent visible to the user. If no candidate exists, the last path
    (/etc/emojiguard/config.yml) is returned.
    """
    candidates = global_config_search_paths()
    if len(candidates) == 1:
        return candidates[0]

    for c in candidates:
        if c.is_file():
            return c.resolve()
    return candidates[-1]


def load_global_config() -> dict[str, Any]:
    cfg_path = global_config_path()
    if not cfg_path.is_file():
        return {}
    data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return data if isinstance(data, dict) else {}


def get_global_section(key: str) -> dict[str, Any]:
    """Return a top-level section from the global config, defaulting to ``{}``.

    If the value under *key* is not a dict (e.g. the user wrote
    ``glyphs: "oops"``), returns ``{}`` so callers can use ``.get()``.
    Unreadable or invalid YAML is treated as an empty config.
    """
    try:
        cfg = load_global_config()
    except (OSError, yaml.YAMLError):
        return {}
    value = cfg.get(key, {})
    if not isinstance(value, dict):
        return {}
    return value or {}


# ---------- Path resolution ----------


def _resolve_path(
    env_var: str | None,
    config_key: tuple[str, str] | None,
    default: Callable[[], Path | None],
) -> Path | None:
    """Resolve a path: env var → global config → computed default."""
    if env_var:
        env = os.environ.get(env_var)
        if env:
            return Path(env).expanduser().resolve()

    if config_key:
        val = get_global_section(config_key[0]).get(config_key[1])
        if val:
            return Path(str(val)).expanduser().resolve()

    fallback = default()
    return fallback.resolve() if fallback is not None else None


def config_root() -> Path:
    """Base configuration directory (see ``paths.config_root``)."""
    return _config_root_base().resolve()


def state_root() -> Path:
    """Writable state directory (debug log).

    Precedence:
    - Environment variable EMOJIGUARD_STATE_DIR
    - Global config ``paths.state_root``
    - platform default from ``paths.state_root``
    """
    path = _resolve_path("EMOJIGUARD_STATE_DIR", ("paths", "state_root"), _state_root_base)
    assert path is not None
    return path


def _default_glyph_config() -> Path | None:
    candidate = config_root() / "emoji.json"
    return candidate if candidate.is_file() else None


def glyph_config_path() -> Path | None:
    """Glyph set source file, or None when nothing is configured.

    Precedence: EMOJIGUARD_GLYPHS env, ``glyphs.config`` in the global
    config, then ``<config_root>/emoji.json`` if it exists.
    """
    return _resolve_path("EMOJIGUARD_GLYPHS", ("glyphs", "config"), _default_glyph_config)


def messages_path() -> Path | None:
    """Message store file: EMOJIGUARD_MESSAGES env or ``messages.path``."""
    return _resolve_path("EMOJIGUARD_MESSAGES", ("messages", "path"), lambda: None)


# ---------- Settings ----------


def _str_list(value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if v is not None]
    return []


def get_glyph_filters() -> dict[str, list[str] | None]:
    """Return glyph loader filters from the ``glyphs`` section.

    ``include_categories`` is None when not configured (include all).
    """
    section = get_global_section("glyphs")
    include = section.get("include_categories")
    return {
        "include_categories": _str_list(include) if include is not None else None,
        "exclude_subcategories": _str_list(section.get("exclude_subcategories")),
        "exclude_emojis": _str_list(section.get("exclude_emojis")),
    }


def _positive_int(section: str, key: str, default: int) -> int:
    raw = get_global_section(section).get(key, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def get_messages_count() -> int:
    """How many of the newest messages to load (``messages.count``)."""
    return _positive_int("messages", "count", DEFAULT_MESSAGES_COUNT)


def get_batch_size() -> int:
    """Messages per feed batch (``messages.batch_size``)."""
    return _positive_int("messages", "batch_size", DEFAULT_BATCH_SIZE)


def get_cleanup_placeholders() -> tuple[str, ...]:
    """Placeholder characters collapsed by the cleanup pass.

    Only single-character entries from ``cleanup.placeholders`` are used;
    anything else falls back to the defaults.
    """
    configured = [
        p for p in _str_list(get_global_section("cleanup").get("placeholders")) if len(p) == 1
    ]
    return tuple(configured) if configured else DEFAULT_PLACEHOLDERS
