"""Informational CLI command: configuration overview."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from ...lib.core.config import (
    config_root as _config_root,
    get_batch_size as _get_batch_size,
    get_cleanup_placeholders as _get_cleanup_placeholders,
    get_glyph_filters as _get_glyph_filters,
    get_messages_count as _get_messages_count,
    global_config_path as _global_config_path,
    global_config_search_paths as _global_config_search_paths,
    glyph_config_path as _glyph_config_path,
    messages_path as _messages_path,
    state_root as _state_root,
)
from ...lib.util.ansi import gray as _gray, supports_color as _supports_color, yes_no as _yes_no


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register informational subcommands (config)."""
    subparsers.add_parser("config", help="Show configuration files, inputs and settings")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the config command.  Returns True if handled."""
    if args.cmd == "config":
        _print_config()
        return True
    return False


def _describe_path(label: str, path: Path | None, color_enabled: bool) -> str:
    if path is None:
        return f"- {label}: {_gray('not set', color_enabled)}"
    return (
        f"- {label}: {_gray(str(path), color_enabled)} "
        f"(exists: {_yes_no(path.is_file(), color_enabled)})"
    )


def _print_config() -> None:
    """Display configuration files, input files and effective settings."""
    color_enabled = _supports_color()
    # READ PATHS
    print("Configuration (read):")
    gcfg = _global_config_path()
    print(
        f"- Global config file: {_gray(str(gcfg), color_enabled)} "
        f"(exists: {_yes_no(Path(gcfg).is_file(), color_enabled)})"
    )
    paths = _global_config_search_paths()
    if paths:
        print("- Global config search order:")
        for p in paths:
            exists = _yes_no(p.is_file(), color_enabled)
            print(f"  • {_gray(str(p), color_enabled)} (exists: {exists})")
    croot = _config_root()
    print(
        f"- Config dir: {_gray(str(croot), color_enabled)} "
        f"(exists: {_yes_no(croot.is_dir(), color_enabled)})"
    )

    print("Inputs (read):")
    print(_describe_path("Glyph config", _glyph_config_path(), color_enabled))
    print(_describe_path("Message store", _messages_path(), color_enabled))

    print("Settings:")
    filters = _get_glyph_filters()
    include = filters["include_categories"]
    print(f"- Include categories: {', '.join(include) if include is not None else 'all'}")
    print(f"- Exclude subcategories: {', '.join(filters['exclude_subcategories'] or []) or '-'}")
    print(f"- Exclude emojis: {', '.join(filters['exclude_emojis'] or []) or '-'}")
    print(f"- Messages to load: {_get_messages_count()}")
    print(f"- Batch size: {_get_batch_size()}")
    placeholders = " ".join(f"U+{ord(p):04X}" for p in _get_cleanup_placeholders())
    print(f"- Cleanup placeholders: {placeholders}")

    # WRITE PATHS
    print("Writable locations (write):")
    sroot = _state_root()
    print(
        f"- State root: {_gray(str(sroot), color_enabled)} "
        f"(exists: {_yes_no(sroot.is_dir(), color_enabled)})"
    )
    print(f"- Debug log: {_gray(str(sroot / 'emojiguard.log'), color_enabled)}")

    # ENVIRONMENT
    print("Environment overrides (if set):")
    for var in (
        "EMOJIGUARD_CONFIG_FILE",
        "EMOJIGUARD_CONFIG_DIR",
        "EMOJIGUARD_STATE_DIR",
        "EMOJIGUARD_GLYPHS",
        "EMOJIGUARD_MESSAGES",
        "XDG_CONFIG_HOME",
    ):
        val = os.environ.get(var)
        if val is not None:
            print(f"- {var}={_gray(val, color_enabled)}")
