"""Shared argcomplete completers and helpers for CLI commands."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from typing import Any

from argcomplete.completers import FilesCompleter

from ...lib.core.config import glyph_config_path
from ...lib.emoji.glyphs import list_categories
from ...lib.errors import GlyphConfigError

json_files = FilesCompleter(allowednames=("json",))


def complete_categories(
    prefix: str, parsed_args: argparse.Namespace, **kwargs: object
) -> list[str]:  # pragma: no cover - shell integration
    """Return glyph categories matching *prefix* for argcomplete."""
    path = getattr(parsed_args, "glyphs", None) or glyph_config_path()
    if path is None:
        return []
    try:
        names = list_categories(path)
    except GlyphConfigError:
        return []
    return [n for n in names if n.startswith(prefix)]


def set_completer(action: argparse.Action, fn: Callable[..., Any]) -> None:
    """Attach an argcomplete completer to *action*."""
    action.completer = fn  # type: ignore[attr-defined]
