"""Glyph set and sanitizer setup shared by the CLI commands."""

from __future__ import annotations

import argparse
import random
from pathlib import Path

from ...lib.core.config import get_cleanup_placeholders, get_glyph_filters, glyph_config_path
from ...lib.emoji.glyphs import GlyphOracle, GlyphSet, load_glyph_set
from ...lib.emoji.pipeline import EmojiSanitizer
from ...lib.errors import GlyphConfigError
from ...lib.util.logging_utils import _log_warning
from ._completers import complete_categories, json_files, set_completer


def add_glyph_arguments(parser: argparse.ArgumentParser) -> None:
    """Add ``--glyphs``/``--category`` options to *parser*."""
    _a = parser.add_argument(
        "--glyphs",
        type=Path,
        help="Glyph set config (emoji-data JSON). Default: glyphs.config from config.yml",
    )
    set_completer(_a, json_files)
    _a = parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        default=None,
        help="Only include glyphs from this category (repeatable; overrides config)",
    )
    set_completer(_a, complete_categories)


def load_oracle(args: argparse.Namespace) -> GlyphOracle:
    """Build the glyph oracle for a command invocation.

    An explicit ``--glyphs`` path that cannot be loaded is fatal.  A path
    coming from configuration that fails, or no configured path at all,
    yields an empty oracle and a warning: sanitization still runs, it just
    drops every unsupported emoji.
    """
    explicit = getattr(args, "glyphs", None)
    path = explicit if explicit is not None else glyph_config_path()
    if path is None:
        _log_warning("no glyph set configured (use --glyphs or glyphs.config in config.yml)")
        return GlyphOracle(GlyphSet())

    filters = get_glyph_filters()
    categories = getattr(args, "categories", None)
    if categories:
        filters["include_categories"] = list(categories)
    try:
        glyph_set = load_glyph_set(
            path,
            include_categories=filters["include_categories"],
            exclude_subcategories=filters["exclude_subcategories"] or (),
            exclude_emojis=filters["exclude_emojis"] or (),
        )
    except GlyphConfigError as e:
        if explicit is not None:
            raise SystemExit(str(e))
        _log_warning(str(e))
        return GlyphOracle(GlyphSet())

    if not glyph_set:
        _log_warning(f"glyph set loaded from {path} is empty")
    return GlyphOracle(glyph_set)


def build_sanitizer(args: argparse.Namespace) -> EmojiSanitizer:
    """Create a sanitizer from CLI options (``--seed`` makes it reproducible)."""
    seed = getattr(args, "seed", None)
    randrange = random.Random(seed).randrange if seed is not None else None
    return EmojiSanitizer(
        load_oracle(args),
        randrange=randrange,
        placeholders=get_cleanup_placeholders(),
    )
