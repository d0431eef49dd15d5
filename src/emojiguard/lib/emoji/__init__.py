"""Emoji normalization for fixed single-codepoint glyph sets.

Public entry points:

- ``sanitize`` / ``EmojiSanitizer``: the four-pass pipeline
- ``contains_emoji``: does a string use any emoji block at all
- ``GlyphOracle`` / ``GlyphSet`` / ``load_glyph_set``: the supported glyphs
"""

from .classify import CodepointClass, classify, contains_emoji
from .glyphs import (
    GlyphEntry,
    GlyphOracle,
    GlyphSet,
    glyph_set_from_pairs,
    list_categories,
    load_glyph_set,
)
from .pipeline import EmojiSanitizer, cleanup, join_surrogates, sanitize, strip, substitute
from .priority import PRIORITY_MAP, remap

__all__ = [
    "CodepointClass",
    "classify",
    "contains_emoji",
    "GlyphEntry",
    "GlyphOracle",
    "GlyphSet",
    "glyph_set_from_pairs",
    "list_categories",
    "load_glyph_set",
    "EmojiSanitizer",
    "cleanup",
    "join_surrogates",
    "sanitize",
    "strip",
    "substitute",
    "PRIORITY_MAP",
    "remap",
]
