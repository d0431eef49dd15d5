# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Codepoint classification for the emoji normalization pipeline.

Every scalar value falls into exactly one :class:`CodepointClass`.  The
classification is derived from fixed Unicode block ranges only; it does not
consult ``unicodedata`` so the result never changes with the interpreter's
Unicode database version.

Order of precedence matters because several structural ranges sit inside
emoji blocks (skin tone modifiers live in *Miscellaneous Symbols and
Pictographs*, regional indicators in *Enclosed Alphanumeric Supplement*):

1. ``ZERO_WIDTH_JOINER``   U+200D
2. ``VARIATION_SELECTOR``  U+FE00–U+FE0F
3. ``REGIONAL_INDICATOR``  U+1F1E6–U+1F1FF
4. ``SKIN_TONE_MODIFIER``  U+1F3FB–U+1F3FF
5. ``EMOJI_PRESENTATION``  any of :data:`EMOJI_RANGES`
6. ``ORDINARY``            everything else (including lone surrogates)
"""

from __future__ import annotations

from enum import Enum, auto

ZWJ = 0x200D
VS15 = 0xFE0E
VS16 = 0xFE0F

VARIATION_SELECTOR_RANGE = (0xFE00, 0xFE0F)
REGIONAL_INDICATOR_RANGE = (0x1F1E6, 0x1F1FF)
SKIN_TONE_RANGE = (0x1F3FB, 0x1F3FF)

# (start, end, block name), inclusive, sorted by start.
EMOJI_RANGES: tuple[tuple[int, int, str], ...] = (
    (0x2300, 0x23FF, "Miscellaneous Technical"),
    (0x2600, 0x26FF, "Miscellaneous Symbols"),
    (0x2700, 0x27BF, "Dingbats"),
    (0x2B00, 0x2BFF, "Miscellaneous Symbols and Arrows"),
    (0x1F000, 0x1F0FF, "Mahjong, Domino and Playing Cards"),
    (0x1F100, 0x1F1FF, "Enclosed Alphanumeric Supplement"),
    (0x1F200, 0x1F2FF, "Enclosed Ideographic Supplement"),
    (0x1F300, 0x1F5FF, "Miscellaneous Symbols and Pictographs"),
    (0x1F600, 0x1F64F, "Emoticons"),
    (0x1F650, 0x1F67F, "Ornamental Dingbats"),
    (0x1F680, 0x1F6FF, "Transport and Map Symbols"),
    (0x1F780, 0x1F7FF, "Geometric Shapes Extended"),
    (0x1F900, 0x1F9FF, "Supplemental Symbols and Pictographs"),
    (0x1FA00, 0x1FAFF, "Symbols and Pictographs Extended-A"),
)


class CodepointClass(Enum):
    """Structural role of a single scalar value."""

    EMOJI_PRESENTATION = auto()
    VARIATION_SELECTOR = auto()
    ZERO_WIDTH_JOINER = auto()
    REGIONAL_INDICATOR = auto()
    SKIN_TONE_MODIFIER = auto()
    ORDINARY = auto()


# Classes that occupy emoji blocks (used by contains_emoji).
EMOJI_BLOCK_CLASSES = frozenset(
    {
        CodepointClass.EMOJI_PRESENTATION,
        CodepointClass.REGIONAL_INDICATOR,
        CodepointClass.SKIN_TONE_MODIFIER,
    }
)


def _in_range(cp: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= cp <= bounds[1]


def is_emoji_range(cp: int) -> bool:
    """Return True if *cp* lies in one of the fixed emoji blocks."""
    for start, end, _name in EMOJI_RANGES:
        if cp < start:
            return False
        if cp <= end:
            return True
    return False


def classify(cp: int | str) -> CodepointClass:
    """Classify a scalar value (or a one-character string)."""
    if isinstance(cp, str):
        if len(cp) != 1:
            raise ValueError(f"expected a single character, got {len(cp)}")
        cp = ord(cp)
    if cp == ZWJ:
        return CodepointClass.ZERO_WIDTH_JOINER
    if _in_range(cp, VARIATION_SELECTOR_RANGE):
        return CodepointClass.VARIATION_SELECTOR
    if _in_range(cp, REGIONAL_INDICATOR_RANGE):
        return CodepointClass.REGIONAL_INDICATOR
    if _in_range(cp, SKIN_TONE_RANGE):
        return CodepointClass.SKIN_TONE_MODIFIER
    if is_emoji_range(cp):
        return CodepointClass.EMOJI_PRESENTATION
    return CodepointClass.ORDINARY


def contains_emoji(text: str | None) -> bool:
    """Return True if any scalar of *text* falls in an emoji block.

    Joiners and variation selectors alone do not count; they are not emoji
    blocks.  ``None`` and ``""`` contain no emoji.
    """
    if not text:
        return False
    return any(classify(ord(ch)) in EMOJI_BLOCK_CLASSES for ch in text)
