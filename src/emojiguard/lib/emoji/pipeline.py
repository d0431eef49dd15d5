# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Emoji normalization pipeline.

``sanitize(text)`` = ``cleanup(substitute(strip(remap(text))))``:

1. **remap** – ordered priority table (see :mod:`.priority`).
2. **strip** – drop joiners, regional indicators (flag pairs as one unit)
   and skin tone modifiers.  Variation selectors stay.
3. **substitute** – every emoji-range scalar the glyph set lacks is replaced
   by a uniformly drawn supported emoji, or dropped when nothing is
   supported.
4. **cleanup** – collapse runs of identical placeholder characters and runs
   of spaces until nothing changes.

Python strings are sequences of scalars, so every pass walks code points
directly.  A valid surrogate pair left in a string (``surrogatepass``
decoding) is joined into its scalar first; lone surrogates classify as
ordinary and pass through untouched.
"""

from __future__ import annotations

import random
import re
from collections.abc import Callable, Iterable

from ..util.logging_utils import _log_debug
from .classify import CodepointClass, classify
from .glyphs import GlyphOracle
from .priority import PRIORITY_MAP, remap

RandRange = Callable[[int], int]
WarnHook = Callable[[str], None]

PLACEHOLDERS: tuple[str, ...] = ("�", "□")

EMPTY_GLYPH_SET_WARNING = "glyph set is empty or not loaded; unsupported emoji are dropped"

_SPACE_RUN = re.compile(r" {2,}")
_SURROGATE_PAIR = re.compile(r"[\ud800-\udbff][\udc00-\udfff]")


def _join_pair(match: re.Match[str]) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def join_surrogates(text: str | None) -> str | None:
    """Combine high/low surrogate pairs into single scalars.

    Unpaired surrogates are kept as they are.
    """
    if not text:
        return text
    return _SURROGATE_PAIR.sub(_join_pair, text)


def strip(text: str | None) -> str | None:
    """Remove scalars that only make sense inside multi-codepoint clusters."""
    if not text:
        return text
    text = join_surrogates(text)
    out: list[str] = []
    i = 0
    n = len(text)
    while i < n:
        kind = classify(ord(text[i]))
        if kind is CodepointClass.REGIONAL_INDICATOR:
            # A flag pair is one unsupported unit.
            if i + 1 < n and classify(ord(text[i + 1])) is CodepointClass.REGIONAL_INDICATOR:
                i += 2
            else:
                i += 1
            continue
        if kind in (CodepointClass.ZERO_WIDTH_JOINER, CodepointClass.SKIN_TONE_MODIFIER):
            i += 1
            continue
        out.append(text[i])
        i += 1
    return "".join(out)


def substitute(
    text: str | None,
    oracle: GlyphOracle,
    randrange: RandRange | None = None,
    warn: WarnHook | None = None,
) -> str | None:
    """Replace unsupported emoji with random supported ones.

    Each unsupported ``EMOJI_PRESENTATION`` scalar gets its own draw of
    ``randrange(len(supported))``.  With nothing supported the scalar is
    dropped along with the variation selectors directly after it, and
    *warn* is called once.
    """
    if not text:
        return text
    text = join_surrogates(text)
    draw = randrange if randrange is not None else random.randrange
    supported = oracle.list_supported()
    out: list[str] = []
    dropped = 0
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        i += 1
        if classify(ord(ch)) is not CodepointClass.EMOJI_PRESENTATION or oracle.is_supported(ch):
            out.append(ch)
            continue
        if supported:
            out.append(supported[draw(len(supported))])
            continue
        dropped += 1
        while i < n and classify(ord(text[i])) is CodepointClass.VARIATION_SELECTOR:
            i += 1
    if dropped:
        (warn or _log_debug)(f"{EMPTY_GLYPH_SET_WARNING} ({dropped} dropped)")
    return "".join(out)


def _placeholder_pattern(placeholders: Iterable[str]) -> re.Pattern[str] | None:
    chars = "".join(re.escape(p) for p in placeholders if len(p) == 1)
    if not chars:
        return None
    return re.compile(f"([{chars}])\\1+")


def cleanup(text: str | None, placeholders: Iterable[str] = PLACEHOLDERS) -> str | None:
    """Collapse duplicate placeholders and spaces to a fixed point."""
    if not text:
        return text
    placeholder_run = _placeholder_pattern(placeholders)
    while True:
        collapsed = _SPACE_RUN.sub(" ", text)
        if placeholder_run is not None:
            collapsed = placeholder_run.sub(r"\1", collapsed)
        if collapsed == text:
            return text
        text = collapsed


class EmojiSanitizer:
    """The composed pipeline bound to one glyph oracle.

    Args:
        oracle: Support oracle for the active glyph set.
        randrange: Random-source capability: given ``n`` return an index in
            ``[0, n)``.  Defaults to the process-wide ``random.randrange``;
            pass ``random.Random(seed).randrange`` for reproducible output
            or an independent stream per thread.
        warn: Called with a message when unsupported emoji had to be
            dropped because the glyph set is empty.  Defaults to the debug
            log.
        table: Priority mapping table.
        placeholders: Characters collapsed by the cleanup pass.
    """

    def __init__(
        self,
        oracle: GlyphOracle,
        randrange: RandRange | None = None,
        warn: WarnHook | None = None,
        table: Iterable[tuple[str, str]] = PRIORITY_MAP,
        placeholders: Iterable[str] = PLACEHOLDERS,
    ) -> None:
        self.oracle = oracle
        self.randrange = randrange
        self.warn = warn
        self.table = tuple(table)
        self.placeholders = tuple(placeholders)

    def remap(self, text: str | None) -> str | None:
        return remap(text, self.table)

    def strip(self, text: str | None) -> str | None:
        return strip(text)

    def substitute(self, text: str | None) -> str | None:
        return substitute(text, self.oracle, randrange=self.randrange, warn=self.warn)

    def cleanup(self, text: str | None) -> str | None:
        return cleanup(text, self.placeholders)

    def sanitize(self, text: str | None) -> str | None:
        """Run all four passes; ``None`` and ``""`` are returned unchanged."""
        if not text:
            return text
        return self.cleanup(self.substitute(self.strip(self.remap(join_surrogates(text)))))


def sanitize(
    text: str | None,
    oracle: GlyphOracle,
    randrange: RandRange | None = None,
    warn: WarnHook | None = None,
) -> str | None:
    """One-shot :meth:`EmojiSanitizer.sanitize` with the default table."""
    return EmojiSanitizer(oracle, randrange=randrange, warn=warn).sanitize(text)
