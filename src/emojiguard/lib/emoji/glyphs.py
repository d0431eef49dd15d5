# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Glyph sets and the glyph support oracle.

A :class:`GlyphSet` is the finite, ordered collection of single-codepoint
emoji a rendering surface can display.  It is loaded once (usually from an
emoji-data style sprite-sheet config, see :func:`load_glyph_set`) and never
mutated afterwards.

The :class:`GlyphOracle` answers the two questions the pipeline asks:
"is this exact sequence renderable?" and "what can I render?".  An oracle
built without a glyph set (or with an empty one) is *unavailable*: it
supports nothing and lists nothing, and the pipeline degrades to dropping
unsupported emoji.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..errors import GlyphConfigError
from ..util.logging_utils import _log_debug
from .classify import VS16


@dataclass(frozen=True)
class GlyphEntry:
    """One renderable emoji of a glyph set."""

    unicode: int
    name: str
    category: str = ""
    subcategory: str = ""

    @property
    def char(self) -> str:
        return chr(self.unicode)


class GlyphSet:
    """Immutable, declaration-ordered collection of :class:`GlyphEntry`.

    Duplicate scalars keep their first declaration.
    """

    __slots__ = ("_entries", "_scalars")

    def __init__(self, entries: Iterable[GlyphEntry] = ()) -> None:
        kept: list[GlyphEntry] = []
        seen: set[int] = set()
        for entry in entries:
            if entry.unicode in seen:
                continue
            seen.add(entry.unicode)
            kept.append(entry)
        self._entries: tuple[GlyphEntry, ...] = tuple(kept)
        self._scalars: frozenset[int] = frozenset(seen)

    @property
    def entries(self) -> tuple[GlyphEntry, ...]:
        return self._entries

    def __contains__(self, cp: object) -> bool:
        if isinstance(cp, str):
            return len(cp) == 1 and ord(cp) in self._scalars
        return cp in self._scalars

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        preview = "".join(e.char for e in self._entries[:8])
        more = "…" if len(self._entries) > 8 else ""
        return f"GlyphSet({len(self._entries)} glyphs: {preview}{more})"


def glyph_set_from_pairs(pairs: Iterable[tuple[int, str] | str]) -> GlyphSet:
    """Build a glyph set from ``(scalar, name)`` pairs or one-character strings.

    Strings longer than one character are rejected: glyph sets hold single
    codepoints only.
    """
    entries: list[GlyphEntry] = []
    for item in pairs:
        if isinstance(item, str):
            if len(item) != 1:
                raise ValueError(f"glyph must be a single codepoint: {item!r}")
            entries.append(GlyphEntry(ord(item), f"U+{ord(item):04X}"))
        else:
            scalar, name = item
            entries.append(GlyphEntry(int(scalar), str(name)))
    return GlyphSet(entries)


class GlyphOracle:
    """Answer support queries against a loaded glyph set.

    Lookups are memoized per oracle; the glyph set never changes after load,
    so caching does not alter any answer.
    """

    def __init__(self, glyph_set: GlyphSet | None = None) -> None:
        self._glyph_set = glyph_set if glyph_set is not None else GlyphSet()
        self._supported = tuple(e.char for e in self._glyph_set)
        self._cache: dict[tuple[int, ...], bool] = {}

    @property
    def glyph_set(self) -> GlyphSet:
        return self._glyph_set

    @property
    def available(self) -> bool:
        """False when no glyph set was loaded or it is empty."""
        return bool(self._supported)

    def is_supported(self, sequence: str | Sequence[int]) -> bool:
        """Return True iff *sequence* is exactly one glyph set entry."""
        if isinstance(sequence, str):
            key = tuple(ord(ch) for ch in sequence)
        else:
            key = tuple(int(cp) for cp in sequence)
        cached = self._cache.get(key)
        if cached is None:
            cached = len(key) == 1 and key[0] in self._glyph_set
            self._cache[key] = cached
        return cached

    def list_supported(self) -> tuple[str, ...]:
        """Supported emoji as one-character strings, in declaration order."""
        return self._supported


# ---------- Loading from emoji-data style config ----------


def parse_unified(unified: str) -> int | None:
    """Parse an emoji-data ``unified`` value into a single scalar.

    ``"1F600"`` → ``0x1F600``.  A lone trailing ``-FE0F`` is folded onto the
    base (``"2764-FE0F"`` → ``0x2764``) because the variation selector is
    kept separately by the stripper.  Any other multi-codepoint value
    returns None.  Invalid hex raises ``ValueError``.
    """
    parts = [p for p in unified.strip().split("-") if p]
    if not parts:
        raise ValueError(f"empty unified value: {unified!r}")
    scalars = [int(p, 16) for p in parts]
    if len(scalars) == 2 and scalars[1] == VS16:
        scalars = scalars[:1]
    if len(scalars) != 1:
        return None
    if not 0 <= scalars[0] <= 0x10FFFF:
        raise ValueError(f"scalar out of range: {unified!r}")
    return scalars[0]


def _read_config(path: Path) -> list[Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise GlyphConfigError(f"Glyph config not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise GlyphConfigError(f"Could not read glyph config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GlyphConfigError(f"Glyph config {path} is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise GlyphConfigError(f"Glyph config {path} must contain a JSON array")
    return data


def load_glyph_set(
    path: str | Path,
    include_categories: Iterable[str] | None = None,
    exclude_subcategories: Iterable[str] = (),
    exclude_emojis: Iterable[str] = (),
) -> GlyphSet:
    """Load a glyph set from an emoji-data style JSON config.

    Each entry needs ``name`` and ``unified``; ``category`` and
    ``subcategory`` drive the filters.  Sheet coordinates and any other keys
    are ignored.  Entries are kept in file order.

    Raises GlyphConfigError when the file is missing or not a JSON array.
    Individual malformed or multi-codepoint entries are skipped and logged.
    """
    data = _read_config(Path(path))
    include = set(include_categories) if include_categories is not None else None
    exclude_sub = set(exclude_subcategories)
    exclude_names = set(exclude_emojis)

    entries: list[GlyphEntry] = []
    skipped_multi = 0
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            _log_debug(f"load_glyph_set: entry {idx} is not an object, skipped")
            continue
        name = str(item.get("name") or "")
        category = str(item.get("category") or "")
        subcategory = str(item.get("subcategory") or "")

        if include is not None and category not in include:
            continue
        if subcategory in exclude_sub or name in exclude_names:
            continue

        unified = item.get("unified")
        if not isinstance(unified, str):
            _log_debug(f"load_glyph_set: entry {idx} ({name}) has no unified value, skipped")
            continue
        try:
            scalar = parse_unified(unified)
        except ValueError as e:
            _log_debug(f"load_glyph_set: entry {idx} ({name}) invalid: {e}")
            continue
        if scalar is None:
            skipped_multi += 1
            _log_debug(f"load_glyph_set: ignoring {name} ({unified}), multi-codepoint")
            continue
        entries.append(GlyphEntry(scalar, name, category, subcategory))

    glyphs = GlyphSet(entries)
    _log_debug(
        f"load_glyph_set: {len(glyphs)} glyphs from {path} "
        f"({skipped_multi} multi-codepoint entries ignored)"
    )
    return glyphs


def list_categories(path: str | Path) -> list[str]:
    """Distinct categories of a glyph config, in first-seen order."""
    categories: list[str] = []
    for item in _read_config(Path(path)):
        if not isinstance(item, dict):
            continue
        category = item.get("category")
        if isinstance(category, str) and category not in categories:
            categories.append(category)
    return categories
