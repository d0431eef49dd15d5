# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Priority remapping of common chat emoji.

Before any lossy fallback runs, the most frequent emoji in chat messages are
rewritten to a curated, close equivalent (every colored heart becomes ``❤``,
grinning variants become ``😀`` and so on).  Frequent content thus degrades
predictably instead of randomly.

The table is applied in declaration order, one ``str.replace`` per entry over
the cumulative text.  A later entry may therefore match text produced by an
earlier one, and composed sequences are listed before the single scalars
they contain.  Many patterns share a replacement; the mapping is lossy on
purpose.
"""

from __future__ import annotations

from collections.abc import Iterable

PriorityTable = tuple[tuple[str, str], ...]

PRIORITY_MAP: PriorityTable = (
    # Composed sequences (must precede their parts)
    ("❤\ufe0f\u200d\U0001f525", "❤"),  # heart on fire
    ("❤\ufe0f\u200d\U0001fa79", "❤"),  # mending heart
    ("❤\u200d\U0001f525", "❤"),
    ("\U0001f62e\u200d\U0001f4a8", "😮"),  # face exhaling
    ("\U0001f635\u200d\U0001f4ab", "😵"),  # face with spiral eyes
    ("\U0001f636\u200d\U0001f32b\ufe0f", "😐"),  # face in clouds
    ("\U0001f636\u200d\U0001f32b", "😐"),
    # Hearts
    ("🧡", "❤"),
    ("💛", "❤"),
    ("💚", "❤"),
    ("💙", "❤"),
    ("💜", "❤"),
    ("🖤", "❤"),
    ("🤍", "❤"),
    ("🤎", "❤"),
    ("🩷", "❤"),
    ("🩵", "❤"),
    ("🩶", "❤"),
    ("💗", "❤"),
    ("💓", "❤"),
    ("💞", "❤"),
    ("💕", "❤"),
    ("💘", "❤"),
    ("💝", "❤"),
    ("💟", "❤"),
    ("❣", "❤"),
    ("♥", "❤"),
    ("🫶", "❤"),
    ("🫰", "❤"),
    # Grinning / laughing
    ("😁", "😀"),
    ("😃", "😀"),
    ("😄", "😀"),
    ("😆", "😂"),
    ("🤣", "😂"),
    ("😹", "😂"),
    ("😸", "😀"),
    ("😺", "😀"),
    # Smiling / affection
    ("🙂", "😊"),
    ("☺", "😊"),
    ("🥲", "😊"),
    ("😌", "😊"),
    ("🤗", "😊"),
    ("🤭", "😊"),
    ("🫡", "😊"),
    ("🥰", "😍"),
    ("😻", "😍"),
    ("🤩", "😍"),
    ("😘", "😍"),
    ("😗", "😍"),
    ("😙", "😍"),
    ("😚", "😍"),
    # Playful
    ("😋", "😛"),
    ("😜", "😛"),
    ("🤪", "😛"),
    ("😝", "😛"),
    # Surprise
    ("😯", "😮"),
    ("😲", "😮"),
    ("😦", "😮"),
    ("😧", "😮"),
    ("🙀", "😮"),
    ("🫢", "😮"),
    # Sad / crying
    ("🥺", "😢"),
    ("🥹", "😢"),
    ("😿", "😢"),
    ("😥", "😢"),
    ("😞", "😔"),
    ("😟", "😔"),
    ("🙁", "😔"),
    ("☹", "😔"),
    ("😕", "😔"),
    ("🫤", "😔"),
    ("😣", "😖"),
    ("😫", "😖"),
    ("😩", "😖"),
    # Angry
    ("😤", "😠"),
    ("😡", "😠"),
    ("🤬", "😠"),
    ("😾", "😠"),
    # Sweat / tired / neutral
    ("🥵", "😅"),
    ("😓", "😅"),
    ("🫠", "😅"),
    ("🥱", "😪"),
    ("😴", "😪"),
    ("🤤", "😪"),
    ("😑", "😐"),
    ("😶", "😐"),
    ("🫥", "😐"),
    ("🤐", "😐"),
    ("🤨", "🤔"),
    ("🧐", "🤔"),
    ("🙄", "😏"),
    ("😒", "😏"),
    # Hands
    ("👏", "👍"),
    ("👌", "👍"),
    ("💪", "👍"),
    ("🤙", "👍"),
    ("🤟", "👍"),
    ("🤞", "🙏"),
    ("🤲", "🙏"),
    ("👐", "🙏"),
    # Celebration
    ("🥳", "🎉"),
    ("🎊", "🎉"),
    ("🎈", "🎉"),
    ("🪅", "🎉"),
    ("🎁", "🎉"),
    # Stars
    ("🌟", "⭐"),
    ("💫", "⭐"),
    ("🌠", "⭐"),
    # Flowers
    ("🌹", "🌸"),
    ("🌷", "🌸"),
    ("💐", "🌸"),
    ("🌺", "🌸"),
    ("🌼", "🌸"),
    ("🌻", "🌸"),
    ("💮", "🌸"),
    # Fire
    ("💥", "🔥"),
    ("☄", "🔥"),
    # Weather
    ("🌞", "☀"),
    ("🌤", "☀"),
    ("⛅", "☁"),
    ("🌥", "☁"),
    ("🌦", "☔"),
    ("🌧", "☔"),
    ("⛈", "☔"),
    # Sweets and music
    ("🍰", "🎂"),
    ("🧁", "🎂"),
    ("🎶", "🎵"),
    ("🎼", "🎵"),
)


def remap(text: str | None, table: Iterable[tuple[str, str]] = PRIORITY_MAP) -> str | None:
    """Apply *table* to *text*, one literal replacement per entry, in order."""
    if not text:
        return text
    for pattern, replacement in table:
        if pattern in text:
            text = text.replace(pattern, replacement)
    return text


def priority_patterns(table: Iterable[tuple[str, str]] = PRIORITY_MAP) -> frozenset[str]:
    """All pattern keys of *table*."""
    return frozenset(pattern for pattern, _ in table)
