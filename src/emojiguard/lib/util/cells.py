# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Terminal cell-width helpers for aligning emoji-bearing columns.

Sanitized message names mix Hangul, Latin and emoji, whose terminal widths
differ (an emoji or a Hangul syllable takes two cells, a Latin letter one).
``len()`` counts scalars, so column layout is computed with Rich's
``cell_len`` instead.
"""

from rich.cells import cell_len


def text_width(text: str) -> int:
    """Terminal cell width of *text* (0 for empty or unmeasurable input)."""
    if not text:
        return 0
    try:
        return cell_len(text)
    except (TypeError, ValueError):
        return len(text)


def pad_cells(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* terminal cells.

    Text already at least *width* cells wide is returned unchanged.
    """
    if not text:
        return " " * max(0, width)
    current = text_width(text)
    if current >= width:
        return text
    return f"{text}{' ' * (width - current)}"
