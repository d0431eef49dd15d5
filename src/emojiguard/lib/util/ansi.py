"""ANSI color helpers for CLI output.

Follows the NO_COLOR (https://no-color.org/) and FORCE_COLOR conventions so
piping ``emojiguard sanitize`` into another tool never leaks escape codes.
"""

import os
import sys
from typing import TextIO


def supports_color(stream: TextIO | None = None) -> bool:
    """Check if *stream* (default stdout) supports color output.

    NO_COLOR always wins. FORCE_COLOR (when set and not ``"0"``) forces color
    on even when the stream is not a TTY. Otherwise falls back to ``isatty()``.
    """
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    stream = stream if stream is not None else sys.stdout
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True."""
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def green(text: str, enabled: bool) -> str:
    return color(text, "32", enabled)


def red(text: str, enabled: bool) -> str:
    return color(text, "31", enabled)


def violet(text: str, enabled: bool) -> str:
    return color(text, "35", enabled)


def gray(text: str, enabled: bool) -> str:
    return color(text, "90", enabled)


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return green("yes", enabled) if value else red("no", enabled)
