"""Text commands: sanitize and check."""

from __future__ import annotations

import argparse
import sys

from ...lib.emoji.classify import contains_emoji
from ...lib.util.ansi import supports_color, yes_no
from ._common import add_glyph_arguments, build_sanitizer


def _read_texts(args: argparse.Namespace) -> list[str]:
    """Texts from positional arguments, or stdin lines when none were given."""
    if args.texts:
        return list(args.texts)
    return [line.rstrip("\n") for line in sys.stdin]


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register text subcommands (sanitize, check)."""
    p_sanitize = subparsers.add_parser(
        "sanitize",
        help="Rewrite text so it only uses emoji from the glyph set",
    )
    p_sanitize.add_argument("texts", nargs="*", help="Texts to sanitize (default: stdin lines)")
    add_glyph_arguments(p_sanitize)
    p_sanitize.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the fallback substitution for reproducible output",
    )

    p_check = subparsers.add_parser(
        "check",
        help="Report whether texts contain emoji (exit 1 if none do)",
    )
    p_check.add_argument("texts", nargs="*", help="Texts to check (default: stdin lines)")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle sanitize and check.  Returns True if handled."""
    if args.cmd == "sanitize":
        sanitizer = build_sanitizer(args)
        for text in _read_texts(args):
            print(sanitizer.sanitize(text))
        return True
    if args.cmd == "check":
        _cmd_check(_read_texts(args))
        return True
    return False


def _cmd_check(texts: list[str]) -> None:
    color_enabled = supports_color()
    found = False
    for text in texts:
        has = contains_emoji(text)
        found = found or has
        print(f"{yes_no(has, color_enabled)}\t{text}")
    if not found:
        raise SystemExit(1)
