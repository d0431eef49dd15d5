#!/usr/bin/env python3

import argparse
from collections.abc import Sequence

import argcomplete

from ..lib.core.version import format_version_string, get_version_info
from .commands import glyphs, info, messages, sanitize

_COMMANDS = (sanitize, glyphs, messages, info)


def build_parser() -> argparse.ArgumentParser:
    version, revision = get_version_info()
    version_string = format_version_string(version, revision)

    parser = argparse.ArgumentParser(
        prog="emojiguard",
        description="emojiguard – rewrite text so it only uses emoji a fixed glyph set can render",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Quick start:\n"
            "  1. Point at a glyph set:  emojiguard glyphs list --glyphs emoji.json\n"
            "  2. Sanitize text:         emojiguard sanitize --glyphs emoji.json 'hi 😁❤'\n"
            "  3. Preview a store:       emojiguard messages messages.json --glyphs emoji.json\n"
            "\n"
            "Pipeline: remap → strip joiners/flags/skin tones → random fallback → cleanup\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"emojiguard {version_string}")
    sub = parser.add_subparsers(dest="cmd", required=True)
    for command in _COMMANDS:
        command.register(sub)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()

    # Enable bash completion when activated via register-python-argcomplete
    argcomplete.autocomplete(parser)  # pragma: no cover - shell integration

    args = parser.parse_args(argv)

    for command in _COMMANDS:
        if command.dispatch(args):
            return
    parser.error("Unknown command")


if __name__ == "__main__":
    main()
