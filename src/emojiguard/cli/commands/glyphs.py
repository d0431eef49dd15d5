"""Glyph set inspection commands: glyphs list, glyphs categories."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib.core.config import glyph_config_path
from ...lib.emoji.glyphs import list_categories
from ...lib.errors import GlyphConfigError
from ...lib.util.ansi import gray, supports_color
from ...lib.util.cells import pad_cells
from ._common import add_glyph_arguments, load_oracle
from ._completers import json_files, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``glyphs`` command group."""
    p_glyphs = subparsers.add_parser("glyphs", help="Inspect the glyph set")
    glyphs_sub = p_glyphs.add_subparsers(dest="glyphs_cmd", required=True)

    p_list = glyphs_sub.add_parser("list", help="List supported emoji in declaration order")
    add_glyph_arguments(p_list)

    p_categories = glyphs_sub.add_parser(
        "categories", help="List the categories present in the glyph config"
    )
    _a = p_categories.add_argument("--glyphs", type=Path, help="Glyph set config (emoji-data JSON)")
    set_completer(_a, json_files)


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the glyphs group.  Returns True if handled."""
    if args.cmd != "glyphs":
        return False
    if args.glyphs_cmd == "list":
        _cmd_list(args)
    elif args.glyphs_cmd == "categories":
        _cmd_categories(args)
    else:
        return False
    return True


def _cmd_list(args: argparse.Namespace) -> None:
    oracle = load_oracle(args)
    entries = oracle.glyph_set.entries
    if not entries:
        print("No glyphs loaded")
        return
    color_enabled = supports_color()
    print(f"{len(entries)} supported glyphs:")
    for entry in entries:
        code = f"U+{entry.unicode:04X}"
        print(f"  {pad_cells(entry.char, 2)}  {code:<8} {gray(entry.name, color_enabled)}")


def _cmd_categories(args: argparse.Namespace) -> None:
    path = args.glyphs if args.glyphs is not None else glyph_config_path()
    if path is None:
        raise SystemExit("No glyph config set (use --glyphs or glyphs.config in config.yml)")
    try:
        names = list_categories(path)
    except GlyphConfigError as e:
        raise SystemExit(str(e))
    if not names:
        print(f"No categories in {path}")
        return
    print(f"Categories in {path}:")
    for n in names:
        print(f"  - {n}")
