"""Message store command: load, sanitize and print the newest messages."""

from __future__ import annotations

import argparse
from pathlib import Path

from ...lib.core.config import get_batch_size, get_messages_count, messages_path
from ...lib.errors import MessageStoreError
from ...lib.messages import MessageFeed, MessageInfo, load_latest_messages, sanitize_message
from ...lib.util.ansi import supports_color, violet
from ...lib.util.cells import pad_cells, text_width
from ._common import add_glyph_arguments, build_sanitizer
from ._completers import json_files, set_completer


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the ``messages`` command."""
    p_messages = subparsers.add_parser(
        "messages",
        help="Load the newest messages from a JSON store and print them sanitized",
    )
    _a = p_messages.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Message store (JSON array of {name, story}). Default: messages.path",
    )
    set_completer(_a, json_files)
    p_messages.add_argument(
        "--count", type=int, default=None, help="How many of the newest messages to load"
    )
    p_messages.add_argument(
        "--batches",
        type=int,
        default=None,
        help="Print this many feed batches instead of the whole list",
    )
    p_messages.add_argument(
        "--batch-size", type=int, default=None, help="Messages per batch (default from config)"
    )
    p_messages.add_argument("--raw", action="store_true", help="Print without sanitizing")
    add_glyph_arguments(p_messages)
    p_messages.add_argument("--seed", type=int, default=None, help="Seed fallback substitution")


def dispatch(args: argparse.Namespace) -> bool:
    """Handle the messages command.  Returns True if handled."""
    if args.cmd != "messages":
        return False
    _cmd_messages(args)
    return True


def _print_table(messages: list[MessageInfo], color_enabled: bool) -> None:
    width = max((text_width(m.name) for m in messages), default=0)
    for m in messages:
        print(f"  {violet(pad_cells(m.name, width), color_enabled)}  {m.content}")


def _cmd_messages(args: argparse.Namespace) -> None:
    path = args.path if args.path is not None else messages_path()
    if path is None:
        raise SystemExit("No message store set (pass a path or messages.path in config.yml)")
    count = args.count if args.count is not None else get_messages_count()
    try:
        messages = load_latest_messages(path, count=count)
    except MessageStoreError as e:
        raise SystemExit(str(e))
    if not messages:
        print(f"No messages in {path}")
        return

    if not args.raw:
        sanitizer = build_sanitizer(args)
        messages = [sanitize_message(m, sanitizer) for m in messages]

    color_enabled = supports_color()
    if not args.batches:
        print(f"{len(messages)} messages from {path}:")
        _print_table(messages, color_enabled)
        return

    batch_size = args.batch_size if args.batch_size else get_batch_size()
    try:
        feed = MessageFeed(messages, batch_size=batch_size)
    except ValueError as e:
        raise SystemExit(str(e))
    for n in range(1, args.batches + 1):
        print(f"Batch {n}:")
        _print_table(feed.next_batch(), color_enabled)
