# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Message store reader and batch feed.

The store is a JSON array of message records.  Each record carries the
sender under ``name`` and the message body under ``story``; other keys
(``id``, ``timestamp``, ...) are ignored.  Only the newest records (the end
of the array) are loaded.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import MessageStoreError
from .util.logging_utils import _log_debug

if TYPE_CHECKING:
    from .emoji.pipeline import EmojiSanitizer


@dataclass(frozen=True)
class MessageInfo:
    """A message as shown to the host: sender name and content."""

    name: str
    content: str


def _text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def parse_messages(data: object) -> list[MessageInfo]:
    """Convert decoded store JSON into messages, in store order.

    Raises MessageStoreError if *data* is not a list.  Non-object entries
    are skipped.
    """
    if not isinstance(data, list):
        raise MessageStoreError("Message store must contain a JSON array")
    messages: list[MessageInfo] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            _log_debug(f"parse_messages: entry {idx} is not an object, skipped")
            continue
        messages.append(MessageInfo(name=_text(item.get("name")), content=_text(item.get("story"))))
    return messages


def load_latest_messages(path: str | Path, count: int = 10) -> list[MessageInfo]:
    """Load the newest *count* messages from the store at *path*.

    Returns them oldest-first.  Fewer records than *count* yields them all;
    an empty store yields ``[]``.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise MessageStoreError(f"Message store not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise MessageStoreError(f"Could not read message store {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise MessageStoreError(f"Message store {path} is not valid JSON: {e}") from e

    messages = parse_messages(data)
    if not messages:
        _log_debug(f"load_latest_messages: {path} is empty")
        return []
    latest = messages[max(0, len(messages) - max(0, count)) :]
    _log_debug(f"load_latest_messages: {len(latest)} of {len(messages)} messages from {path}")
    return latest


def sanitize_message(message: MessageInfo, sanitizer: EmojiSanitizer) -> MessageInfo:
    """Sanitize name and content independently."""
    return MessageInfo(
        name=sanitizer.sanitize(message.name) or "",
        content=sanitizer.sanitize(message.content) or "",
    )


class MessageFeed:
    """Hands out fixed-size batches of messages, wrapping around the list."""

    def __init__(self, messages: Iterable[MessageInfo] = (), batch_size: int = 5) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        self.batch_size = batch_size
        self._messages: list[MessageInfo] = list(messages)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._messages)

    def replace(self, messages: Iterable[MessageInfo]) -> None:
        """Swap in a freshly loaded list, keeping the cursor in range."""
        self._messages = list(messages)
        self._cursor = self._cursor % len(self._messages) if self._messages else 0

    def next_batch(self) -> list[MessageInfo]:
        """Return up to ``batch_size`` messages and advance the cursor."""
        total = len(self._messages)
        if not total:
            return []
        take = min(self.batch_size, total)
        batch = [self._messages[(self._cursor + i) % total] for i in range(take)]
        self._cursor = (self._cursor + take) % total
        return batch
