# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the message store reader and batch feed."""

import tempfile
import unittest
from pathlib import Path

from emojiguard.lib.emoji.glyphs import GlyphOracle, glyph_set_from_pairs
from emojiguard.lib.emoji.pipeline import EmojiSanitizer
from emojiguard.lib.errors import MessageStoreError
from emojiguard.lib.messages import (
    MessageFeed,
    MessageInfo,
    load_latest_messages,
    parse_messages,
    sanitize_message,
)
from test_utils import emojiguard_env, write_messages


def _records(n: int) -> list[dict]:
    return [{"id": i, "name": f"user{i}", "story": f"message {i}"} for i in range(n)]


def _messages(n: int) -> list[MessageInfo]:
    return [MessageInfo(f"user{i}", f"message {i}") for i in range(n)]


class ParseMessagesTests(unittest.TestCase):
    """Tests for turning raw records into messages."""

    def test_maps_name_and_story(self) -> None:
        """name and story map to name and content."""
        parsed = parse_messages([{"name": "민수", "story": "안녕 😀", "timestamp": 1}])
        self.assertEqual(parsed, [MessageInfo("민수", "안녕 😀")])

    def test_missing_fields_become_empty(self) -> None:
        """Missing fields become empty strings."""
        self.assertEqual(parse_messages([{}]), [MessageInfo("", "")])

    def test_non_string_values_are_stringified(self) -> None:
        """Non-string values are converted, None becomes empty."""
        self.assertEqual(parse_messages([{"name": 7, "story": None}]), [MessageInfo("7", "")])

    def test_non_object_entries_are_skipped(self) -> None:
        """Entries that are not objects are skipped."""
        with emojiguard_env():
            parsed = parse_messages(["oops", {"name": "a", "story": "b"}, 3])
        self.assertEqual(parsed, [MessageInfo("a", "b")])

    def test_non_array_raises(self) -> None:
        """A top-level object is rejected."""
        with self.assertRaises(MessageStoreError):
            parse_messages({"name": "a"})


class LoadLatestMessagesTests(unittest.TestCase):
    """Tests for reading the newest messages from a store."""

    def test_returns_newest_oldest_first(self) -> None:
        """The newest records come back oldest first."""
        with emojiguard_env() as env:
            path = write_messages(env.base / "messages.json", _records(15))
            latest = load_latest_messages(path, count=10)
        self.assertEqual(len(latest), 10)
        self.assertEqual(latest[0].name, "user5")
        self.assertEqual(latest[-1].content, "message 14")

    def test_fewer_records_than_count(self) -> None:
        """A short store returns everything."""
        with emojiguard_env() as env:
            path = write_messages(env.base / "messages.json", _records(3))
            self.assertEqual(load_latest_messages(path, count=10), _messages(3))

    def test_empty_store(self) -> None:
        """An empty store yields no messages."""
        with emojiguard_env() as env:
            path = write_messages(env.base / "messages.json", [])
            self.assertEqual(load_latest_messages(path), [])

    def test_zero_count_loads_nothing(self) -> None:
        """A zero count yields no messages."""
        with emojiguard_env() as env:
            path = write_messages(env.base / "messages.json", _records(3))
            self.assertEqual(load_latest_messages(path, count=0), [])

    def test_missing_store_raises(self) -> None:
        """A missing store raises MessageStoreError."""
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(MessageStoreError) as ctx:
                load_latest_messages(Path(td) / "missing.json")
        self.assertIn("not found", str(ctx.exception))

    def test_invalid_json_raises(self) -> None:
        """Broken JSON raises MessageStoreError."""
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "messages.json"
            path.write_text("[{", encoding="utf-8")
            with self.assertRaises(MessageStoreError):
                load_latest_messages(path)


class SanitizeMessageTests(unittest.TestCase):
    """Tests for sanitizing a single message."""

    def test_name_and_content_are_sanitized(self) -> None:
        """Both name and content go through the pipeline."""
        sanitizer = EmojiSanitizer(
            GlyphOracle(glyph_set_from_pairs(["😀"])), randrange=lambda n: 0
        )
        message = MessageInfo("민수 😁", "hi \U0001f1fa\U0001f1f8  🐱")
        result = sanitize_message(message, sanitizer)
        self.assertEqual(result, MessageInfo("민수 😀", "hi 😀"))


class MessageFeedTests(unittest.TestCase):
    """Tests for the wrapping batch feed."""

    def test_batches_wrap_around(self) -> None:
        """Batches wrap to the start of the list."""
        feed = MessageFeed(_messages(7), batch_size=5)
        self.assertEqual([m.name for m in feed.next_batch()], [f"user{i}" for i in range(5)])
        self.assertEqual(feed.cursor, 5)
        self.assertEqual(
            [m.name for m in feed.next_batch()],
            ["user5", "user6", "user0", "user1", "user2"],
        )
        self.assertEqual(feed.cursor, 3)

    def test_batch_never_exceeds_message_count(self) -> None:
        """A batch never repeats a message within itself."""
        feed = MessageFeed(_messages(2), batch_size=5)
        self.assertEqual(len(feed.next_batch()), 2)
        self.assertEqual(feed.cursor, 0)

    def test_empty_feed(self) -> None:
        """An empty feed yields empty batches."""
        feed = MessageFeed()
        self.assertEqual(feed.next_batch(), [])
        self.assertEqual(len(feed), 0)

    def test_replace_keeps_cursor_in_range(self) -> None:
        """Replacing messages keeps the cursor valid."""
        feed = MessageFeed(_messages(10), batch_size=4)
        feed.next_batch()
        feed.next_batch()
        self.assertEqual(feed.cursor, 8)
        feed.replace(_messages(3))
        self.assertEqual(feed.cursor, 2)
        feed.replace([])
        self.assertEqual(feed.cursor, 0)

    def test_invalid_batch_size(self) -> None:
        """A batch size below one is rejected."""
        with self.assertRaises(ValueError):
            MessageFeed(batch_size=0)


if __name__ == "__main__":
    unittest.main()
