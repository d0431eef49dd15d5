# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for codepoint classification and contains_emoji."""

import unittest

from emojiguard.lib.emoji.classify import (
    EMOJI_RANGES,
    CodepointClass,
    classify,
    contains_emoji,
    is_emoji_range,
)


class ClassifyTests(unittest.TestCase):
    """Tests for per-codepoint classification."""

    def test_structural_codepoints(self) -> None:
        """Joiner and variation selectors get their own classes."""
        self.assertIs(classify(0x200D), CodepointClass.ZERO_WIDTH_JOINER)
        self.assertIs(classify(0xFE0F), CodepointClass.VARIATION_SELECTOR)
        self.assertIs(classify(0xFE00), CodepointClass.VARIATION_SELECTOR)
        self.assertIs(classify(0xFE0E), CodepointClass.VARIATION_SELECTOR)

    def test_regional_indicator_bounds(self) -> None:
        """Regional indicators cover exactly U+1F1E6 to U+1F1FF."""
        self.assertIs(classify(0x1F1E6), CodepointClass.REGIONAL_INDICATOR)
        self.assertIs(classify(0x1F1FF), CodepointClass.REGIONAL_INDICATOR)
        # U+1F1E5 is still in the enclosed alphanumeric block
        self.assertIs(classify(0x1F1E5), CodepointClass.EMOJI_PRESENTATION)

    def test_skin_tones_take_precedence_over_pictographs(self) -> None:
        """Skin tone modifiers win over the pictograph block they live in."""
        for cp in range(0x1F3FB, 0x1F400):
            self.assertIs(classify(cp), CodepointClass.SKIN_TONE_MODIFIER, hex(cp))
        self.assertIs(classify(0x1F3FA), CodepointClass.EMOJI_PRESENTATION)

    def test_emoji_presentation(self) -> None:
        """Common emoji classify as emoji presentation."""
        for ch in "😀❤☀✨🙌🔥🤔🫶⭐":
            self.assertIs(classify(ch), CodepointClass.EMOJI_PRESENTATION, ch)

    def test_enclosed_ideographs_are_emoji(self) -> None:
        """Enclosed ideograph emoji belong to an emoji block."""
        for ch in "\U0001f201\U0001f21a\U0001f22f\U0001f232\U0001f23a\U0001f250\U0001f251":
            self.assertIs(classify(ch), CodepointClass.EMOJI_PRESENTATION, repr(ch))
        self.assertTrue(is_emoji_range(0x1F200))
        self.assertTrue(is_emoji_range(0x1F2FF))

    def test_ordinary(self) -> None:
        """Text, placeholders and keycap combiners are ordinary."""
        for ch in "aZ 1안녕.\u25a1\ufffd\u20e3":
            self.assertIs(classify(ch), CodepointClass.ORDINARY, repr(ch))

    def test_lone_surrogate_is_ordinary(self) -> None:
        """A lone surrogate is ordinary whether given as int or str."""
        self.assertIs(classify(0xD83D), CodepointClass.ORDINARY)
        self.assertIs(classify("\udc00"), CodepointClass.ORDINARY)

    def test_rejects_multi_character_string(self) -> None:
        """Only single characters can be classified."""
        with self.assertRaises(ValueError):
            classify("ab")

    def test_ranges_are_sorted_and_disjoint(self) -> None:
        """The emoji block table is sorted without overlaps."""
        previous_end = -1
        for start, end, name in EMOJI_RANGES:
            self.assertLessEqual(start, end, name)
            self.assertGreater(start, previous_end, name)
            previous_end = end

    def test_is_emoji_range_gaps(self) -> None:
        """Codepoints between blocks are not emoji."""
        self.assertFalse(is_emoji_range(0x25A1))
        self.assertFalse(is_emoji_range(0x1F700))
        self.assertTrue(is_emoji_range(0x1F600))
        self.assertFalse(is_emoji_range(0x10FFFF))


class ContainsEmojiTests(unittest.TestCase):
    """Tests for contains_emoji."""

    def test_empty_and_none(self) -> None:
        """Empty and missing text contain no emoji."""
        self.assertFalse(contains_emoji(""))
        self.assertFalse(contains_emoji(None))

    def test_plain_text(self) -> None:
        """Hangul text contains no emoji."""
        self.assertFalse(contains_emoji("안녕하세요 반갑습니다"))

    def test_emoji_anywhere(self) -> None:
        """A single emoji anywhere is enough."""
        self.assertTrue(contains_emoji("hello 😀"))
        self.assertTrue(contains_emoji("❤"))
        self.assertTrue(contains_emoji("\U0001f22f"))

    def test_flag_and_skin_tone_count(self) -> None:
        """Flags and skin tones count as emoji."""
        self.assertTrue(contains_emoji("\U0001f1fa\U0001f1f8"))
        self.assertTrue(contains_emoji("x\U0001f3fb"))

    def test_joiner_and_selector_alone_do_not_count(self) -> None:
        """Joiners and selectors on their own are not emoji."""
        self.assertFalse(contains_emoji("a\u200db\ufe0f"))


if __name__ == "__main__":
    unittest.main()
