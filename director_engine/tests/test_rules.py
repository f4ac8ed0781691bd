"""Keyword rule tables and matching precedence."""
from __future__ import annotations

from director_engine.rules import (
    ACTION_CAMERA_RULES,
    EMOTION_RULES,
    KeywordRule,
    PITCH_RULES,
    first_match,
    first_match_any,
)


class TestKeywordRule:
    def test_substring_case_insensitive(self):
        rule = KeywordRule(("whisper",), "close_up")
        assert rule.matches("WHISPERING")
        assert not rule.matches("shouting")


class TestFirstMatch:
    def test_none_and_empty_give_default(self):
        assert first_match(None, EMOTION_RULES, "neutral") == "neutral"
        assert first_match("", EMOTION_RULES, "neutral") == "neutral"

    def test_table_order_is_precedence(self):
        assert first_match("wide then close", ACTION_CAMERA_RULES, "medium") == "close_up"

    def test_no_match_gives_default(self):
        assert first_match("walks in", ACTION_CAMERA_RULES, "medium") == "medium"


class TestFirstMatchAny:
    def test_rule_order_beats_text_order(self):
        assert first_match_any(["shy", "confident"], PITCH_RULES, None) == "confident"

    def test_blank_texts_skipped(self):
        assert first_match_any(["", "Shy at parties"], PITCH_RULES, None) == "shy"

    def test_nothing_matches(self):
        assert first_match_any([], PITCH_RULES, "default") == "default"
