"""Keyword rule tables for every heuristic classification.

Each table is an ordered tuple of (keywords, result) pairs.  first_match()
walks the table top to bottom and returns the result of the first rule with a
keyword contained in the (lower-cased) text, so precedence is the table order.
No external state; no randomness.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class KeywordRule:
    keywords: Tuple[str, ...]
    result: str

    def matches(self, text: str) -> bool:
        lowered = text.lower()
        return any(keyword in lowered for keyword in self.keywords)


RuleTable = Tuple[KeywordRule, ...]


def first_match(text: Optional[str], table: RuleTable, default: T) -> Union[str, T]:
    """Return the result of the first rule matching *text*, else *default*."""
    if not text:
        return default
    for rule in table:
        if rule.matches(text):
            return rule.result
    return default


def first_match_any(texts: Iterable[str], table: RuleTable, default: T) -> Union[str, T]:
    """Like first_match, but a rule fires if it matches any of *texts*.

    Rule order still decides precedence: the first rule is tried against
    every text before the second rule is considered.
    """
    texts = [t for t in texts if t]
    for rule in table:
        if any(rule.matches(t) for t in texts):
            return rule.result
    return default


# ── Camera ────────────────────────────────────────────────────────────────────

# Checked against the parenthetical only.  Lines that match nothing fall back
# to the length rule in the shot planner.
DIALOGUE_CAMERA_RULES: RuleTable = (
    KeywordRule(("whisper", "quiet"), "close_up"),
)

ACTION_CAMERA_RULES: RuleTable = (
    KeywordRule(("close",), "close_up"),
    KeywordRule(("wide", "establish"), "establishing"),
)

# ── Emotion (parenthetical) ───────────────────────────────────────────────────

EMOTION_RULES: RuleTable = (
    KeywordRule(("angry", "furious"), "anger"),
    KeywordRule(("sad", "upset"), "sadness"),
    KeywordRule(("happy", "joyful"), "joy"),
    KeywordRule(("fear", "afraid"), "fear"),
)

# ── Voice (personality traits / background) ───────────────────────────────────

PITCH_RULES: RuleTable = (
    KeywordRule(("confident",), "confident"),
    KeywordRule(("shy",), "shy"),
)

PACE_RULES: RuleTable = (
    KeywordRule(("energetic",), "energetic"),
    KeywordRule(("thoughtful",), "thoughtful"),
)

TIMBRE_RULES: RuleTable = (
    KeywordRule(("teacher", "professor"), "resonant"),
    KeywordRule(("artist",), "warm"),
)

ACCENT_RULES: RuleTable = (
    KeywordRule(("british",), "british"),
    KeywordRule(("southern",), "southern"),
)

# ── Subtext (dialogue text) ───────────────────────────────────────────────────
#
# "fine" needs a conjunction, so subtext rules are predicates rather than
# plain keyword lists.

SubtextRule = Tuple[Callable[[str], bool], str]

SUBTEXT_RULES: Tuple[SubtextRule, ...] = (
    (lambda t: "fine" in t and ("not" in t or "don't" in t), "hiding true feelings"),
    (lambda t: "whatever" in t, "dismissive"),
    (lambda t: "i don't care" in t, "defensive, cares deeply"),
)
