"""Spoken-line timing: duration, pauses, emphasis and pacing.

Duration is the word-count estimate passed through ADJUSTMENT_STAGES in order;
each stage is a named multiplicative step so its effect can be checked on its
own.  Pause and emphasis positions come from a fixed per-word estimate and are
clamped to the final duration.
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.screenplay import DialogueBlock
from director_engine.voiceover.models import (
    DialogueTiming,
    EmotionalContext,
    EmphasisPoint,
    Pacing,
    Pause,
    VoiceProfile,
)


def word_count(text: str) -> int:
    return len(text.split())


def estimate_speech_duration(text: str, config: DirectionConfig = DEFAULT_CONFIG) -> float:
    """Unadjusted duration: words / words_per_second.  Empty text gives 0.0."""
    return word_count(text) / config.words_per_second


# ── Adjustment stages ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class AdjustmentStage:
    name: str
    multiplier: Callable[[VoiceProfile, EmotionalContext, DirectionConfig], float]

    def apply(
        self,
        duration: float,
        voice: VoiceProfile,
        emotion: EmotionalContext,
        config: DirectionConfig,
    ) -> float:
        return duration * self.multiplier(voice, emotion, config)


def _pace_multiplier(voice: VoiceProfile, emotion: EmotionalContext, config: DirectionConfig) -> float:
    if voice.pace < config.slow_pace_threshold:
        return config.slow_pace_multiplier
    if voice.pace > config.fast_pace_threshold:
        return config.fast_pace_multiplier
    return 1.0


def _emotion_multiplier(voice: VoiceProfile, emotion: EmotionalContext, config: DirectionConfig) -> float:
    if emotion.primary_emotion in ("anger", "fear"):
        return config.tense_emotion_multiplier
    if emotion.primary_emotion == "sadness":
        return config.sadness_multiplier
    return 1.0


ADJUSTMENT_STAGES: Tuple[AdjustmentStage, ...] = (
    AdjustmentStage("pace", _pace_multiplier),
    AdjustmentStage("emotion", _emotion_multiplier),
)


def apply_adjustments(
    base_duration: float,
    voice: VoiceProfile,
    emotion: EmotionalContext,
    config: DirectionConfig = DEFAULT_CONFIG,
    stages: Sequence[AdjustmentStage] = ADJUSTMENT_STAGES,
) -> float:
    duration = base_duration
    for stage in stages:
        duration = stage.apply(duration, voice, emotion, config)
    return duration


def pacing_for(pace: float, config: DirectionConfig = DEFAULT_CONFIG) -> Pacing:
    if pace < config.slow_pace_threshold:
        return "slow"
    if pace > config.fast_pace_threshold:
        return "fast"
    return "normal"


# ── Pauses and emphasis ───────────────────────────────────────────────────────


def _word_position(index: int, duration: float, config: DirectionConfig) -> float:
    return min(round(index * config.average_word_duration, config.duration_precision), duration)


def generate_pauses(
    text: str,
    emotion: EmotionalContext,
    duration: float,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> List[Pause]:
    """Breath pauses after sentence and clause ends, plus one dramatic pause
    at the midpoint for sad or angry lines.  Ordered by position.
    """
    pauses: List[Pause] = []
    for index, word in enumerate(text.split()):
        if word.endswith("."):
            pause_duration = config.period_pause_duration
        elif word.endswith(","):
            pause_duration = config.comma_pause_duration
        else:
            continue
        pauses.append(
            Pause(
                position=_word_position(index, duration, config),
                duration=pause_duration,
                type="natural",
                purpose="breath",
            )
        )

    if emotion.primary_emotion in ("sadness", "anger"):
        pauses.append(
            Pause(
                position=round(duration / 2, config.duration_precision),
                duration=config.dramatic_pause_duration,
                type="dramatic",
                purpose="emphasis",
            )
        )
    return sorted(pauses, key=lambda p: p.position)


def generate_emphasis_points(
    text: str,
    duration: float,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> List[EmphasisPoint]:
    """Stress capitalized words (volume) and fixed emotional words (combination).

    A word can hit both rules and then yields two points at the same position.
    """
    emotional_words = {w.lower() for w in config.emotional_words}
    points: List[EmphasisPoint] = []
    for index, raw in enumerate(text.split()):
        word = raw.strip(string.punctuation)
        if not word:
            continue
        position = _word_position(index, duration, config)
        if word[0].isupper() and len(word) > config.emphasis_min_word_length:
            points.append(
                EmphasisPoint(
                    position=position,
                    word=word,
                    intensity=config.capitalized_emphasis_intensity,
                    technique="volume",
                )
            )
        if word.lower() in emotional_words:
            points.append(
                EmphasisPoint(
                    position=position,
                    word=word,
                    intensity=config.emotional_word_intensity,
                    technique="combination",
                )
            )
    return points


def calculate_dialogue_timing(
    dialogue: DialogueBlock,
    voice: VoiceProfile,
    emotion: EmotionalContext,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> DialogueTiming:
    base = estimate_speech_duration(dialogue.text, config)
    duration = round(apply_adjustments(base, voice, emotion, config), config.duration_precision)
    return DialogueTiming(
        start_time=0.0,
        duration=duration,
        pauses=generate_pauses(dialogue.text, emotion, duration, config),
        emphasis_points=generate_emphasis_points(dialogue.text, duration, config),
        pacing=pacing_for(voice.pace, config),
    )
