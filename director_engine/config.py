"""Direction constants: the single table of every fixed heuristic value.

All thresholds are fixed; nothing adapts at runtime.  DEFAULT_CONFIG is used
everywhere a caller does not pass its own DirectionConfig.  Overrides can be
loaded from a JSON object whose keys are field names of DirectionConfig.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from director_engine.errors import InvalidInput

Vec3 = Tuple[float, float, float]


class DirectionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    # ── Shot timing ───────────────────────────────────────────────────────
    establishing_shot_duration: float = Field(3.0, ge=0.0)
    action_shot_default_duration: float = Field(2.0, ge=0.0)
    # ~150 wpm
    words_per_second: float = Field(2.5, gt=0.0)
    duration_precision: int = Field(3, ge=0)

    # ── Camera ────────────────────────────────────────────────────────────
    medium_shot_min_chars: int = 100
    establishing_focal_length: float = 24.0
    establishing_aperture: float = 8.0
    establishing_camera_position: Vec3 = (0.0, 2.0, -5.0)
    dialogue_close_up_focal_length: float = 85.0
    dialogue_focal_length: float = 50.0
    dialogue_aperture: float = 2.8
    dialogue_camera_position: Vec3 = (0.0, 1.6, -2.0)
    action_close_up_focal_length: float = 85.0
    action_focal_length: float = 35.0
    action_aperture: float = 4.0
    action_camera_position: Vec3 = (0.0, 1.6, -3.0)

    # ── Blocking ──────────────────────────────────────────────────────────
    blocking_spacing: float = 2.0
    stamp_interaction_timing: bool = False

    # ── Voice synthesis ───────────────────────────────────────────────────
    default_pitch: float = Field(0.5, ge=0.0, le=1.0)
    confident_pitch: float = Field(0.6, ge=0.0, le=1.0)
    shy_pitch: float = Field(0.4, ge=0.0, le=1.0)
    default_pace: float = Field(0.5, ge=0.0, le=1.0)
    energetic_pace: float = Field(0.7, ge=0.0, le=1.0)
    thoughtful_pace: float = Field(0.3, ge=0.0, le=1.0)
    default_volume: float = Field(0.7, ge=0.0, le=1.0)
    british_accent_strength: float = Field(0.6, ge=0.0, le=1.0)
    southern_accent_strength: float = Field(0.5, ge=0.0, le=1.0)

    # ── Dialogue timing ───────────────────────────────────────────────────
    slow_pace_threshold: float = 0.4
    fast_pace_threshold: float = 0.6
    slow_pace_multiplier: float = Field(1.3, ge=0.0)
    fast_pace_multiplier: float = Field(0.8, ge=0.0)
    tense_emotion_multiplier: float = Field(0.9, ge=0.0)
    sadness_multiplier: float = Field(1.2, ge=0.0)
    average_word_duration: float = Field(0.4, ge=0.0)
    period_pause_duration: float = Field(0.5, ge=0.0)
    comma_pause_duration: float = Field(0.3, ge=0.0)
    dramatic_pause_duration: float = Field(0.8, ge=0.0)
    emphasis_min_word_length: int = 3
    capitalized_emphasis_intensity: float = Field(0.7, ge=0.0, le=1.0)
    emotional_word_intensity: float = Field(0.8, ge=0.0, le=1.0)
    emotional_words: Tuple[str, ...] = (
        "never", "always", "must", "can't", "won't", "love", "hate", "fear",
    )

    # ── Emotion / delivery ────────────────────────────────────────────────
    emotional_intensity: float = Field(0.5, ge=0.0, le=1.0)
    beat_duration: float = Field(2.0, ge=0.0)
    fallback_tactic: str = "persuade"


DEFAULT_CONFIG = DirectionConfig()


def load_config(source: Union[str, Path, dict]) -> DirectionConfig:
    """Build a DirectionConfig from a JSON file path or an overrides dict.

    Raises:
        InvalidInput: file missing, not a JSON object, unknown key, or a value
            outside its allowed range.
    """
    if isinstance(source, dict):
        data = source
    else:
        path = Path(source)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise InvalidInput(f"config file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidInput(f"invalid JSON in config {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise InvalidInput(f"config root must be a JSON object: {path}")
    try:
        return DirectionConfig.model_validate(data)
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
        raise InvalidInput(f"invalid direction config: {details}") from exc
