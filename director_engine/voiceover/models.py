"""Dialogue rigging models: voice, timing, emotion and delivery for one line.

A DialogueRigging refers to its character backstory by key only
(character_backstory_id); it never embeds the backstory, so later edits to a
backstory cannot silently change a rigging already produced.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from director_engine.screenplay import DialogueBlock

Emotion = Literal[
    "neutral", "joy", "sadness", "anger", "fear", "surprise",
    "disgust", "contempt", "love", "shame", "guilt",
]
Timbre = Literal["warm", "bright", "dark", "nasal", "breathy", "resonant", "neutral"]
AccentType = Literal[
    "american", "british", "australian", "irish", "scottish", "southern", "new_york", "none",
]
PauseType = Literal["natural", "dramatic", "emotional", "comedic", "suspenseful"]
PausePurpose = Literal["breath", "emphasis", "reaction", "transition", "subtext"]
EmphasisTechnique = Literal["volume", "pitch", "pace", "pause", "combination"]
Pacing = Literal["slow", "normal", "fast", "varied"]
RelationshipType = Literal["family", "friend", "romantic", "professional", "enemy", "acquaintance"]
RelationshipStatus = Literal["positive", "neutral", "negative", "conflicted"]
ActingTechnique = Literal["stanislavski", "meisner", "method", "classical", "natural"]
DeliveryFocus = Literal[
    "objective", "obstacle", "partner", "emotional_memory", "given_circumstances",
]


# ── Voice ─────────────────────────────────────────────────────────────────────


class Accent(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: AccentType
    strength: float = Field(0.5, ge=0.0, le=1.0)


class VocalCharacteristic(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    characteristic: str
    intensity: float = Field(0.5, ge=0.0, le=1.0)


class VoiceProfile(BaseModel):
    """Synthesized voice parameters; pitch, pace and volume are 0.0–1.0."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    pitch: float = Field(0.5, ge=0.0, le=1.0)
    pace: float = Field(0.5, ge=0.0, le=1.0)
    volume: float = Field(0.7, ge=0.0, le=1.0)
    timbre: Timbre = "neutral"
    accent: Optional[Accent] = None
    vocal_characteristics: List[VocalCharacteristic] = []


# ── Timing ────────────────────────────────────────────────────────────────────


class Pause(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    position: float = Field(ge=0.0)
    duration: float = Field(ge=0.0)
    type: PauseType = "natural"
    purpose: PausePurpose = "breath"


class EmphasisPoint(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    position: float = Field(ge=0.0)
    word: str
    intensity: float = Field(0.5, ge=0.0, le=1.0)
    technique: EmphasisTechnique = "volume"


class DialogueTiming(BaseModel):
    """Spoken duration of a line plus the pauses and stresses inside it.

    Every pause and emphasis position lies within [0, duration].
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    start_time: float = Field(0.0, ge=0.0)
    duration: float = Field(0.0, ge=0.0)
    pauses: List[Pause] = []
    emphasis_points: List[EmphasisPoint] = []
    pacing: Pacing = "normal"

    @model_validator(mode="after")
    def _positions_within_duration(self) -> "DialogueTiming":
        for item in (*self.pauses, *self.emphasis_points):
            if item.position > self.duration + 1e-9:
                raise ValueError(
                    f"position {item.position} lies outside line duration {self.duration}"
                )
        return self


# ── Emotion ───────────────────────────────────────────────────────────────────


class RelationshipContext(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    other_character: str
    relationship_type: RelationshipType
    current_status: RelationshipStatus = "neutral"
    history: Optional[str] = None


class EmotionalContext(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    primary_emotion: Emotion = "neutral"
    emotional_intensity: float = Field(0.5, ge=0.0, le=1.0)
    subtext: Optional[str] = None
    relationship_context: Optional[RelationshipContext] = None
    scene_objective: Optional[str] = None


# ── Delivery ──────────────────────────────────────────────────────────────────


class Beat(BaseModel):
    """Performance sub-unit: one objective pursued with one tactic."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    start_time: float = Field(ge=0.0)
    duration: float = Field(ge=0.0)
    objective: str
    tactic: str
    emotional_shift: Optional[Emotion] = None


class DeliveryInstructions(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    technique: ActingTechnique = "stanislavski"
    focus: DeliveryFocus = "objective"
    notes: Optional[str] = None
    beats: List[Beat] = []


class DialogueRigging(BaseModel):
    """Audio-delivery plan for exactly one DialogueBlock."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    dialogue_block: DialogueBlock
    character_backstory_id: Optional[str] = None
    voice_profile: VoiceProfile
    timing: DialogueTiming = DialogueTiming()
    emotional_context: EmotionalContext = EmotionalContext()
    delivery_instructions: DeliveryInstructions = DeliveryInstructions()
