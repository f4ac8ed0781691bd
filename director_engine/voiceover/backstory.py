"""Character backstory records and the read-only lookup store.

Backstories are owned by an external store keyed by character name.  The
direction pipeline only reads them through a lookup callable with the shape
``(character_name, screenplay) -> Optional[CharacterBackstory]``.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from director_engine.screenplay import CharacterRole, Screenplay
from director_engine.voiceover.models import (
    Emotion,
    RelationshipStatus,
    RelationshipType,
    VoiceProfile,
)

logger = logging.getLogger(__name__)

SocioeconomicStatus = Literal["lower", "middle", "upper_middle", "upper"]
EmotionalDepth = Literal["shallow", "moderate", "deep", "profound"]
Urgency = Literal["low", "moderate", "high", "critical"]


class PersonalityTrait(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    trait: str
    intensity: float = Field(0.5, ge=0.0, le=1.0)
    context: Optional[str] = None


class CharacterBackground(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    age: Optional[int] = Field(default=None, ge=0)
    occupation: Optional[str] = None
    education: Optional[str] = None
    socioeconomic_status: SocioeconomicStatus = "middle"
    cultural_background: Optional[str] = None
    hometown: Optional[str] = None


class EmotionalRange(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    primary_emotions: List[Emotion] = []
    emotional_depth: EmotionalDepth = "moderate"


class CharacterRelationship(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    other_character: str
    relationship_type: RelationshipType
    current_status: RelationshipStatus = "neutral"
    history: Optional[str] = None
    emotional_connection: float = Field(0.5, ge=0.0, le=1.0)


class CharacterObjective(BaseModel):
    """What the character wants, what blocks it, and how they go after it."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    objective: str
    obstacle: Optional[str] = None
    tactics: List[str] = []
    scene_number: Optional[int] = None
    urgency: Urgency = "moderate"


class CharacterBackstory(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    character_name: str
    role: CharacterRole = "supporting"
    biography: str = ""
    background: CharacterBackground = CharacterBackground()
    personality_traits: List[PersonalityTrait] = []
    emotional_range: EmotionalRange = EmotionalRange()
    voice_profile: Optional[VoiceProfile] = None
    relationships: List[CharacterRelationship] = []
    objectives: List[CharacterObjective] = []
    superobjective: Optional[str] = None
    given_circumstances: List[str] = []

    @property
    def backstory_id(self) -> str:
        """Stable lookup key used by riggings to refer back to this record."""
        return self.character_name


BackstoryLookup = Callable[[str, Optional[Screenplay]], Optional[CharacterBackstory]]


def no_backstory(character_name: str, screenplay: Optional[Screenplay] = None) -> None:
    """Default lookup: no backstory data is available for anyone."""
    return None


class BackstoryStore(Mapping[str, CharacterBackstory]):
    """Immutable name → backstory table.

    Built once by the caller before planning; afterwards it is only read, so
    any number of concurrent planning tasks may share one instance.
    """

    def __init__(self, backstories: Iterable[CharacterBackstory] = ()) -> None:
        table = {}
        for backstory in backstories:
            if backstory.character_name in table:
                logger.warning(
                    f"Duplicate backstory for {backstory.character_name!r}; keeping the first"
                )
                continue
            table[backstory.character_name] = backstory
        self._table = MappingProxyType(table)

    def __getitem__(self, character_name: str) -> CharacterBackstory:
        return self._table[character_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def lookup(
        self, character_name: str, screenplay: Optional[Screenplay] = None
    ) -> Optional[CharacterBackstory]:
        return self._table.get(character_name)
