"""Dialogue rigging: voice profile, emotion, timing and delivery per line."""

from director_engine.voiceover.backstory import (
    BackstoryStore,
    CharacterBackstory,
    CharacterObjective,
    CharacterRelationship,
    PersonalityTrait,
    no_backstory,
)
from director_engine.voiceover.engine import rig_dialogue
from director_engine.voiceover.models import DialogueRigging, VoiceProfile

__all__ = [
    "rig_dialogue",
    "BackstoryStore",
    "CharacterBackstory",
    "CharacterObjective",
    "CharacterRelationship",
    "DialogueRigging",
    "PersonalityTrait",
    "VoiceProfile",
    "no_backstory",
]
