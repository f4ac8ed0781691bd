"""Emotional context inference for a dialogue line.

Pure functions: parenthetical keywords give the primary emotion, the scene's
other speakers give the relationship context, the backstory's scene-scoped
objective gives the scene objective, and fixed phrase patterns give subtext.
"""
from __future__ import annotations

from typing import Optional

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.rules import EMOTION_RULES, SUBTEXT_RULES, first_match
from director_engine.screenplay import DialogueBlock, ScreenplayScene
from director_engine.voiceover.backstory import CharacterBackstory
from director_engine.voiceover.models import Emotion, EmotionalContext, RelationshipContext


def infer_primary_emotion(parenthetical: Optional[str]) -> Emotion:
    return first_match(parenthetical, EMOTION_RULES, "neutral")


def find_relationship_context(
    dialogue: DialogueBlock,
    backstory: CharacterBackstory,
    scene: Optional[ScreenplayScene],
) -> Optional[RelationshipContext]:
    """First other speaker in scene order that the backstory has a relationship with."""
    if scene is None:
        return None
    for other in scene.dialogue:
        if other.character == dialogue.character:
            continue
        for relationship in backstory.relationships:
            if relationship.other_character == other.character:
                return RelationshipContext(
                    other_character=relationship.other_character,
                    relationship_type=relationship.relationship_type,
                    current_status=relationship.current_status,
                    history=relationship.history,
                )
    return None


def find_scene_objective(
    backstory: CharacterBackstory,
    scene: Optional[ScreenplayScene],
) -> Optional[str]:
    if scene is None:
        return None
    for objective in backstory.objectives:
        if objective.scene_number == scene.scene_number:
            return objective.objective
    return None


def extract_subtext(text: str) -> Optional[str]:
    lowered = text.lower()
    for predicate, subtext in SUBTEXT_RULES:
        if predicate(lowered):
            return subtext
    return None


def infer_emotional_context(
    dialogue: DialogueBlock,
    backstory: CharacterBackstory,
    scene: Optional[ScreenplayScene] = None,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> EmotionalContext:
    return EmotionalContext(
        primary_emotion=infer_primary_emotion(dialogue.parenthetical),
        emotional_intensity=config.emotional_intensity,
        subtext=extract_subtext(dialogue.text),
        relationship_context=find_relationship_context(dialogue, backstory, scene),
        scene_objective=find_scene_objective(backstory, scene),
    )
