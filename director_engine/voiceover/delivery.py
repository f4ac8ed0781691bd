"""Acting-delivery instructions: technique, focus, beats and director notes."""
from __future__ import annotations

from typing import List

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.voiceover.backstory import CharacterBackstory
from director_engine.voiceover.models import Beat, DeliveryInstructions, EmotionalContext


def generate_delivery_instructions(
    backstory: CharacterBackstory,
    emotional_context: EmotionalContext,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> DeliveryInstructions:
    """Objective-driven (Stanislavski) delivery built from the first objective.

    Focus is the obstacle when the first objective names one.  At most one
    beat is emitted.
    """
    objective = backstory.objectives[0] if backstory.objectives else None

    focus = "obstacle" if objective is not None and objective.obstacle else "objective"

    beats: List[Beat] = []
    if objective is not None:
        beats.append(
            Beat(
                start_time=0.0,
                duration=config.beat_duration,
                objective=objective.objective,
                tactic=objective.tactics[0] if objective.tactics else config.fallback_tactic,
                emotional_shift=emotional_context.primary_emotion,
            )
        )

    notes: List[str] = []
    if emotional_context.subtext:
        notes.append(f"Subtext: {emotional_context.subtext}")
    relationship = emotional_context.relationship_context
    if relationship is not None:
        notes.append(
            f"Relationship: {relationship.relationship_type} with {relationship.other_character}"
        )

    return DeliveryInstructions(
        technique="stanislavski",
        focus=focus,
        notes="\n".join(notes) if notes else None,
        beats=beats,
    )
