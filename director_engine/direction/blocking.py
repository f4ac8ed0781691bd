"""Blocking plan generation: where speakers stand and who talks to whom."""
from __future__ import annotations

from typing import List, Sequence

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.direction.models import (
    BlockingPlan,
    CharacterPosition,
    InteractionPoint,
    Shot,
)
from director_engine.screenplay import ScreenplayScene


def speaking_characters(scene: ScreenplayScene) -> List[str]:
    """Distinct speakers in order of first appearance."""
    return list(dict.fromkeys(d.character for d in scene.dialogue))


def generate_blocking(
    scene: ScreenplayScene,
    shots: Sequence[Shot],
    *,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> BlockingPlan:
    """Line speakers up across the origin and pair each line with its reply.

    Speaker i of n stands at x = i * spacing - (n - 1) * spacing / 2, which is
    i*2 - (n-1) at the default spacing of 2.0.  A line gets an interaction
    point when the next dialogue entry is spoken by someone else.  Interaction
    timing is 0 unless config.stamp_interaction_timing is set, in which case it
    is the start of the dialogue shot covering the line.  No movement paths are
    generated.
    """
    speakers = speaking_characters(scene)
    half_width = (len(speakers) - 1) * config.blocking_spacing / 2
    positions = [
        CharacterPosition(
            character_name=name,
            position=(index * config.blocking_spacing - half_width, 0.0, 0.0),
            timing=0.0,
        )
        for index, name in enumerate(speakers)
    ]

    dialogue_starts = [shot.timing.start_time for shot in shots if shot.dialogue]
    interactions: List[InteractionPoint] = []
    lines = scene.dialogue
    for index, line in enumerate(lines[:-1]):
        partner = lines[index + 1].character
        if partner == line.character:
            continue
        timing = 0.0
        if config.stamp_interaction_timing and index < len(dialogue_starts):
            timing = dialogue_starts[index]
        interactions.append(
            InteractionPoint(
                characters=[line.character, partner],
                position=(0.0, 0.0, 0.0),
                interaction_type="dialogue",
                timing=timing,
            )
        )

    return BlockingPlan(
        character_positions=positions,
        movement_paths=[],
        interaction_points=interactions,
    )
