"""Dialogue rigging entry point.

    rig_dialogue(dialogue, backstory, scene_context=None) -> DialogueRigging

Deterministic; never fails on valid input.  The only raised condition is
InvalidInput when *scene_context* is given but does not contain *dialogue*.
"""
from __future__ import annotations

import logging
from typing import Optional

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.errors import InvalidInput
from director_engine.screenplay import DialogueBlock, ScreenplayScene
from director_engine.voiceover.backstory import CharacterBackstory
from director_engine.voiceover.delivery import generate_delivery_instructions
from director_engine.voiceover.emotion import infer_emotional_context
from director_engine.voiceover.models import DialogueRigging
from director_engine.voiceover.timing import calculate_dialogue_timing
from director_engine.voiceover.voice import resolve_voice_profile

logger = logging.getLogger(__name__)


def rig_dialogue(
    dialogue: DialogueBlock,
    backstory: CharacterBackstory,
    scene_context: Optional[ScreenplayScene] = None,
    *,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> DialogueRigging:
    """Build the voice, emotion, timing and delivery plan for one line."""
    if scene_context is not None and dialogue not in scene_context.dialogue:
        raise InvalidInput(
            f"dialogue by {dialogue.character!r} is not part of scene "
            f"{scene_context.scene_number}"
        )

    voice = resolve_voice_profile(backstory, config)
    emotion = infer_emotional_context(dialogue, backstory, scene_context, config)
    timing = calculate_dialogue_timing(dialogue, voice, emotion, config)
    delivery = generate_delivery_instructions(backstory, emotion, config)

    logger.debug(
        f"Rigged line for {dialogue.character!r}: {timing.duration}s, "
        f"emotion={emotion.primary_emotion}, pacing={timing.pacing}"
    )
    return DialogueRigging(
        dialogue_block=dialogue,
        character_backstory_id=backstory.backstory_id,
        voice_profile=voice,
        timing=timing,
        emotional_context=emotion,
        delivery_instructions=delivery,
    )
