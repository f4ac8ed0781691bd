"""Voice profile synthesis from personality traits and background."""
from __future__ import annotations

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.rules import (
    ACCENT_RULES,
    PACE_RULES,
    PITCH_RULES,
    TIMBRE_RULES,
    first_match,
    first_match_any,
)
from director_engine.voiceover.backstory import CharacterBackstory
from director_engine.voiceover.models import Accent, VoiceProfile


def synthesize_voice_profile(
    backstory: CharacterBackstory,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> VoiceProfile:
    """Derive pitch, pace, timbre and accent from *backstory*.

    Ignores any precomputed backstory.voice_profile; see resolve_voice_profile.
    """
    traits = [t.trait for t in backstory.personality_traits]
    background = backstory.background

    pitch = {
        "confident": config.confident_pitch,
        "shy": config.shy_pitch,
    }.get(first_match_any(traits, PITCH_RULES, None), config.default_pitch)

    pace = {
        "energetic": config.energetic_pace,
        "thoughtful": config.thoughtful_pace,
    }.get(first_match_any(traits, PACE_RULES, None), config.default_pace)

    timbre = first_match(background.occupation, TIMBRE_RULES, "neutral")

    accent = None
    accent_type = first_match(background.cultural_background, ACCENT_RULES, None)
    if accent_type == "british":
        accent = Accent(type="british", strength=config.british_accent_strength)
    elif accent_type == "southern":
        accent = Accent(type="southern", strength=config.southern_accent_strength)

    return VoiceProfile(
        pitch=pitch,
        pace=pace,
        volume=config.default_volume,
        timbre=timbre,
        accent=accent,
    )


def resolve_voice_profile(
    backstory: CharacterBackstory,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> VoiceProfile:
    """Precomputed profile when the backstory has one, else a synthesized one."""
    if backstory.voice_profile is not None:
        return backstory.voice_profile
    return synthesize_voice_profile(backstory, config)
