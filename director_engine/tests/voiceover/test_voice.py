"""Voice profile synthesis."""
from __future__ import annotations

import pytest

from director_engine.voiceover.backstory import (
    CharacterBackground,
    CharacterBackstory,
    PersonalityTrait,
)
from director_engine.voiceover.models import Accent, VoiceProfile
from director_engine.voiceover.voice import resolve_voice_profile, synthesize_voice_profile


def _backstory(*traits: str, occupation=None, culture=None, **kwargs) -> CharacterBackstory:
    return CharacterBackstory(
        character_name="Mara",
        personality_traits=[PersonalityTrait(trait=t) for t in traits],
        background=CharacterBackground(occupation=occupation, cultural_background=culture),
        **kwargs,
    )


class TestPitchAndPace:
    def test_defaults(self):
        voice = synthesize_voice_profile(_backstory())
        assert (voice.pitch, voice.pace, voice.volume) == (0.5, 0.5, 0.7)
        assert voice.timbre == "neutral"
        assert voice.accent is None

    @pytest.mark.parametrize(
        "trait, pitch",
        [("Confident", 0.6), ("shy", 0.4), ("painfully shy", 0.4), ("calm", 0.5)],
    )
    def test_pitch(self, trait: str, pitch: float):
        assert synthesize_voice_profile(_backstory(trait)).pitch == pitch

    def test_confident_beats_shy_regardless_of_trait_order(self):
        assert synthesize_voice_profile(_backstory("shy", "confident")).pitch == 0.6

    @pytest.mark.parametrize("trait, pace", [("energetic", 0.7), ("Thoughtful", 0.3)])
    def test_pace(self, trait: str, pace: float):
        assert synthesize_voice_profile(_backstory(trait)).pace == pace

    def test_energetic_beats_thoughtful(self):
        assert synthesize_voice_profile(_backstory("thoughtful", "energetic")).pace == 0.7


class TestTimbreAndAccent:
    @pytest.mark.parametrize(
        "occupation, timbre",
        [
            ("High school teacher", "resonant"),
            ("Professor of Law", "resonant"),
            ("Street artist", "warm"),
            ("Art teacher", "resonant"),
            ("Plumber", "neutral"),
            (None, "neutral"),
        ],
    )
    def test_timbre(self, occupation, timbre: str):
        assert synthesize_voice_profile(_backstory(occupation=occupation)).timbre == timbre

    def test_british_accent(self):
        voice = synthesize_voice_profile(_backstory(culture="British, raised in Leeds"))
        assert voice.accent == Accent(type="british", strength=0.6)

    def test_southern_accent(self):
        voice = synthesize_voice_profile(_backstory(culture="Southern US"))
        assert voice.accent == Accent(type="southern", strength=0.5)

    def test_british_checked_first(self):
        voice = synthesize_voice_profile(_backstory(culture="southern British"))
        assert voice.accent.type == "british"

    def test_unknown_culture_has_no_accent(self):
        assert synthesize_voice_profile(_backstory(culture="Norwegian")).accent is None


class TestResolve:
    def test_precomputed_profile_wins(self):
        preset = VoiceProfile(pitch=0.9, pace=0.2, volume=0.3, timbre="dark")
        backstory = _backstory("confident", voice_profile=preset)
        assert resolve_voice_profile(backstory) == preset

    def test_synthesized_without_preset(self):
        backstory = _backstory("confident")
        assert resolve_voice_profile(backstory) == synthesize_voice_profile(backstory)

    def test_idempotent(self):
        backstory = _backstory("energetic", occupation="artist", culture="british")
        assert synthesize_voice_profile(backstory) == synthesize_voice_profile(backstory)
