"""rig_dialogue() end to end."""
from __future__ import annotations

import pytest

from director_engine.errors import InvalidInput
from director_engine.screenplay import DialogueBlock, ScreenplayScene
from director_engine.voiceover import rig_dialogue
from director_engine.voiceover.backstory import (
    CharacterBackground,
    CharacterBackstory,
    CharacterObjective,
    CharacterRelationship,
    PersonalityTrait,
)
from director_engine.voiceover.models import VoiceProfile

LINE = DialogueBlock(character="Rosa", text="I'm fine. I'm not crying.", parenthetical="sad")


def _rosa(**kwargs) -> CharacterBackstory:
    return CharacterBackstory(
        character_name="Rosa",
        personality_traits=[PersonalityTrait(trait="thoughtful")],
        background=CharacterBackground(occupation="art teacher", cultural_background="Southern"),
        relationships=[CharacterRelationship(other_character="Eli", relationship_type="family")],
        objectives=[
            CharacterObjective(objective="Keep Eli home", obstacle="His pride", scene_number=3)
        ],
        **kwargs,
    )


def _scene() -> ScreenplayScene:
    return ScreenplayScene(
        scene_number=3,
        dialogue=[LINE, DialogueBlock(character="Eli", text="Then why are you packing?")],
    )


class TestRigDialogue:
    def test_full_rigging(self):
        rigging = rig_dialogue(LINE, _rosa(), _scene())
        assert rigging.dialogue_block == LINE
        assert rigging.character_backstory_id == "Rosa"

        voice = rigging.voice_profile
        assert (voice.pace, voice.timbre, voice.accent.type) == (0.3, "resonant", "southern")

        emotion = rigging.emotional_context
        assert emotion.primary_emotion == "sadness"
        assert emotion.subtext == "hiding true feelings"
        assert emotion.relationship_context.other_character == "Eli"
        assert emotion.scene_objective == "Keep Eli home"

        # 5 words / 2.5 * 1.3 (slow) * 1.2 (sadness)
        assert rigging.timing.duration == pytest.approx(3.12)
        assert rigging.timing.pacing == "slow"
        assert rigging.timing.start_time == 0.0
        assert any(p.type == "dramatic" for p in rigging.timing.pauses)

        delivery = rigging.delivery_instructions
        assert delivery.focus == "obstacle"
        assert delivery.notes == "Subtext: hiding true feelings\nRelationship: family with Eli"

    def test_backstory_referenced_not_embedded(self):
        dumped = rig_dialogue(LINE, _rosa(), _scene()).model_dump()
        assert dumped["character_backstory_id"] == "Rosa"
        assert set(dumped) == {
            "dialogue_block",
            "character_backstory_id",
            "voice_profile",
            "timing",
            "emotional_context",
            "delivery_instructions",
        }

    def test_precomputed_voice_profile(self):
        preset = VoiceProfile(pace=0.9)
        rigging = rig_dialogue(LINE, _rosa(voice_profile=preset))
        assert rigging.voice_profile == preset
        assert rigging.timing.pacing == "fast"

    def test_without_scene_context(self):
        rigging = rig_dialogue(LINE, _rosa())
        assert rigging.emotional_context.relationship_context is None
        assert rigging.emotional_context.scene_objective is None

    def test_line_outside_scene_raises(self):
        stray = DialogueBlock(character="Rosa", text="Goodbye.")
        with pytest.raises(InvalidInput, match="not part of scene 3"):
            rig_dialogue(stray, _rosa(), _scene())

    def test_deterministic(self):
        assert rig_dialogue(LINE, _rosa(), _scene()) == rig_dialogue(LINE, _rosa(), _scene())

    def test_empty_line(self):
        rigging = rig_dialogue(DialogueBlock(character="Rosa", text=""), _rosa())
        assert rigging.timing.duration == 0.0
        assert rigging.timing.emphasis_points == []
