"""Delivery instructions: focus, beats and director notes."""
from __future__ import annotations

from director_engine.voiceover.backstory import CharacterBackstory, CharacterObjective
from director_engine.voiceover.delivery import generate_delivery_instructions
from director_engine.voiceover.models import EmotionalContext, RelationshipContext


def _backstory(*objectives: CharacterObjective) -> CharacterBackstory:
    return CharacterBackstory(character_name="Ines", objectives=list(objectives))


class TestFocusAndBeats:
    def test_no_objectives(self):
        delivery = generate_delivery_instructions(_backstory(), EmotionalContext())
        assert delivery.technique == "stanislavski"
        assert delivery.focus == "objective"
        assert delivery.beats == []
        assert delivery.notes is None

    def test_obstacle_moves_focus(self):
        objective = CharacterObjective(objective="Get the job", obstacle="Her record")
        delivery = generate_delivery_instructions(_backstory(objective), EmotionalContext())
        assert delivery.focus == "obstacle"

    def test_empty_obstacle_keeps_objective_focus(self):
        objective = CharacterObjective(objective="Get the job", obstacle="")
        delivery = generate_delivery_instructions(_backstory(objective), EmotionalContext())
        assert delivery.focus == "objective"

    def test_single_beat_from_first_objective(self):
        first = CharacterObjective(objective="Get the job", tactics=["charm", "bargain"])
        second = CharacterObjective(objective="Leave town", obstacle="No money")
        delivery = generate_delivery_instructions(
            _backstory(first, second), EmotionalContext(primary_emotion="fear")
        )
        assert delivery.focus == "objective"
        assert len(delivery.beats) == 1
        beat = delivery.beats[0]
        assert (beat.start_time, beat.duration) == (0.0, 2.0)
        assert beat.objective == "Get the job"
        assert beat.tactic == "charm"
        assert beat.emotional_shift == "fear"

    def test_fallback_tactic(self):
        delivery = generate_delivery_instructions(
            _backstory(CharacterObjective(objective="Stay")), EmotionalContext()
        )
        assert delivery.beats[0].tactic == "persuade"


class TestNotes:
    RELATIONSHIP = RelationshipContext(other_character="Tom", relationship_type="romantic")

    def test_subtext_only(self):
        delivery = generate_delivery_instructions(
            _backstory(), EmotionalContext(subtext="dismissive")
        )
        assert delivery.notes == "Subtext: dismissive"

    def test_relationship_only(self):
        delivery = generate_delivery_instructions(
            _backstory(), EmotionalContext(relationship_context=self.RELATIONSHIP)
        )
        assert delivery.notes == "Relationship: romantic with Tom"

    def test_both_joined_by_newline(self):
        delivery = generate_delivery_instructions(
            _backstory(),
            EmotionalContext(subtext="hiding true feelings", relationship_context=self.RELATIONSHIP),
        )
        assert delivery.notes == "Subtext: hiding true feelings\nRelationship: romantic with Tom"
