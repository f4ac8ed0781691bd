"""BackstoryStore and the default lookup."""
from __future__ import annotations

import logging
from collections.abc import Mapping

import pytest

from director_engine.voiceover.backstory import BackstoryStore, CharacterBackstory, no_backstory


class TestBackstoryStore:
    def test_lookup_by_name(self):
        ana = CharacterBackstory(character_name="Ana", biography="Chef")
        store = BackstoryStore([ana])
        assert store.lookup("Ana") is ana
        assert store["Ana"] is ana
        assert store.lookup("Nobody") is None

    def test_lookup_ignores_screenplay(self):
        store = BackstoryStore([CharacterBackstory(character_name="Ana")])
        assert store.lookup("Ana", None) == store.lookup("Ana", object())

    def test_is_read_only_mapping(self):
        store = BackstoryStore([CharacterBackstory(character_name="Ana")])
        assert isinstance(store, Mapping)
        assert list(store) == ["Ana"]
        assert len(store) == 1
        with pytest.raises(TypeError):
            store["Ben"] = CharacterBackstory(character_name="Ben")

    def test_duplicate_keeps_first(self, caplog):
        first = CharacterBackstory(character_name="Ana", biography="first")
        second = CharacterBackstory(character_name="Ana", biography="second")
        with caplog.at_level(logging.WARNING):
            store = BackstoryStore([first, second])
        assert store["Ana"].biography == "first"
        assert "Duplicate backstory" in caplog.text

    def test_backstory_id_is_character_name(self):
        assert CharacterBackstory(character_name="Ana").backstory_id == "Ana"


def test_no_backstory_returns_none():
    assert no_backstory("Ana") is None
    assert no_backstory("Ana", None) is None
