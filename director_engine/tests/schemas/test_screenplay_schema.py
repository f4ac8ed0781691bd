"""Screenplay loading, dumping and contract validation."""
from __future__ import annotations

import json

import jsonschema
import pytest
from pydantic import ValidationError

from director_engine.contract_validate import validate_screenplay_contract
from director_engine.schemas.backstory_v1 import load_backstories
from director_engine.schemas.screenplay_v1 import dump_screenplay, load_screenplay, validate_screenplay
from director_engine.errors import InvalidInput

SCREENPLAY = {
    "title": "Harbor Lights",
    "scenes": [
        {
            "scene_number": 1,
            "heading": {"location": "DOCK", "time_of_day": "NIGHT", "interior_exterior": "EXT"},
            "action": [{"text": "Fog rolls in."}],
            "dialogue": [
                {"character": "Nell", "text": "You're late.", "parenthetical": "quietly"},
            ],
        }
    ],
    "characters": [{"name": "Nell", "role": "protagonist"}],
    "parser_version": "2.3",
}


class TestLoadScreenplay:
    def test_from_dict_string_and_path(self, tmp_path):
        path = tmp_path / "screenplay.json"
        path.write_text(json.dumps(SCREENPLAY), encoding="utf-8")
        from_dict = load_screenplay(SCREENPLAY)
        assert load_screenplay(json.dumps(SCREENPLAY)) == from_dict
        assert load_screenplay(path) == from_dict
        assert from_dict.scenes[0].dialogue[0].parenthetical == "quietly"

    def test_defaults_for_missing_fields(self):
        screenplay = load_screenplay({"title": "Bare", "scenes": [{"scene_number": 2}]})
        scene = screenplay.scenes[0]
        assert scene.heading.location == ""
        assert scene.dialogue == [] and scene.action == []
        assert screenplay.schema_version == "1.0.0"

    def test_unknown_fields_ignored(self):
        assert "parser_version" not in load_screenplay(SCREENPLAY).model_dump()

    def test_invalid_scene_number(self):
        with pytest.raises(ValidationError):
            load_screenplay({"title": "X", "scenes": [{"scene_number": 0}]})


class TestDumpScreenplay:
    def test_sorted_keys_and_stable(self):
        screenplay = load_screenplay(SCREENPLAY)
        text = dump_screenplay(screenplay)
        assert text == dump_screenplay(load_screenplay(json.loads(text)))
        assert list(json.loads(text)) == sorted(json.loads(text))

    def test_dump_satisfies_contract(self):
        validate_screenplay_contract(json.loads(dump_screenplay(load_screenplay(SCREENPLAY))))


class TestValidateScreenplay:
    def test_valid(self):
        assert validate_screenplay(SCREENPLAY) == []

    def test_errors_are_reported_not_raised(self):
        errors = validate_screenplay({"title": "X", "scenes": [{"scene_number": "one"}]})
        assert len(errors) == 1
        assert "scene_number" in errors[0]

    def test_contract_rejects_empty_character(self):
        bad = {"title": "X", "scenes": [{"scene_number": 1, "dialogue": [{"character": "", "text": "Hi"}]}]}
        with pytest.raises(jsonschema.ValidationError):
            validate_screenplay_contract(bad)

    def test_contract_requires_scenes(self):
        with pytest.raises(jsonschema.ValidationError):
            validate_screenplay_contract({"title": "X"})


class TestLoadBackstories:
    RECORD = {
        "character_name": "Nell",
        "personality_traits": [{"trait": "confident", "intensity": 0.8}],
        "objectives": [{"objective": "Find her brother", "scene_number": 1}],
    }

    def test_list_and_wrapped_object(self):
        assert load_backstories([self.RECORD])["Nell"].objectives[0].scene_number == 1
        assert list(load_backstories({"backstories": [self.RECORD]})) == ["Nell"]

    def test_from_path(self, tmp_path):
        path = tmp_path / "backstories.json"
        path.write_text(json.dumps([self.RECORD]), encoding="utf-8")
        assert load_backstories(path).lookup("Nell").character_name == "Nell"

    def test_bad_root(self):
        with pytest.raises(InvalidInput, match="JSON list"):
            load_backstories('"Nell"')

    def test_bad_record(self):
        with pytest.raises(InvalidInput, match="invalid CharacterBackstory"):
            load_backstories([{"character_name": "Nell", "relationships": [{"other_character": "Bo"}]}])

    def test_bad_json(self):
        with pytest.raises(InvalidInput, match="invalid backstory JSON"):
            load_backstories("[{")
