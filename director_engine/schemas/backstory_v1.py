"""CharacterBackstory list loader.

The file holds either a JSON list of backstories or an object with a
"backstories" list.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from director_engine.errors import InvalidInput
from director_engine.voiceover.backstory import BackstoryStore, CharacterBackstory


def load_backstories(source: Union[str, bytes, list, dict, Path]) -> BackstoryStore:
    """Load backstories into a read-only BackstoryStore.

    Raises:
        InvalidInput: malformed JSON, wrong root shape, or an invalid record.
        FileNotFoundError: Path does not exist.
    """
    try:
        if isinstance(source, Path):
            data = json.loads(source.read_text(encoding="utf-8"))
        elif isinstance(source, (str, bytes)):
            data = json.loads(source)
        else:
            data = source
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"invalid backstory JSON: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("backstories", [])
    if not isinstance(data, list):
        raise InvalidInput("backstories must be a JSON list")

    try:
        return BackstoryStore(CharacterBackstory.model_validate(item) for item in data)
    except ValidationError as exc:
        raise InvalidInput(f"invalid CharacterBackstory input: {exc.errors()[0]['msg']}") from exc
