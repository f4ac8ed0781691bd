"""Screenplay schema v1.0.0: load, dump, validate.

Canonical JSON (sort_keys=True) ensures byte-identical serialization of
identical models regardless of dict insertion order.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from director_engine.screenplay import Screenplay

SCHEMA_VERSION = "1.0.0"


def load_screenplay(source: Union[str, bytes, dict, Path]) -> Screenplay:
    """Parse a Screenplay from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the Screenplay schema.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return Screenplay.model_validate(data)


def dump_screenplay(screenplay: Screenplay, *, indent: int = 2) -> str:
    raw = json.loads(screenplay.model_dump_json())
    return json.dumps(raw, sort_keys=True, indent=indent, ensure_ascii=False)


def validate_screenplay(data: dict) -> List[str]:
    """Validate a raw dict against the Screenplay model.

    Returns a list of human-readable error strings (empty list = valid).
    Does not raise.
    """
    try:
        Screenplay.model_validate(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
