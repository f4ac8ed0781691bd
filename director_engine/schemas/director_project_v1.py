"""DirectorProject schema v1.0.0: load, dump, validate."""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError

from director_engine.direction.models import DirectorProject

SCHEMA_VERSION = "1.0.0"


def load_project(source: Union[str, bytes, dict, Path]) -> DirectorProject:
    """Parse a DirectorProject from JSON string, bytes, dict, or file Path.

    Raises:
        ValidationError: data does not conform to the DirectorProject schema.
        FileNotFoundError: Path does not exist.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, (str, bytes)):
        data = json.loads(source)
    else:
        data = source
    return DirectorProject.model_validate(data)


def dump_project(project: DirectorProject, *, indent: int = 2) -> str:
    """Serialize a DirectorProject to canonical JSON (sort_keys=True, indent=2)."""
    raw = json.loads(project.model_dump_json())
    return json.dumps(raw, sort_keys=True, indent=indent, ensure_ascii=False)


def canonical_json_bytes(project: DirectorProject) -> bytes:
    """Canonical UTF-8 bytes for a DirectorProject; same layout as dump_project()."""
    return dump_project(project).encode("utf-8")


def validate_project(data: dict) -> List[str]:
    """Validate a raw dict against the DirectorProject model.

    Returns a list of human-readable error strings (empty list = valid).
    Does not raise.
    """
    try:
        DirectorProject.model_validate(data)
        return []
    except ValidationError as exc:
        return [f"{e['loc']}: {e['msg']}" for e in exc.errors()]
