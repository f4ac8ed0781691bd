"""Versioned schema loaders and validators."""

from director_engine.schemas.backstory_v1 import load_backstories
from director_engine.schemas.director_project_v1 import dump_project, load_project, validate_project
from director_engine.schemas.screenplay_v1 import dump_screenplay, load_screenplay, validate_screenplay

__all__ = [
    "load_screenplay",
    "dump_screenplay",
    "validate_screenplay",
    "load_backstories",
    "load_project",
    "dump_project",
    "validate_project",
]
