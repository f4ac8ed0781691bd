import json

import jsonschema

from .schema_loader import load_schema
from .schemas.director_project_v1 import canonical_json_bytes


def validate_screenplay_contract(data: dict) -> None:
    """Validate a raw Screenplay dict against the Screenplay.v1.json contract.

    Raises jsonschema.ValidationError if non-conformant.
    """
    jsonschema.validate(data, load_schema("Screenplay.v1.json"))


def validate_project_contract(data: dict) -> None:
    """Validate a DirectorProject dict against the DirectorProject.v1.json contract.

    Raises jsonschema.ValidationError if non-conformant.
    """
    jsonschema.validate(data, load_schema("DirectorProject.v1.json"))


def validate_project_model(project) -> None:
    """Project a DirectorProject model to canonical JSON, then validate it.

    Raises jsonschema.ValidationError if the artifact is non-conformant.
    """
    validate_project_contract(json.loads(canonical_json_bytes(project).decode("utf-8")))
