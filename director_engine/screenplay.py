"""Screenplay input models.

A Screenplay is supplied by an external parser and is read-only for the
direction pipeline.  extra="ignore" lets parsers attach fields the planner does
not use; frozen=True keeps a scene identical across every planning pass.
"""
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

InteriorExterior = Literal["INT", "EXT"]
TransitionType = Literal["CUT TO", "FADE IN", "FADE OUT", "DISSOLVE TO", "MATCH CUT"]
CharacterRole = Literal["protagonist", "antagonist", "supporting", "minor"]


class SceneHeading(BaseModel):
    """Slug line: location, time of day, INT/EXT."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    location: str = ""
    time_of_day: str = ""
    interior_exterior: InteriorExterior = "INT"


class ActionLine(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    text: str
    estimated_duration: Optional[float] = Field(default=None, ge=0.0)


class DialogueBlock(BaseModel):
    """One speech: character cue, line, optional (parenthetical)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    character: str
    text: str
    parenthetical: Optional[str] = None
    estimated_duration: Optional[float] = Field(default=None, ge=0.0)


class Transition(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: TransitionType = "CUT TO"
    target_scene_number: Optional[int] = None


class ScreenplayScene(BaseModel):
    """A numbered scene with its action lines and dialogue in source order."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    scene_number: int = Field(ge=1)
    heading: SceneHeading = SceneHeading()
    action: List[ActionLine] = []
    dialogue: List[DialogueBlock] = []
    transitions: List[Transition] = []


class Character(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    description: Optional[str] = None
    role: CharacterRole = "supporting"


class ScreenplayMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    author: Optional[str] = None
    version: Optional[str] = None
    date: Optional[str] = None  # ISO 8601
    notes: Optional[str] = None


class Screenplay(BaseModel):
    """Parsed screenplay (title, scenes, cast)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    schema_version: str = "1.0.0"
    title: str
    scenes: List[ScreenplayScene] = []
    characters: List[Character] = []
    metadata: Optional[ScreenplayMetadata] = None
