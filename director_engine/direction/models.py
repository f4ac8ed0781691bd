"""Directed production models: shots, blocking, directed scenes and projects.

Ownership is tree-shaped: a DirectedScene owns its shots and blocking plan;
a Shot carries copies of the dialogue blocks and action lines it covers, never
back-references.  Everything is frozen once constructed.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from director_engine.config import Vec3
from director_engine.screenplay import ActionLine, DialogueBlock, ScreenplayScene
from director_engine.voiceover.models import DialogueRigging

CameraType = Literal[
    "wide", "medium", "close_up", "extreme_close_up",
    "establishing", "over_shoulder", "point_of_view",
]
Composition = Literal["centered", "rule_of_thirds", "leading_lines", "symmetry", "framing"]
DepthOfField = Literal["shallow", "medium", "deep"]
InteractionType = Literal["dialogue", "physical", "eye_contact", "proximity"]
SceneStatus = Literal["planned", "storyboarded", "blocked", "shot", "edited", "completed"]
ProjectStatus = Literal["draft", "in_production", "post_production", "completed"]

_ORIGIN: Vec3 = (0.0, 0.0, 0.0)
# Float slack for end == start + duration after rounding
_TIMING_TOLERANCE = 1e-6


# ── Shots ─────────────────────────────────────────────────────────────────────


class CameraSetup(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    position: Vec3
    rotation: Vec3 = _ORIGIN
    focal_length: float = Field(gt=0.0)  # mm
    aperture: float = Field(gt=0.0)  # f-stop
    camera_type: CameraType


class Framing(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    composition: Composition
    rule_of_thirds: bool = True
    depth_of_field: DepthOfField


class ShotTiming(BaseModel):
    """Placement of a shot on its scene clock; end_time == start_time + duration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    duration: float = Field(0.0, ge=0.0)
    start_time: float = Field(0.0, ge=0.0)
    end_time: float = Field(0.0, ge=0.0)

    @model_validator(mode="after")
    def _end_matches_start_plus_duration(self) -> "ShotTiming":
        if abs(self.end_time - (self.start_time + self.duration)) > _TIMING_TOLERANCE:
            raise ValueError(
                f"end_time {self.end_time} != start_time {self.start_time} "
                f"+ duration {self.duration}"
            )
        return self


class Shot(BaseModel):
    """One continuous camera setup covering part of a scene."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    shot_number: int = Field(ge=1)
    camera_setup: CameraSetup
    framing: Framing
    dialogue: Optional[List[DialogueBlock]] = None
    action: Optional[List[ActionLine]] = None
    timing: ShotTiming = ShotTiming()
    visual_notes: Optional[str] = None


# ── Blocking ──────────────────────────────────────────────────────────────────


class CharacterPosition(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    character_name: str
    position: Vec3
    rotation: Vec3 = _ORIGIN
    timing: float = Field(0.0, ge=0.0)


class MovementPath(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    character_name: str
    waypoints: List[Vec3] = []
    duration: float = Field(0.0, ge=0.0)


class InteractionPoint(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    characters: List[str]
    position: Vec3 = _ORIGIN
    interaction_type: InteractionType = "dialogue"
    timing: float = Field(0.0, ge=0.0)


class BlockingPlan(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    character_positions: List[CharacterPosition] = []
    movement_paths: List[MovementPath] = []
    interaction_points: List[InteractionPoint] = []


# ── Scenes and projects ───────────────────────────────────────────────────────


class SceneTiming(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    estimated_duration: float = Field(0.0, ge=0.0)
    start_time: float = Field(0.0, ge=0.0)
    end_time: float = Field(0.0, ge=0.0)


class DirectedScene(BaseModel):
    """A screenplay scene turned into a timed shot list with blocking.

    dialogue_riggings holds one rigging per dialogue line whose speaker had a
    backstory at planning time, in dialogue order.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    scene_number: int = Field(ge=1)
    screenplay_scene: Optional[ScreenplayScene] = None
    shots: List[Shot] = []
    blocking: Optional[BlockingPlan] = None
    timing: SceneTiming = SceneTiming()
    status: SceneStatus = "planned"
    dialogue_riggings: List[DialogueRigging] = []


class DirectorProject(BaseModel):
    """All directed scenes of one screenplay.

    timing_lock_hash covers scene/shot ordering and durations only; camera,
    framing and notes may be revised without breaking it.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    schema_version: str = "1.0.0"
    project_id: str
    title: str
    scenes: List[DirectedScene] = []
    total_duration: float = Field(0.0, ge=0.0)
    timing_lock_hash: str
    status: ProjectStatus = "draft"
    created_at: str  # ISO 8601
    metadata: Dict[str, Any] = {}


# ── Project timeline ──────────────────────────────────────────────────────────


class TimelineEntry(BaseModel):
    """One shot placed on the project-wide clock."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    scene_number: int
    shot_number: int
    camera_type: CameraType
    start_time: float = Field(ge=0.0)
    end_time: float = Field(ge=0.0)
    dialogue_characters: List[str] = []
    action_text: Optional[str] = None


class ProjectTimeline(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    project_id: str
    total_duration: float = Field(ge=0.0)
    entries: List[TimelineEntry] = []
