"""Screenplay → directed production package: shot planning and blocking."""

from director_engine.direction.blocking import generate_blocking
from director_engine.direction.models import (
    BlockingPlan,
    CameraSetup,
    DirectedScene,
    DirectorProject,
    Framing,
    ProjectTimeline,
    Shot,
    ShotTiming,
)
from director_engine.direction.project import direct_project
from director_engine.direction.shot_planner import plan_scene
from director_engine.direction.timeline import TimelineCursor, compose_timeline

__all__ = [
    "plan_scene",
    "generate_blocking",
    "direct_project",
    "compose_timeline",
    "BlockingPlan",
    "CameraSetup",
    "DirectedScene",
    "DirectorProject",
    "Framing",
    "ProjectTimeline",
    "Shot",
    "ShotTiming",
    "TimelineCursor",
]
