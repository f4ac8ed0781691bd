"""Screenplay → DirectorProject assembly.

Scenes are independent: each plan_scene() call owns its own timeline cursor
and output tree, and the backstory lookup is only read.  Assembly here is
sequential and keeps screenplay order.

project_id is "dp_" + SHA-256(title)[:16] and created_at is always supplied by
the caller or the fixed epoch below; the system clock is never read.
"""
from __future__ import annotations

import hashlib
import logging
from typing import List

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.direction.models import DirectedScene, DirectorProject
from director_engine.direction.shot_planner import plan_scene
from director_engine.direction.timeline import compute_timing_lock_hash
from director_engine.errors import InvalidInput
from director_engine.screenplay import Screenplay
from director_engine.voiceover.backstory import BackstoryLookup, no_backstory

logger = logging.getLogger(__name__)

_DEFAULT_CREATED_AT: str = "1970-01-01T00:00:00Z"


def make_project_id(title: str) -> str:
    digest = hashlib.sha256(title.encode("utf-8")).hexdigest()
    return f"dp_{digest[:16]}"


def direct_project(
    screenplay: Screenplay,
    *,
    lookup_backstory: BackstoryLookup = no_backstory,
    config: DirectionConfig = DEFAULT_CONFIG,
    created_at: str = _DEFAULT_CREATED_AT,
) -> DirectorProject:
    """Plan every scene of *screenplay* and wrap the results in a project.

    Raises:
        InvalidInput: scene numbers are not strictly increasing.
    """
    _check_scene_order(screenplay)

    scenes: List[DirectedScene] = [
        plan_scene(scene, screenplay, lookup_backstory=lookup_backstory, config=config)
        for scene in screenplay.scenes
    ]
    total = round(
        sum(scene.timing.estimated_duration for scene in scenes), config.duration_precision
    )
    project = DirectorProject(
        project_id=make_project_id(screenplay.title),
        title=screenplay.title,
        scenes=scenes,
        total_duration=total,
        timing_lock_hash=compute_timing_lock_hash(scenes),
        status="draft",
        created_at=created_at,
    )
    logger.info(
        f"Directed {screenplay.title!r}: {len(scenes)} scenes, "
        f"{sum(len(s.shots) for s in scenes)} shots, {total}s"
    )
    return project


def _check_scene_order(screenplay: Screenplay) -> None:
    previous = 0
    for scene in screenplay.scenes:
        if scene.scene_number <= previous:
            raise InvalidInput(
                f"scene numbers must be strictly increasing; "
                f"got {scene.scene_number} after {previous}"
            )
        previous = scene.scene_number
