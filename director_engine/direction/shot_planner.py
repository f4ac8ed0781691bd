"""Screenplay scene → DirectedScene shot planner.

Public entry point
------------------
    plan_scene(scene, screenplay=None, lookup_backstory=..., config=...) -> DirectedScene

Pass order:
    1. ESTABLISHING (scene 1, or any scene whose heading names a location)
    2. One DIALOGUE shot per dialogue block, in source order
    3. One ACTION shot per action line, in source order
    4. Blocking plan, then scene timing

Shots share one TimelineCursor, so they are back to back: shot i starts at the
sum of the durations of shots 1..i-1.  A dialogue shot takes its duration from
the rigging engine when the speaker has a backstory, else from word count.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from director_engine.config import DEFAULT_CONFIG, DirectionConfig
from director_engine.direction.blocking import generate_blocking
from director_engine.direction.models import (
    CameraSetup,
    CameraType,
    DirectedScene,
    Framing,
    SceneTiming,
    Shot,
)
from director_engine.direction.timeline import TimelineCursor
from director_engine.rules import ACTION_CAMERA_RULES, DIALOGUE_CAMERA_RULES, first_match
from director_engine.screenplay import (
    ActionLine,
    DialogueBlock,
    SceneHeading,
    Screenplay,
    ScreenplayScene,
)
from director_engine.voiceover.backstory import BackstoryLookup, no_backstory
from director_engine.voiceover.engine import rig_dialogue
from director_engine.voiceover.models import DialogueRigging
from director_engine.voiceover.timing import estimate_speech_duration

logger = logging.getLogger(__name__)


# ── Public API ────────────────────────────────────────────────────────────────


def plan_scene(
    scene: ScreenplayScene,
    screenplay: Optional[Screenplay] = None,
    *,
    lookup_backstory: BackstoryLookup = no_backstory,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> DirectedScene:
    """Turn one screenplay scene into an ordered, time-accumulated shot list.

    Args:
        scene:            The scene to direct.
        screenplay:       Enclosing screenplay, handed through to
                          *lookup_backstory* untouched.
        lookup_backstory: ``(character_name, screenplay) -> backstory | None``.
                          Resolved once per dialogue line at call time.
        config:           Direction constants.

    Returns:
        A DirectedScene with status "planned".  Empty dialogue or action lists
        simply contribute no shots; the planner does not fail on sparse input.
    """
    cursor = TimelineCursor(config.duration_precision)
    shots: List[Shot] = []
    riggings: List[DialogueRigging] = []

    # ── 1. Establishing ───────────────────────────────────────────────────
    if needs_establishing_shot(scene):
        shots.append(_establishing_shot(scene.heading, len(shots) + 1, cursor, config))

    # ── 2. Dialogue ───────────────────────────────────────────────────────
    for dialogue in scene.dialogue:
        backstory = lookup_backstory(dialogue.character, screenplay)
        rigging = None
        if backstory is not None:
            rigging = rig_dialogue(dialogue, backstory, scene, config=config)
            duration = rigging.timing.duration
        else:
            duration = estimate_speech_duration(dialogue.text, config)

        shot = _dialogue_shot(dialogue, len(shots) + 1, duration, cursor, config)
        shots.append(shot)
        if rigging is not None:
            riggings.append(_stamp_rigging(rigging, shot.timing.start_time))

    # ── 3. Action ─────────────────────────────────────────────────────────
    for action in scene.action:
        shots.append(_action_shot(action, len(shots) + 1, cursor, config))

    # ── 4. Blocking and scene timing ──────────────────────────────────────
    blocking = generate_blocking(scene, shots, config=config)
    total = cursor.current_time

    logger.info(
        f"Planned scene {scene.scene_number}: {len(shots)} shots, {total}s, "
        f"{len(riggings)} rigged lines"
    )
    return DirectedScene(
        scene_number=scene.scene_number,
        screenplay_scene=scene,
        shots=shots,
        blocking=blocking,
        timing=SceneTiming(estimated_duration=total, start_time=0.0, end_time=total),
        status="planned",
        dialogue_riggings=riggings,
    )


def needs_establishing_shot(scene: ScreenplayScene) -> bool:
    return scene.scene_number == 1 or scene.heading.location != ""


def classify_dialogue_camera(
    dialogue: DialogueBlock,
    config: DirectionConfig = DEFAULT_CONFIG,
) -> CameraType:
    """close_up for whispered/quiet lines, medium for long lines, else close_up."""
    cue = first_match(dialogue.parenthetical, DIALOGUE_CAMERA_RULES, None)
    if cue is not None:
        return cue
    if len(dialogue.text) > config.medium_shot_min_chars:
        return "medium"
    return "close_up"


def classify_action_camera(action: ActionLine) -> CameraType:
    return first_match(action.text, ACTION_CAMERA_RULES, "medium")


# ── Shot construction ─────────────────────────────────────────────────────────


def _establishing_shot(
    heading: SceneHeading,
    shot_number: int,
    cursor: TimelineCursor,
    config: DirectionConfig,
) -> Shot:
    shot = Shot(
        shot_number=shot_number,
        camera_setup=CameraSetup(
            position=config.establishing_camera_position,
            focal_length=config.establishing_focal_length,
            aperture=config.establishing_aperture,
            camera_type="establishing",
        ),
        framing=Framing(composition="centered", rule_of_thirds=True, depth_of_field="deep"),
        timing=cursor.span(config.establishing_shot_duration),
        visual_notes=f"Establishing shot of {heading.location} - {heading.time_of_day}",
    )
    logger.debug(f"Shot {shot_number}: establishing, {shot.timing.duration}s")
    return shot


def _dialogue_shot(
    dialogue: DialogueBlock,
    shot_number: int,
    duration: float,
    cursor: TimelineCursor,
    config: DirectionConfig,
) -> Shot:
    camera_type = classify_dialogue_camera(dialogue, config)
    focal_length = (
        config.dialogue_close_up_focal_length
        if camera_type == "close_up"
        else config.dialogue_focal_length
    )
    shot = Shot(
        shot_number=shot_number,
        camera_setup=CameraSetup(
            position=config.dialogue_camera_position,
            focal_length=focal_length,
            aperture=config.dialogue_aperture,
            camera_type=camera_type,
        ),
        framing=Framing(composition="rule_of_thirds", rule_of_thirds=True, depth_of_field="shallow"),
        dialogue=[dialogue],
        timing=cursor.span(duration),
        visual_notes=f"{dialogue.character}: {dialogue.parenthetical or ''}",
    )
    logger.debug(
        f"Shot {shot_number}: dialogue ({dialogue.character}), {camera_type}, "
        f"{shot.timing.duration}s"
    )
    return shot


def _action_shot(
    action: ActionLine,
    shot_number: int,
    cursor: TimelineCursor,
    config: DirectionConfig,
) -> Shot:
    camera_type = classify_action_camera(action)
    focal_length = (
        config.action_close_up_focal_length
        if camera_type == "close_up"
        else config.action_focal_length
    )
    duration = (
        action.estimated_duration
        if action.estimated_duration is not None
        else config.action_shot_default_duration
    )
    shot = Shot(
        shot_number=shot_number,
        camera_setup=CameraSetup(
            position=config.action_camera_position,
            focal_length=focal_length,
            aperture=config.action_aperture,
            camera_type=camera_type,
        ),
        framing=Framing(composition="centered", rule_of_thirds=True, depth_of_field="medium"),
        action=[action],
        timing=cursor.span(duration),
        visual_notes=action.text,
    )
    logger.debug(f"Shot {shot_number}: action, {camera_type}, {shot.timing.duration}s")
    return shot


def _stamp_rigging(rigging: DialogueRigging, start_time: float) -> DialogueRigging:
    """Copy of *rigging* whose timing starts where its dialogue shot starts."""
    timing = rigging.timing.model_copy(update={"start_time": start_time})
    return rigging.model_copy(update={"timing": timing})
