"""Timeline bookkeeping: the per-scene cursor, the timing lock hash, and the
project-wide timeline composition.

All functions are pure apart from TimelineCursor, whose only state is its own
running time.  Each plan_scene() call owns a fresh cursor, so scenes can be
planned concurrently without sharing anything mutable.

The timing_lock_hash is the timing authority for downstream render stages.
Only scene_number, shot_number and duration feed into it; camera, framing and
notes can be revised without breaking the lock.
"""
from __future__ import annotations

import hashlib
import json
from typing import List, Sequence

from director_engine.direction.models import (
    DirectedScene,
    DirectorProject,
    ProjectTimeline,
    ShotTiming,
    TimelineEntry,
)
from director_engine.errors import InvalidInput


class TimelineCursor:
    """Running clock for one scene's shot list.

    advance() hands out back-to-back, non-overlapping slots: each call returns
    the time before the advance, so slot i starts at the sum of durations
    0..i-1.
    """

    def __init__(self, precision: int = 3) -> None:
        self._precision = precision
        self._current = 0.0

    @property
    def current_time(self) -> float:
        return self._current

    def advance(self, duration: float) -> float:
        if duration < 0:
            raise InvalidInput(f"cannot advance timeline by negative duration {duration}")
        start = self._current
        self._current = round(start + duration, self._precision)
        return start

    def span(self, duration: float) -> ShotTiming:
        """Advance by *duration* and return the ShotTiming of the slot taken."""
        duration = round(duration, self._precision)
        start = self.advance(duration)
        return ShotTiming(duration=duration, start_time=start, end_time=self._current)


def compute_timing_lock_hash(scenes: Sequence[DirectedScene]) -> str:
    """Deterministic SHA-256 over scene/shot ordering and shot durations.

    Canonical JSON (sort_keys, no whitespace) keeps the digest byte-identical
    across platforms.  Returns a lowercase 64-character hex string.
    """
    timing_data = [
        {
            "scene_number": scene.scene_number,
            "shot_number": shot.shot_number,
            "duration": round(shot.timing.duration, 3),
        }
        for scene in scenes
        for shot in scene.shots
    ]
    canonical = json.dumps(timing_data, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def compose_timeline(project: DirectorProject, precision: int = 3) -> ProjectTimeline:
    """Lay every shot of *project* on a single clock, scene after scene.

    Scene k starts where scene k-1 ended; shots keep their scene-local offsets
    relative to that start.
    """
    entries: List[TimelineEntry] = []
    offset = 0.0
    for scene in project.scenes:
        for shot in scene.shots:
            entries.append(
                TimelineEntry(
                    scene_number=scene.scene_number,
                    shot_number=shot.shot_number,
                    camera_type=shot.camera_setup.camera_type,
                    start_time=round(offset + shot.timing.start_time, precision),
                    end_time=round(offset + shot.timing.end_time, precision),
                    dialogue_characters=[d.character for d in shot.dialogue or []],
                    action_text=shot.action[0].text if shot.action else None,
                )
            )
        offset = round(offset + scene.timing.estimated_duration, precision)
    return ProjectTimeline(
        project_id=project.project_id,
        total_duration=offset,
        entries=entries,
    )
