"""Model-level invariants on shot and line timing."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from director_engine.direction.models import CameraSetup, ShotTiming
from director_engine.voiceover.models import DialogueTiming, Pause


class TestShotTiming:
    def test_end_must_equal_start_plus_duration(self):
        with pytest.raises(ValidationError):
            ShotTiming(duration=2.0, start_time=1.0, end_time=2.0)

    def test_zero_length_slot(self):
        timing = ShotTiming(duration=0.0, start_time=4.2, end_time=4.2)
        assert timing.end_time == 4.2

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            ShotTiming(duration=-1.0, start_time=0.0, end_time=-1.0)


class TestCameraSetup:
    def test_lens_must_be_positive(self):
        with pytest.raises(ValidationError):
            CameraSetup(position=(0, 0, 0), focal_length=0, aperture=2.8, camera_type="medium")

    def test_rotation_defaults_to_zero(self):
        setup = CameraSetup(position=(0, 1.6, -2), focal_length=50, aperture=2.8, camera_type="medium")
        assert setup.rotation == (0.0, 0.0, 0.0)


class TestDialogueTiming:
    def test_pause_past_end_rejected(self):
        with pytest.raises(ValidationError, match="outside line duration"):
            DialogueTiming(duration=1.0, pauses=[Pause(position=1.5, duration=0.3)])

    def test_pause_at_end_allowed(self):
        timing = DialogueTiming(duration=1.0, pauses=[Pause(position=1.0, duration=0.3)])
        assert timing.pauses[0].position == 1.0
