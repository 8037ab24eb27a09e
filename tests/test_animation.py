import random

import numpy as np
import pytest

from display.animation import PawnAnimation, thinking_delay
from display.config import DisplayConfig


def test_frames_run_from_start_to_end():
    anim = PawnAnimation((50, 50), (150, 150), duration=0.5, fps=60)
    frames = anim.frames()
    assert frames.shape == (31, 2)
    np.testing.assert_allclose(frames[0], [50, 50])
    np.testing.assert_allclose(frames[-1], [150, 150])


def test_position_at_endpoints():
    anim = PawnAnimation((0, 0), (100, 0), duration=0.5)
    assert anim.position_at(0.0) == (0.0, 0.0)
    assert anim.position_at(0.5) == (100.0, 0.0)
    assert anim.position_at(3.0) == (100.0, 0.0)


def test_position_eases_out():
    anim = PawnAnimation((0, 0), (100, 0), duration=1.0)
    x, y = anim.position_at(0.5)
    assert x == pytest.approx(75.0)
    assert y == 0.0


def test_is_finished():
    anim = PawnAnimation((0, 0), (10, 10))
    assert not anim.is_finished(0.1)
    assert anim.is_finished(DisplayConfig.ANIMATION_DURATION)


def test_zero_duration_jumps_to_end():
    anim = PawnAnimation((0, 0), (10, 20), duration=0)
    assert anim.position_at(0.0) == (10.0, 20.0)
    assert anim.is_finished(0.0)


def test_thinking_delay_range():
    rng = random.Random(7)
    for _ in range(50):
        delay = thinking_delay(rng)
        assert DisplayConfig.THINKING_DELAY_MIN <= delay <= DisplayConfig.THINKING_DELAY_MAX
