"""
Pawn animation for the Règle de Trois UI.
Interpolates a pawn's canvas position while it slides to a new cell.
"""

import random
from typing import Optional, Tuple

import numpy as np

from .config import DisplayConfig


class PawnAnimation:
    """
    A pawn sliding from one canvas point to another.

    The game state has already changed when the animation starts; this
    only decides where to draw the pawn in the meantime. The UI refuses
    clicks until is_finished() is True.
    """

    def __init__(
        self,
        start: Tuple[float, float],
        end: Tuple[float, float],
        duration: float = DisplayConfig.ANIMATION_DURATION,
        fps: int = DisplayConfig.ANIMATION_FPS
    ):
        """
        Initialize the animation.

        Args:
            start: (x, y) the pawn leaves from.
            end: (x, y) the pawn arrives at.
            duration: Seconds the slide takes.
            fps: Frames per second for frames().
        """
        self.start = np.asarray(start, dtype=float)
        self.end = np.asarray(end, dtype=float)
        self.duration = duration
        self.fps = fps

    @property
    def frame_count(self) -> int:
        return max(2, int(round(self.duration * self.fps)) + 1)

    def frames(self) -> np.ndarray:
        """
        Get every frame's (x, y), first frame at start and last at end.

        Returns:
            Array of shape (frame_count, 2).
        """
        return np.linspace(self.start, self.end, self.frame_count)

    def position_at(self, elapsed: float) -> Tuple[float, float]:
        """
        Get the pawn's (x, y) after some time.

        Uses ease-out so the pawn settles gently into place.

        Args:
            elapsed: Seconds since the animation started.
        """
        if self.duration <= 0:
            t = 1.0
        else:
            t = float(np.clip(elapsed / self.duration, 0.0, 1.0))

        eased = 1.0 - (1.0 - t) ** 2
        x, y = self.start + (self.end - self.start) * eased
        return float(x), float(y)

    def is_finished(self, elapsed: float) -> bool:
        return elapsed >= self.duration


def thinking_delay(rng: Optional[random.Random] = None) -> float:
    """
    Pick how long the AI pretends to think.

    Args:
        rng: Random source (default: module random).

    Returns:
        Seconds between THINKING_DELAY_MIN and THINKING_DELAY_MAX.
    """
    rng = rng or random
    return rng.uniform(DisplayConfig.THINKING_DELAY_MIN, DisplayConfig.THINKING_DELAY_MAX)
