"""
Target placement.

Targets appear at random whole-number positions inside a fixed box of the
mathematical plane.
"""
import random
from typing import Optional

from parabola import config
from parabola.models import Target


class TargetSpawner:
    """Creates new targets at random positions.

    Bounds are inclusive on both ends. Pass a seeded random.Random to get a
    reproducible sequence of targets.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        x_range: tuple = (config.TARGET_X_MIN, config.TARGET_X_MAX),
        y_range: tuple = (config.TARGET_Y_MIN, config.TARGET_Y_MAX),
        radius: float = config.TARGET_RADIUS,
    ):
        if x_range[0] > x_range[1] or y_range[0] > y_range[1]:
            raise ValueError(f"Empty spawn box: x={x_range}, y={y_range}")
        self._rng = rng if rng is not None else random.Random()
        self.x_range = x_range
        self.y_range = y_range
        self.radius = radius

    def spawn_target(self) -> Target:
        """Create a new target at a random position."""
        x = self._rng.randint(*self.x_range)
        y = self._rng.randint(*self.y_range)
        return Target(x=x, y=y, radius=self.radius)
