"""
Game session state.

A GameSession owns everything a single-page version of the game would keep
in globals: the current target, the bird, the status line and the text
outputs. Sessions are independent, so tests (or several windows) can run
side by side.
"""
from typing import Callable, Optional

from parabola import config
from parabola.coordinates import CoordinateMapper
from parabola.logging import get_logger
from parabola.models import CanvasPoint, Coefficients, MathPoint, Projectile, Resolution, Target
from parabola.renderer import SceneRenderer
from parabola.spawner import TargetSpawner
from parabola.text import STATUS_IDLE, StatusMessage, format_equation, format_target

log = get_logger('session')


def default_target() -> Target:
    """Target shown before the first spawn."""
    return Target(x=config.INITIAL_TARGET_X, y=config.INITIAL_TARGET_Y,
                  radius=config.TARGET_RADIUS)


class GameSession:
    """State of one game.

    Coefficients are never stored: every read goes to coefficient_source,
    which the UI backs with its sliders.

    Attributes:
        renderer: Draws onto the session's canvas
        spawner: Source of replacement targets
        hits: Hits in this session
        misses: Misses in this session
        equation_text: Last rendered equation string
        target_text: Last rendered target coordinates string
    """

    def __init__(
        self,
        renderer: SceneRenderer,
        coefficient_source: Callable[[], Coefficients],
        spawner: Optional[TargetSpawner] = None,
        target: Optional[Target] = None,
        bird_radius: float = config.BIRD_RADIUS,
    ):
        self.renderer = renderer
        self.spawner = spawner if spawner is not None else TargetSpawner()
        self._read_coefficients = coefficient_source

        self._target = target if target is not None else default_target()
        self._bird = Projectile(x=0, y=self.coefficients().c, radius=bird_radius)
        self._status = STATUS_IDLE

        self.hits = 0
        self.misses = 0
        self.equation_text = ""
        self.target_text = ""
        self.refresh_text()

    @property
    def mapper(self) -> CoordinateMapper:
        return self.renderer.mapper

    @property
    def resolution(self) -> Resolution:
        return self.renderer.resolution

    @property
    def target(self) -> Target:
        return self._target

    @property
    def bird(self) -> Projectile:
        return self._bird

    @property
    def status(self) -> StatusMessage:
        return self._status

    def coefficients(self) -> Coefficients:
        """Read the live coefficients."""
        return self._read_coefficients()

    def set_status(self, status: StatusMessage) -> None:
        self._status = status

    def replace_target(self) -> Target:
        """Swap the current target for a freshly spawned one."""
        self._target = self.spawner.spawn_target()
        log.debug("New target at (%s, %s)", self._target.x, self._target.y)
        return self._target

    def record_hit(self) -> None:
        self.hits += 1

    def record_miss(self) -> None:
        self.misses += 1

    def refresh_text(self, coefficients: Optional[Coefficients] = None) -> None:
        """Recompute the equation and target labels."""
        if coefficients is None:
            coefficients = self.coefficients()
        self.equation_text = format_equation(coefficients)
        self.target_text = format_target(self._target)

    def reset_bird(self, c: float) -> None:
        """Put the bird back at rest on the y axis at height c."""
        self._bird = self._bird.moved_to(0, c)

    def draw_scene(self) -> None:
        """Redraw the static scene for the live coefficients, bird at rest."""
        coefficients = self.coefficients()
        self.renderer.draw_scene(self._target, coefficients)
        self.reset_bird(coefficients.c)
        self.refresh_text(coefficients)

    def draw_frame(self, position: MathPoint, canvas: CanvasPoint) -> None:
        """Draw one animation frame with the bird at position."""
        self.renderer.draw_frame(self._target, canvas)
        self._bird = self._bird.moved_to(position.x, position.y)
