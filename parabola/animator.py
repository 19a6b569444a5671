"""
Trajectory animation.

A launch freezes the current coefficients and moves the bird along the
parabola one fixed horizontal step per rendered frame, checking for a hit
on every step. The pieces are:

- Flight: the resumable step function. Each call to step() advances the
  bird once and returns either StepContinue or StepDone(outcome).
- FrameScheduler: runs callbacks once per frame, like a browser's
  requestAnimationFrame. Handles can be cancelled before they run.
- TrajectoryAnimator: ties a Flight to the scheduler and the game session,
  and guarantees that at most one flight is ever advancing.

Examples:
    >>> scheduler = FrameScheduler()
    >>> animator = TrajectoryAnimator(session, scheduler)
    >>> animator.launch()
    >>> while animator.is_running:
    ...     scheduler.run_frame()
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Callable, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from parabola import config
from parabola.coordinates import CoordinateMapper
from parabola.errors import FlightFinishedError
from parabola.logging import get_logger
from parabola.models import CanvasPoint, Coefficients, MathPoint, Projectile, Resolution, Target
from parabola.text import STATUS_HIT, STATUS_IDLE, STATUS_LAUNCHING, STATUS_MISS

if TYPE_CHECKING:
    from parabola.session import GameSession

log = get_logger('animator')


class AnimatorState(Enum):
    """Whether a flight is currently advancing."""
    IDLE = "idle"
    RUNNING = "running"


class Outcome(str, Enum):
    """How a flight ended."""
    HIT = "hit"
    MISS = "miss"
    CANCELLED = "cancelled"


class StepContinue(BaseModel):
    """The bird moved and the flight goes on."""
    kind: Literal['continue'] = 'continue'
    position: MathPoint
    canvas: CanvasPoint

    model_config = ConfigDict(frozen=True)


class StepDone(BaseModel):
    """The flight ended on this step."""
    kind: Literal['done'] = 'done'
    outcome: Outcome
    position: MathPoint
    canvas: CanvasPoint

    model_config = ConfigDict(frozen=True)


StepResult = Annotated[Union[StepContinue, StepDone], Field(discriminator='kind')]


class Flight:
    """One launch of the bird along a frozen parabola.

    The target is read through target_provider on every step, so a target
    replaced after launch is the one that gets hit-tested.

    Attributes:
        coefficients: Snapshot taken at launch
        math_x: Horizontal position of the next step
        steps: Number of steps taken so far
        outcome: HIT or MISS once finished, None while in flight
    """

    def __init__(
        self,
        coefficients: Coefficients,
        target_provider: Callable[[], Target],
        mapper: CoordinateMapper,
        bounds: Resolution,
        bird_radius: float = config.BIRD_RADIUS,
    ):
        self.coefficients = coefficients
        self._target_provider = target_provider
        self._mapper = mapper
        self._bounds = bounds
        self._bird_radius = bird_radius

        self.math_x: float = 0.0
        self.steps = 0
        self.outcome: Optional[Outcome] = None

    @property
    def finished(self) -> bool:
        return self.outcome is not None

    def step(self) -> StepResult:
        """
        Advance the bird by one step.

        Returns:
            StepDone with HIT when the bird overlaps the target, StepDone
            with MISS when the drawn position left the canvas through the
            right or bottom edge, StepContinue otherwise

        Raises:
            FlightFinishedError: If the flight already has an outcome
        """
        if self.finished:
            raise FlightFinishedError(f"Flight already ended with {self.outcome.value}")

        math_x = self.math_x
        math_y = self.coefficients.evaluate(math_x)
        position = MathPoint(x=math_x, y=math_y)
        canvas = self._mapper.to_canvas(math_x, math_y)
        self.steps += 1

        bird = Projectile(x=math_x, y=math_y, radius=self._bird_radius)
        if bird.collides_with(self._target_provider()):
            return self._finish(Outcome.HIT, position, canvas)

        self.math_x += config.STEP_SIZE

        # Bounds are checked on the position just drawn, not the advanced one
        if canvas.x > self._bounds.width or canvas.y > self._bounds.height:
            return self._finish(Outcome.MISS, position, canvas)

        return StepContinue(position=position, canvas=canvas)

    def _finish(self, outcome: Outcome, position: MathPoint, canvas: CanvasPoint) -> StepDone:
        self.outcome = outcome
        return StepDone(outcome=outcome, position=position, canvas=canvas)


@dataclass(frozen=True)
class AnimationHandle:
    """Opaque reference to a scheduled frame callback."""
    id: int


class FrameScheduler:
    """Runs callbacks on the next frame.

    Callbacks requested while a frame is running are deferred to the
    following frame. A cancelled callback never runs, even if it was
    cancelled by another callback of the same frame.
    """

    def __init__(self):
        self._next_id = 1
        self._pending: Dict[int, Callable[[], None]] = {}
        self.frame_count = 0

    @property
    def pending(self) -> int:
        """Number of callbacks waiting for the next frame."""
        return len(self._pending)

    def request(self, callback: Callable[[], None]) -> AnimationHandle:
        handle = AnimationHandle(self._next_id)
        self._next_id += 1
        self._pending[handle.id] = callback
        return handle

    def cancel(self, handle: AnimationHandle) -> bool:
        """Cancel a scheduled callback. Returns False if it already ran or was cancelled."""
        return self._pending.pop(handle.id, None) is not None

    def run_frame(self) -> int:
        """
        Run every callback that was pending when the frame started.

        Returns:
            Number of callbacks that ran
        """
        self.frame_count += 1
        ran = 0
        for handle_id in list(self._pending):
            callback = self._pending.pop(handle_id, None)
            if callback is None:
                continue
            callback()
            ran += 1
        return ran


class TrajectoryAnimator:
    """Drives flights for one game session.

    State is RUNNING while a step is scheduled and IDLE otherwise. Every
    launch and reset cancels the scheduled step before doing anything else,
    so a stale step from a superseded launch can never run.
    """

    def __init__(
        self,
        session: 'GameSession',
        scheduler: Optional[FrameScheduler] = None,
    ):
        self.session = session
        self.scheduler = scheduler if scheduler is not None else FrameScheduler()

        self._handle: Optional[AnimationHandle] = None
        self._flight: Optional[Flight] = None
        self._listeners: List[Callable[[Outcome], None]] = []

    @property
    def state(self) -> AnimatorState:
        return AnimatorState.RUNNING if self._handle is not None else AnimatorState.IDLE

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    @property
    def flight(self) -> Optional[Flight]:
        """The current or most recent flight."""
        return self._flight

    def on_finish(self, callback: Callable[[Outcome], None]) -> None:
        """Register a callback that receives every terminal outcome."""
        self._listeners.append(callback)

    def launch(self) -> Flight:
        """
        Start a new flight with the coefficients as they are right now.

        Any flight already in progress is cancelled first.

        Returns:
            The new flight
        """
        self.cancel()

        coefficients = self.session.coefficients()
        self.session.reset_bird(coefficients.c)
        self._flight = Flight(
            coefficients,
            lambda: self.session.target,
            self.session.mapper,
            self.session.resolution,
            bird_radius=self.session.bird.radius,
        )
        self.session.set_status(STATUS_LAUNCHING)
        log.info("Launch with a=%s b=%s c=%s", coefficients.a, coefficients.b, coefficients.c)

        self._handle = self.scheduler.request(self._run_step)
        return self._flight

    def cancel(self) -> Optional[Outcome]:
        """
        Stop the running flight, if any. Always succeeds.

        Returns:
            Outcome.CANCELLED if a flight was stopped, None if idle
        """
        if self._handle is None:
            return None

        self.scheduler.cancel(self._handle)
        self._handle = None
        log.info("Flight cancelled after %d steps", self._flight.steps)
        self._notify(Outcome.CANCELLED)
        return Outcome.CANCELLED

    def reset(self) -> None:
        """Cancel any flight, clear the status, place a new target and redraw."""
        self.cancel()
        self.session.set_status(STATUS_IDLE)
        self.session.replace_target()
        self.session.draw_scene()

    def _run_step(self) -> None:
        self._handle = None
        result = self._flight.step()
        log.trace("Step %d at x=%s y=%s", self._flight.steps, result.position.x, result.position.y)

        self.session.draw_frame(result.position, result.canvas)

        if isinstance(result, StepContinue):
            self._handle = self.scheduler.request(self._run_step)
            return

        self._finish(result.outcome)

    def _finish(self, outcome: Outcome) -> None:
        if outcome == Outcome.HIT:
            self.session.set_status(STATUS_HIT)
            self.session.replace_target()
        else:
            self.session.set_status(STATUS_MISS)
        self.session.draw_scene()

        log.info("Flight ended: %s after %d steps", outcome.value, self._flight.steps)
        self._notify(outcome)

    def _notify(self, outcome: Outcome) -> None:
        for callback in self._listeners:
            callback(outcome)
