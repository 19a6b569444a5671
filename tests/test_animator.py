"""
Tests for the trajectory animation.

Tests cover:
- Flight stepping order, hit and miss detection
- FrameScheduler deferral and cancellation
- TrajectoryAnimator state machine, cancellation and reset
"""

import random

import pytest

from parabola.animator import (
    AnimatorState,
    Flight,
    FrameScheduler,
    Outcome,
    StepContinue,
    StepDone,
    TrajectoryAnimator,
)
from parabola.errors import FlightFinishedError
from parabola.models import Coefficients, Resolution, Target
from parabola.session import GameSession
from parabola.spawner import TargetSpawner
from parabola.text import STATUS_HIT, STATUS_IDLE, STATUS_LAUNCHING, STATUS_MISS

BOUNDS = Resolution(width=800, height=600)
FAR_TARGET = Target(x=600, y=400, radius=20)


def make_flight(mapper, a=0.0, b=0.0, c=50.0, target=FAR_TARGET):
    return Flight(Coefficients(a=a, b=b, c=c), lambda: target, mapper, BOUNDS)


def run_until_idle(animator, limit=1000):
    frames = 0
    while animator.is_running:
        animator.scheduler.run_frame()
        frames += 1
        assert frames < limit, "animation did not terminate"
    return frames


# ============================================================================
# Flight
# ============================================================================


class TestFlightStepping:
    """The resumable step function."""

    def test_flat_line_steps_by_four(self, mapper):
        flight = make_flight(mapper, a=0, b=0, c=50)

        results = [flight.step() for _ in range(5)]

        assert [r.position.x for r in results] == [0, 4, 8, 12, 16]
        assert all(r.position.y == 50 for r in results)
        assert all(isinstance(r, StepContinue) for r in results)

    def test_canvas_position_is_mapped(self, mapper):
        flight = make_flight(mapper, a=0, b=1, c=10)
        flight.step()
        result = flight.step()

        assert result.position.y == 14
        assert (result.canvas.x, result.canvas.y) == (54, 536)

    def test_uses_the_quadratic(self, mapper):
        flight = make_flight(mapper, a=0.005, b=-2, c=100)
        ys = [flight.step().position.y for _ in range(3)]
        assert ys == pytest.approx([100, 92.08, 84.32])

    def test_step_after_finish_raises(self, mapper):
        flight = make_flight(mapper, c=150, target=Target(x=0, y=150, radius=20))
        assert flight.step().kind == 'done'

        with pytest.raises(FlightFinishedError):
            flight.step()


class TestFlightHit:
    """Hit detection against target (500, 150), radius 20, bird radius 10."""

    def test_hit_on_first_step_within_reach(self, mapper):
        flight = make_flight(mapper, c=150, target=Target(x=500, y=150, radius=20))

        result = flight.step()
        while isinstance(result, StepContinue):
            result = flight.step()

        assert isinstance(result, StepDone)
        assert result.outcome == Outcome.HIT
        # 472 is the first multiple of 4 closer than 30 to x=500
        assert result.position.x == 472
        assert flight.outcome == Outcome.HIT

    def test_hit_does_not_advance(self, mapper):
        flight = make_flight(mapper, c=150, target=Target(x=0, y=150, radius=20))
        flight.step()
        assert flight.math_x == 0

    def test_tangent_contact_is_not_a_hit(self, mapper):
        # At x=0 the bird sits exactly 30 below the target centre
        flight = make_flight(mapper, c=120, target=Target(x=0, y=150, radius=20))
        result = flight.step()
        assert isinstance(result, StepContinue)

    def test_target_is_read_every_step(self, mapper):
        """A target replaced after launch is the one that gets tested."""
        current = {'target': FAR_TARGET}
        flight = Flight(Coefficients(a=0, b=0, c=50), lambda: current['target'], mapper, BOUNDS)

        assert flight.step().kind == 'continue'
        current['target'] = Target(x=4, y=50, radius=20)

        result = flight.step()
        assert result.kind == 'done'
        assert result.outcome == Outcome.HIT


class TestFlightMiss:
    """Leaving the canvas through the right or bottom edge."""

    def test_exit_right(self, mapper):
        flight = make_flight(mapper, a=0, b=0, c=50)

        result = flight.step()
        while isinstance(result, StepContinue):
            result = flight.step()

        assert result.outcome == Outcome.MISS
        # canvas x = 50 + 752 = 802 is the first drawn position past 800
        assert result.position.x == 752
        assert result.canvas.x == 802
        assert flight.steps == 189

    def test_exit_bottom(self, mapper):
        flight = make_flight(mapper, a=-0.01, b=0, c=100)

        result = flight.step()
        while isinstance(result, StepContinue):
            result = flight.step()

        assert result.outcome == Outcome.MISS
        assert result.canvas.y > 600
        assert result.position.x == 124

    def test_leaving_through_the_top_keeps_flying(self, mapper):
        flight = make_flight(mapper, a=0, b=3, c=0)
        for _ in range(60):
            result = flight.step()
        assert result.canvas.y < 0
        assert isinstance(result, StepContinue)


# ============================================================================
# FrameScheduler
# ============================================================================


class TestFrameScheduler:
    """requestAnimationFrame-style scheduling."""

    def test_callback_runs_on_next_frame(self):
        scheduler = FrameScheduler()
        calls = []
        scheduler.request(lambda: calls.append(1))

        assert calls == []
        assert scheduler.run_frame() == 1
        assert calls == [1]
        assert scheduler.pending == 0

    def test_request_during_frame_waits_for_next_frame(self):
        scheduler = FrameScheduler()
        calls = []

        def tick():
            calls.append(scheduler.frame_count)
            scheduler.request(tick)

        scheduler.request(tick)
        scheduler.run_frame()
        scheduler.run_frame()

        assert calls == [1, 2]

    def test_cancelled_callback_never_runs(self):
        scheduler = FrameScheduler()
        calls = []
        handle = scheduler.request(lambda: calls.append(1))

        assert scheduler.cancel(handle) is True
        assert scheduler.cancel(handle) is False
        scheduler.run_frame()
        assert calls == []

    def test_cancel_from_an_earlier_callback_in_the_same_frame(self):
        scheduler = FrameScheduler()
        calls = []
        handles = {}
        scheduler.request(lambda: scheduler.cancel(handles['second']))
        handles['second'] = scheduler.request(lambda: calls.append('second'))

        scheduler.run_frame()

        assert calls == []


# ============================================================================
# TrajectoryAnimator
# ============================================================================


@pytest.fixture
def animator(session):
    return TrajectoryAnimator(session, FrameScheduler())


@pytest.fixture
def outcomes(animator):
    seen = []
    animator.on_finish(seen.append)
    return seen


class TestAnimatorLaunch:
    """Idle -> Running and the steps that follow."""

    def test_starts_idle(self, animator):
        assert animator.state == AnimatorState.IDLE
        assert animator.flight is None

    def test_launch_schedules_first_step(self, animator, session):
        animator.launch()

        assert animator.state == AnimatorState.RUNNING
        assert session.status == STATUS_LAUNCHING
        assert animator.scheduler.pending == 1
        assert animator.flight.steps == 0

    def test_one_step_per_frame(self, animator, session, coefficient_box):
        coefficient_box.set(0, 0, 50)
        flight = animator.launch()

        for expected_x in (0, 4, 8, 12):
            animator.scheduler.run_frame()
            assert session.bird.x == expected_x
            assert session.bird.y == 50
        assert flight.steps == 4

    def test_snapshot_ignores_later_coefficient_changes(self, animator, session, coefficient_box):
        coefficient_box.set(0, 0, 50)
        animator.launch()
        animator.scheduler.run_frame()

        coefficient_box.set(0.01, 2, 300)
        animator.scheduler.run_frame()

        assert session.bird.y == 50
        assert animator.flight.coefficients == Coefficients(a=0, b=0, c=50)


class TestAnimatorOutcomes:
    """Hit and miss end the animation exactly once."""

    def test_hit(self, animator, session, coefficient_box, outcomes):
        coefficient_box.set(0, 0, 150)
        old_target = session.target

        animator.launch()
        run_until_idle(animator)

        assert animator.state == AnimatorState.IDLE
        assert session.status == STATUS_HIT
        assert outcomes == [Outcome.HIT]
        assert session.target is not old_target
        assert 200 <= session.target.x <= 699
        assert 50 <= session.target.y <= 399
        # Static scene redrawn: bird back at rest
        assert (session.bird.x, session.bird.y) == (0, 150)

    def test_hit_uses_the_spawner(self, renderer, coefficient_box):
        session = GameSession(renderer, coefficient_box,
                              spawner=TargetSpawner(random.Random(5)),
                              target=Target(x=500, y=150, radius=20))
        expected = TargetSpawner(random.Random(5)).spawn_target()
        coefficient_box.set(0, 0, 150)
        animator = TrajectoryAnimator(session)

        animator.launch()
        run_until_idle(animator)

        assert session.target == expected

    def test_miss_off_the_bottom(self, animator, session, coefficient_box, outcomes):
        coefficient_box.set(-0.01, 0, 100)
        old_target = session.target

        animator.launch()
        frames = run_until_idle(animator)

        assert frames == 32  # x = 0, 4, ..., 124
        assert session.status == STATUS_MISS
        assert outcomes == [Outcome.MISS]
        assert session.target is old_target
        assert (session.bird.x, session.bird.y) == (0, 100)

    def test_nothing_scheduled_after_miss(self, animator, coefficient_box, outcomes):
        coefficient_box.set(-0.01, 0, 100)
        animator.launch()
        run_until_idle(animator)

        assert animator.scheduler.pending == 0
        assert animator.scheduler.run_frame() == 0
        assert outcomes == [Outcome.MISS]

    def test_flat_trajectory_ends_at_right_edge(self, animator, coefficient_box, outcomes):
        coefficient_box.set(0, 0, 50)
        animator.launch()
        run_until_idle(animator)

        assert outcomes == [Outcome.MISS]
        assert animator.flight.steps == 189


class TestAnimatorCancellation:
    """At most one flight advances at a time."""

    def test_double_launch_runs_only_the_second(self, animator, coefficient_box, outcomes):
        coefficient_box.set(0, 0, 50)
        first = animator.launch()
        second = animator.launch()

        assert animator.scheduler.pending == 1
        for _ in range(5):
            animator.scheduler.run_frame()
            assert animator.scheduler.pending <= 1

        assert first.steps == 0
        assert second.steps == 5
        assert outcomes == [Outcome.CANCELLED]

    def test_relaunch_mid_flight_does_not_interleave(self, animator, session, coefficient_box):
        coefficient_box.set(0, 0, 50)
        first = animator.launch()
        for _ in range(3):
            animator.scheduler.run_frame()

        animator.launch()
        xs = []
        for _ in range(4):
            animator.scheduler.run_frame()
            xs.append(session.bird.x)

        assert first.steps == 3
        assert xs == [0, 4, 8, 12]

    def test_relaunch_puts_the_bird_back_at_rest(self, animator, session, coefficient_box):
        coefficient_box.set(0, 0, 50)
        animator.launch()
        for _ in range(3):
            animator.scheduler.run_frame()
        assert session.bird.x == 8

        coefficient_box.set(0, 0, 120)
        flight = animator.launch()

        assert flight.steps == 0
        assert (session.bird.x, session.bird.y) == (0, 120)

    def test_cancel_when_idle_is_a_no_op(self, animator, outcomes):
        assert animator.cancel() is None
        assert outcomes == []

    def test_cancel_stops_stepping(self, animator, outcomes):
        flight = animator.launch()
        animator.scheduler.run_frame()

        assert animator.cancel() == Outcome.CANCELLED
        animator.scheduler.run_frame()

        assert flight.steps == 1
        assert animator.state == AnimatorState.IDLE
        assert outcomes == [Outcome.CANCELLED]


class TestAnimatorReset:
    def test_reset_mid_flight(self, animator, session, coefficient_box, outcomes):
        coefficient_box.set(0, 0, 50)
        old_target = session.target
        flight = animator.launch()
        animator.scheduler.run_frame()

        animator.reset()

        assert animator.state == AnimatorState.IDLE
        assert session.status == STATUS_IDLE
        assert session.target is not old_target
        assert (session.bird.x, session.bird.y) == (0, 50)
        assert animator.scheduler.run_frame() == 0
        assert flight.steps == 1
        assert outcomes == [Outcome.CANCELLED]

    def test_reset_when_idle(self, animator, session, outcomes):
        old_target = session.target
        animator.reset()

        assert session.target is not old_target
        assert session.status == STATUS_IDLE
        assert outcomes == []
