"""
Parabola Launch.

An interactive quadratic-trajectory game: tune y = ax² + bx + c with
sliders, preview the curve, and launch a bird along it at a target.

Provides:
- models: Pydantic value types (points, target, bird, coefficients)
- coordinates: Mathematical <-> canvas mapping
- renderer: pygame scene drawing
- spawner: Random target placement
- animator: Frame-stepped flights with hit detection
- session: Per-game state and text outputs
- game_mode / main: pygame UI and entry point
"""

from parabola.models import (
    CanvasPoint,
    Coefficients,
    MathPoint,
    Projectile,
    Resolution,
    Target,
)
from parabola.coordinates import CoordinateMapper
from parabola.spawner import TargetSpawner
from parabola.animator import (
    AnimatorState,
    FrameScheduler,
    Flight,
    Outcome,
    StepContinue,
    StepDone,
    TrajectoryAnimator,
)
from parabola.text import format_equation, format_target

__version__ = "1.0.0"

__all__ = [
    'CanvasPoint',
    'Coefficients',
    'MathPoint',
    'Projectile',
    'Resolution',
    'Target',
    'CoordinateMapper',
    'TargetSpawner',
    'AnimatorState',
    'FrameScheduler',
    'Flight',
    'Outcome',
    'StepContinue',
    'StepDone',
    'TrajectoryAnimator',
    'format_equation',
    'format_target',
]
