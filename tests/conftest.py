"""Shared pytest fixtures."""
import os
import random

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from parabola.coordinates import CoordinateMapper
from parabola.logging import configure_logging, disable_logging
from parabola.models import CanvasPoint, Coefficients, Target
from parabola.renderer import SceneRenderer
from parabola.session import GameSession
from parabola.spawner import TargetSpawner

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
ORIGIN = CanvasPoint(x=50, y=550)

disable_logging()


class CoefficientBox:
    """Stand-in for the sliders: a mutable coefficient source."""

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 50.0):
        self.value = Coefficients(a=a, b=b, c=c)

    def set(self, a: float, b: float, c: float) -> None:
        self.value = Coefficients(a=a, b=b, c=c)

    def __call__(self) -> Coefficients:
        return self.value


@pytest.fixture
def pygame_init():
    """Initialize pygame for rendering tests."""
    pygame.init()
    screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT + 170))
    yield screen
    pygame.quit()


@pytest.fixture
def logging_enabled():
    """Turn logging on at INFO for one test."""
    configure_logging(level='INFO')
    yield
    disable_logging()


@pytest.fixture
def mapper():
    return CoordinateMapper(ORIGIN)


@pytest.fixture
def canvas():
    return pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))


@pytest.fixture
def renderer(canvas, mapper):
    return SceneRenderer(canvas, mapper)


@pytest.fixture
def coefficient_box():
    return CoefficientBox()


@pytest.fixture
def spawner():
    return TargetSpawner(random.Random(1234))


@pytest.fixture
def session(renderer, coefficient_box, spawner):
    """Session with the reference target at (500, 150)."""
    return GameSession(
        renderer,
        coefficient_box,
        spawner=spawner,
        target=Target(x=500, y=150, radius=20),
    )
