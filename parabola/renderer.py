"""
Scene rendering.

Draws the axes, the target, the bird and the dashed parabola preview onto a
pygame surface of fixed size. The renderer keeps no game state: whatever it
draws is passed in on each call.
"""

import math
from typing import List, Optional, Sequence, Tuple

import pygame

from parabola import config
from parabola.coordinates import CoordinateMapper
from parabola.models import CanvasPoint, Coefficients, Resolution, Target


def draw_dashed_polyline(
    surface: pygame.Surface,
    color: Tuple[int, int, int],
    points: Sequence[CanvasPoint],
    dash: float = 5,
    gap: float = 5,
    width: int = 2,
) -> None:
    """
    Draw a dashed line through a sequence of points.

    The dash pattern carries over from one segment to the next, so a curve
    made of many short segments still reads as evenly dashed.

    Args:
        surface: Surface to draw on
        color: Line color
        points: Vertices of the polyline, in canvas pixels
        dash: Length of each drawn piece
        gap: Length of each gap
        width: Line width
    """
    drawing = True
    remaining = dash

    for start, end in zip(points, points[1:]):
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        travelled = 0.0

        while travelled < length:
            piece = min(remaining, length - travelled)
            if drawing:
                t0 = travelled / length
                t1 = (travelled + piece) / length
                pygame.draw.line(
                    surface, color,
                    (start.x + dx * t0, start.y + dy * t0),
                    (start.x + dx * t1, start.y + dy * t1),
                    width,
                )
            travelled += piece
            remaining -= piece
            if remaining <= 0:
                drawing = not drawing
                remaining = dash if drawing else gap


class SceneRenderer:
    """Draws one frame of the game onto a fixed-size surface.

    Attributes:
        surface: The canvas being drawn on
        mapper: Mathematical <-> canvas conversion
        bird_radius: Radius of the bird in pixels
    """

    def __init__(
        self,
        surface: pygame.Surface,
        mapper: CoordinateMapper,
        bird_radius: float = config.BIRD_RADIUS,
        tick_spacing: int = config.TICK_SPACING,
    ):
        self.surface = surface
        self.mapper = mapper
        self.bird_radius = bird_radius
        self.tick_spacing = tick_spacing
        self._font: Optional[pygame.font.Font] = None

    @property
    def resolution(self) -> Resolution:
        width, height = self.surface.get_size()
        return Resolution(width=width, height=height)

    def _get_font(self) -> pygame.font.Font:
        """Get or create the tick label font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 16)
        return self._font

    def clear(self) -> None:
        self.surface.fill(config.BACKGROUND_COLOR)

    def draw_axes(self) -> List[Tuple[str, CanvasPoint]]:
        """
        Draw both axes with a tick and a label every tick_spacing pixels.

        Labels show the mathematical value at the tick; zero is not labelled.

        Returns:
            (label, canvas position of the tick) for every tick drawn
        """
        width, height = self.surface.get_size()
        origin = self.mapper.origin
        font = self._get_font()
        ticks: List[Tuple[str, CanvasPoint]] = []

        # Y axis
        pygame.draw.line(self.surface, config.AXIS_COLOR, (origin.x, 0), (origin.x, height), 1)
        # X axis
        pygame.draw.line(self.surface, config.AXIS_COLOR, (0, origin.y), (width, origin.y), 1)

        for x in range(self.tick_spacing, int(width - origin.x) + 1, self.tick_spacing):
            pos = self.mapper.to_canvas(x, 0)
            label = str(x)
            text = font.render(label, True, config.LABEL_COLOR)
            self.surface.blit(text, (pos.x - 8, origin.y + 7))
            pygame.draw.line(self.surface, config.AXIS_COLOR,
                             (pos.x, origin.y - 5), (pos.x, origin.y + 5), 1)
            ticks.append((label, pos))

        for y in range(self.tick_spacing, int(origin.y) + 1, self.tick_spacing):
            pos = self.mapper.to_canvas(0, y)
            label = str(y)
            text = font.render(label, True, config.LABEL_COLOR)
            self.surface.blit(text, (origin.x - 25, pos.y - text.get_height() // 2))
            pygame.draw.line(self.surface, config.AXIS_COLOR,
                             (origin.x - 5, pos.y), (origin.x + 5, pos.y), 1)
            ticks.append((label, pos))

        return ticks

    def draw_target(self, target: Target) -> None:
        """Draw the target as a filled circle with two small eyes."""
        center = self.mapper.to_canvas(target.x, target.y)
        cx, cy = center.as_int_tuple()

        pygame.draw.circle(self.surface, config.TARGET_COLOR, (cx, cy), int(target.radius))

        pygame.draw.circle(self.surface, config.TARGET_EYE_COLOR, (cx - 5, cy - 5), 3)
        pygame.draw.circle(self.surface, config.TARGET_EYE_COLOR, (cx + 5, cy - 5), 3)

    def draw_projectile(self, canvas_x: float, canvas_y: float) -> None:
        """Draw the bird at a canvas position."""
        center = (int(round(canvas_x)), int(round(canvas_y)))
        pygame.draw.circle(self.surface, config.BIRD_COLOR, center, int(self.bird_radius))

    def draw_parabola_preview(self, coefficients: Coefficients) -> List[CanvasPoint]:
        """
        Draw the dashed preview of y = a*x^2 + b*x + c.

        The curve is sampled at every integer x from 0 and stops at the first
        point past the right or bottom edge, or above the top edge.

        Args:
            coefficients: Live slider values

        Returns:
            Canvas points the dashed line was drawn through
        """
        width, height = self.surface.get_size()
        points = [self.mapper.to_canvas(0, coefficients.c)]

        for mx in range(1, width):
            pos = self.mapper.to_canvas(mx, coefficients.evaluate(mx))
            if pos.x > width or pos.y > height or pos.y < 0:
                break
            points.append(pos)

        draw_dashed_polyline(self.surface, config.PREVIEW_COLOR, points)
        return points

    def draw_frame(self, target: Target, bird_position: CanvasPoint) -> None:
        """One animation frame: axes, target and the bird in flight."""
        self.clear()
        self.draw_axes()
        self.draw_target(target)
        self.draw_projectile(bird_position.x, bird_position.y)

    def draw_scene(self, target: Target, coefficients: Coefficients) -> None:
        """Static scene: axes, target, preview and the bird at rest on x=0."""
        self.clear()
        self.draw_axes()
        self.draw_target(target)
        self.draw_parabola_preview(coefficients)

        rest = self.mapper.to_canvas(0, coefficients.c)
        self.draw_projectile(rest.x, rest.y)
