"""
Mapping between mathematical space and canvas space.

The canvas y axis points down, so mathematical "up" is a decreasing canvas
y. Everything that draws or hit-tests goes through CoordinateMapper.
"""

from parabola.models import CanvasPoint, MathPoint


class CoordinateMapper:
    """Converts points between mathematical and canvas coordinates.

    Attributes:
        origin: Canvas position of mathematical (0, 0). Fixed for the
            lifetime of the mapper.

    Examples:
        >>> mapper = CoordinateMapper(CanvasPoint(x=50, y=550))
        >>> mapper.to_canvas(100, 200)
        CanvasPoint(x=150.00, y=350.00)
    """

    def __init__(self, origin: CanvasPoint):
        self._origin = origin

    @property
    def origin(self) -> CanvasPoint:
        return self._origin

    def to_canvas(self, math_x: float, math_y: float) -> CanvasPoint:
        """Map a mathematical position to canvas pixels."""
        return CanvasPoint(x=self._origin.x + math_x, y=self._origin.y - math_y)

    def to_math(self, canvas_x: float, canvas_y: float) -> MathPoint:
        """Map canvas pixels back to a mathematical position."""
        return MathPoint(x=canvas_x - self._origin.x, y=self._origin.y - canvas_y)

    def __repr__(self) -> str:
        return f"CoordinateMapper(origin=({self._origin.x:g}, {self._origin.y:g}))"
