"""
Pydantic data models for the parabola launch game.

Two coordinate systems are in play:
- Mathematical space: origin at a fixed canvas offset, y increases upward.
- Canvas space: pixels, origin at the top-left corner, y increases downward.

All models are immutable. Anything that changes over time (the target, the
bird) is replaced wholesale with a new instance.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MathPoint(BaseModel):
    """Immutable position in mathematical space (y up).

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Examples:
        >>> MathPoint(x=50.0, y=100.0)
        MathPoint(x=50.00, y=100.00)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def distance_to(self, other: 'MathPoint') -> float:
        """Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def __repr__(self) -> str:
        return f"MathPoint(x={self.x:.2f}, y={self.y:.2f})"


class CanvasPoint(BaseModel):
    """Immutable position in canvas pixel space (y down)."""
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def as_int_tuple(self) -> tuple:
        """Return (x, y) rounded to whole pixels for pygame draw calls."""
        return (int(round(self.x)), int(round(self.y)))

    def __repr__(self) -> str:
        return f"CanvasPoint(x={self.x:.2f}, y={self.y:.2f})"


class Resolution(BaseModel):
    """Drawing surface size in pixels."""
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"


class _Body(BaseModel):
    """A circle in mathematical space."""
    x: float
    y: float
    radius: float

    model_config = ConfigDict(frozen=True)

    @field_validator('radius')
    @classmethod
    def validate_positive_radius(cls, v: float) -> float:
        """Validate radius is positive."""
        if v <= 0:
            raise ValueError(f'Radius must be positive, got {v}')
        return v

    @property
    def center(self) -> MathPoint:
        return MathPoint(x=self.x, y=self.y)


class Target(_Body):
    """The goal circle (the "pig") in mathematical coordinates.

    Owned by the game session and replaced, never mutated, when it is hit
    or when the game is reset.
    """

    def __str__(self) -> str:
        return f"Target(x={self.x:g}, y={self.y:g}, r={self.radius:g})"


class Projectile(_Body):
    """The moving object (the "bird") in mathematical coordinates."""

    def moved_to(self, x: float, y: float) -> 'Projectile':
        """Return a copy of this projectile at a new position."""
        return Projectile(x=x, y=y, radius=self.radius)

    def collides_with(self, target: Target) -> bool:
        """Strict circle overlap test; touching circles do not collide.

        Args:
            target: Target to test against

        Returns:
            True if the distance between centres is less than the sum of radii
        """
        distance = self.center.distance_to(target.center)
        return distance < self.radius + target.radius


class Coefficients(BaseModel):
    """Parameters of y = a*x^2 + b*x + c.

    A launch keeps one frozen instance for the whole flight, so slider moves
    during an animation never change its path.

    Examples:
        >>> Coefficients(a=0.0, b=1.0, c=10.0).evaluate(5)
        15.0
    """
    a: float
    b: float
    c: float

    model_config = ConfigDict(frozen=True)

    def evaluate(self, x: float) -> float:
        """Height of the parabola at horizontal position x."""
        return (self.a * x * x) + (self.b * x) + self.c
