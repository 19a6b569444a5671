"""
Control panel widgets.

Sliders for the three coefficients and the launch / reset buttons, drawn
with plain pygame primitives.
"""
from typing import Optional

import pygame

from parabola import config


class Slider:
    """A horizontal slider snapped to a fixed step.

    Attributes:
        name: Coefficient name ('a', 'b' or 'c')
        rect: Track area in screen pixels
        lo: Minimum value
        hi: Maximum value
        step: Snap increment
    """

    def __init__(self, name: str, rect: pygame.Rect, lo: float, hi: float,
                 step: float, value: float):
        if hi <= lo:
            raise ValueError(f"Slider {name}: max {hi} must be above min {lo}")
        if step <= 0:
            raise ValueError(f"Slider {name}: step must be positive, got {step}")
        self.name = name
        self.rect = rect
        self.lo = lo
        self.hi = hi
        self.step = step
        self.dragging = False
        self._value = self._snap(value)

    @property
    def value(self) -> float:
        return self._value

    @property
    def fraction(self) -> float:
        """Position of the knob along the track, 0.0 to 1.0."""
        return (self._value - self.lo) / (self.hi - self.lo)

    def _snap(self, value: float) -> float:
        value = max(self.lo, min(self.hi, value))
        snapped = self.lo + round((value - self.lo) / self.step) * self.step
        # drop float noise left by the step arithmetic
        return round(max(self.lo, min(self.hi, snapped)), 9)

    def set_value(self, value: float) -> bool:
        """Set the value (snapped and clamped). Returns True if it changed."""
        new_value = self._snap(value)
        if new_value == self._value:
            return False
        self._value = new_value
        return True

    def _set_from_x(self, mouse_x: int) -> bool:
        frac = max(0.0, min(1.0, (mouse_x - self.rect.x) / self.rect.w))
        return self.set_value(self.lo + frac * (self.hi - self.lo))

    def nudge(self, steps: int) -> bool:
        """Move by a number of steps (negative moves left)."""
        return self.set_value(self._value + steps * self.step)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Process a pygame mouse event.

        Args:
            event: Any pygame event; non-mouse events are ignored

        Returns:
            True if the slider value changed
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, 12).collidepoint(event.pos):
                self.dragging = True
                return self._set_from_x(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            return self._set_from_x(event.pos[0])
        return False

    def render(self, surface: pygame.Surface, font: pygame.font.Font,
               label: Optional[str] = None) -> None:
        """Draw track, fill, knob and the label above the track."""
        text = font.render(label or self.name, True, config.TEXT_COLOR)
        surface.blit(text, (self.rect.x, self.rect.y - text.get_height() - 4))

        pygame.draw.rect(surface, config.SLIDER_BG, self.rect, border_radius=4)
        fill = pygame.Rect(self.rect.x, self.rect.y, int(self.fraction * self.rect.w), self.rect.h)
        pygame.draw.rect(surface, config.SLIDER_FILL, fill, border_radius=4)

        knob = (self.rect.x + int(self.fraction * self.rect.w), self.rect.centery)
        pygame.draw.circle(surface, config.KNOB_COLOR, knob, 9)
        pygame.draw.circle(surface, config.SLIDER_FILL, knob, 9, 2)


class Button:
    """A clickable rectangle with a caption."""

    def __init__(self, text: str, rect: pygame.Rect):
        self.text = text
        self.rect = rect

    def handle_event(self, event: pygame.event.Event) -> bool:
        """True on a left click inside the button."""
        return (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                and self.rect.collidepoint(event.pos))

    def render(self, surface: pygame.Surface, font: pygame.font.Font,
               hovered: bool = False) -> None:
        color = config.BUTTON_HOVER_COLOR if hovered else config.BUTTON_COLOR
        pygame.draw.rect(surface, color, self.rect, border_radius=6)
        caption = font.render(self.text, True, config.BUTTON_TEXT_COLOR)
        surface.blit(caption, caption.get_rect(center=self.rect.center))
