"""
Text shown next to the canvas.

Pure functions of (coefficients, target, status); the UI decides how and
where to display them.
"""
from enum import Enum

from pydantic import BaseModel, ConfigDict

from parabola.models import Coefficients, MathPoint, Target


class Tone(str, Enum):
    """How a status message should be styled."""
    NEUTRAL = "neutral"
    SUCCESS = "success"
    FAILURE = "failure"


class StatusMessage(BaseModel):
    """A status line and its tone."""
    text: str
    tone: Tone = Tone.NEUTRAL

    model_config = ConfigDict(frozen=True)


STATUS_IDLE = StatusMessage(text="")
STATUS_LAUNCHING = StatusMessage(text="Lançando...")
STATUS_HIT = StatusMessage(text="ACERTOU! Parabéns!", tone=Tone.SUCCESS)
STATUS_MISS = StatusMessage(text="Errou! Tente de novo.", tone=Tone.FAILURE)


def _sign(value: float) -> str:
    return "+" if value >= 0 else "-"


def _number(value: float) -> str:
    """Whole numbers without decimals, anything else as-is."""
    return str(int(value)) if float(value).is_integer() else str(value)


def format_equation(coefficients: Coefficients) -> str:
    """
    Render the quadratic with explicit signs.

    Args:
        coefficients: Current slider values

    Returns:
        e.g. "y = 0.005x² - 2.0x + 100.0" for a=0.005, b=-2, c=100
    """
    a, b, c = coefficients.a, coefficients.b, coefficients.c
    return (f"y = {a:.3f}x² {_sign(b)} {abs(b):.1f}x "
            f"{_sign(c)} {abs(c):.1f}")


def format_target(target: Target) -> str:
    """Target coordinates label, e.g. "Alvo: (500, 150)"."""
    return f"Alvo: ({_number(target.x)}, {_number(target.y)})"


def format_pointer(point: MathPoint) -> str:
    """Mouse position readout in whole units, e.g. "(120, 85)"."""
    return f"({point.x:.0f}, {point.y:.0f})"


def format_slider_value(name: str, value: float) -> str:
    """Label next to a slider: a with 3 decimals, b with 1, c whole."""
    if name == 'a':
        return f"{value:.3f}"
    if name == 'b':
        return f"{value:.1f}"
    return f"{value:.0f}"
