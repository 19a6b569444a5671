"""Tests for the text outputs shown beside the canvas."""

import pytest

from parabola.models import Coefficients, MathPoint, Target
from parabola.text import (
    STATUS_HIT,
    STATUS_IDLE,
    STATUS_LAUNCHING,
    STATUS_MISS,
    Tone,
    format_equation,
    format_pointer,
    format_slider_value,
    format_target,
)


class TestFormatEquation:
    """Equation string with explicit signs."""

    def test_reference_example(self):
        coefficients = Coefficients(a=0.005, b=-2, c=100)
        assert format_equation(coefficients) == "y = 0.005x² - 2.0x + 100.0"

    def test_all_positive(self):
        coefficients = Coefficients(a=0.001, b=1.5, c=20)
        assert format_equation(coefficients) == "y = 0.001x² + 1.5x + 20.0"

    def test_negative_a_keeps_its_sign(self):
        coefficients = Coefficients(a=-0.002, b=1, c=-30)
        assert format_equation(coefficients) == "y = -0.002x² + 1.0x - 30.0"

    def test_zero_is_positive(self):
        coefficients = Coefficients(a=0, b=0, c=0)
        assert format_equation(coefficients) == "y = 0.000x² + 0.0x + 0.0"


class TestFormatTarget:
    def test_whole_numbers(self):
        assert format_target(Target(x=500, y=150, radius=20)) == "Alvo: (500, 150)"

    def test_fractional_values(self):
        assert format_target(Target(x=500.5, y=150, radius=20)) == "Alvo: (500.5, 150)"


class TestFormatPointer:
    def test_rounds_to_whole_units(self):
        assert format_pointer(MathPoint(x=100.4, y=-20.6)) == "(100, -21)"


class TestFormatSliderValue:
    @pytest.mark.parametrize("name, value, expected", [
        ('a', -0.002, "-0.002"),
        ('b', 1.0, "1.0"),
        ('b', -2.25, "-2.2"),
        ('c', 50.0, "50"),
    ])
    def test_precision_per_slider(self, name, value, expected):
        assert format_slider_value(name, value) == expected


class TestStatusMessages:
    def test_idle_is_empty(self):
        assert STATUS_IDLE.text == ""

    def test_tones(self):
        assert STATUS_LAUNCHING.tone == Tone.NEUTRAL
        assert STATUS_HIT.tone == Tone.SUCCESS
        assert STATUS_MISS.tone == Tone.FAILURE

    def test_messages_are_distinct(self):
        texts = {STATUS_IDLE.text, STATUS_LAUNCHING.text, STATUS_HIT.text, STATUS_MISS.text}
        assert len(texts) == 4
