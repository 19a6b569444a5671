"""
Parabola Launch - Configuration loader.

Loads settings from .env files in the package directory with sensible
defaults. Create a .env.local file to override settings without modifying
.env. Real environment variables always win.
"""
import os
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

from parabola.errors import ConfigError

PACKAGE_DIR = Path(__file__).parent

# .env.local first so its values are set before the defaults in .env
load_dotenv(PACKAGE_DIR / '.env.local')
load_dotenv(PACKAGE_DIR / '.env')


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(key, raw, 'integer') from None


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    raw = os.getenv(key, str(default))
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(key, raw, 'number') from None


# Canvas (the drawing surface the game maps into)
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
PANEL_HEIGHT = _get_int('PANEL_HEIGHT', 170)  # control panel below the canvas
FPS = _get_int('FPS', 60)

# Where mathematical (0, 0) lands on the canvas
ORIGIN_X = _get_float('ORIGIN_X', 50)
ORIGIN_Y = _get_float('ORIGIN_Y', 550)

# Bodies
BIRD_RADIUS = _get_float('BIRD_RADIUS', 10)
TARGET_RADIUS = _get_float('TARGET_RADIUS', 20)

# Target spawn bounds (mathematical coordinates, inclusive)
TARGET_X_MIN = _get_int('TARGET_X_MIN', 200)
TARGET_X_MAX = _get_int('TARGET_X_MAX', 699)
TARGET_Y_MIN = _get_int('TARGET_Y_MIN', 50)
TARGET_Y_MAX = _get_int('TARGET_Y_MAX', 399)

# Initial target before the first spawn
INITIAL_TARGET_X = _get_float('INITIAL_TARGET_X', 500)
INITIAL_TARGET_Y = _get_float('INITIAL_TARGET_Y', 150)

# Horizontal distance the bird travels per animation step (fixed, not read from .env)
STEP_SIZE = 4

# Axis tick spacing in pixels
TICK_SPACING = _get_int('TICK_SPACING', 50)

# Sliders: (min, max, step, default)
A_RANGE: Tuple[float, float, float, float] = (
    _get_float('A_MIN', -0.02),
    _get_float('A_MAX', 0.02),
    _get_float('A_STEP', 0.001),
    _get_float('A_DEFAULT', -0.002),
)
B_RANGE: Tuple[float, float, float, float] = (
    _get_float('B_MIN', -5.0),
    _get_float('B_MAX', 5.0),
    _get_float('B_STEP', 0.1),
    _get_float('B_DEFAULT', 1.0),
)
C_RANGE: Tuple[float, float, float, float] = (
    _get_float('C_MIN', 0.0),
    _get_float('C_MAX', 500.0),
    _get_float('C_STEP', 1.0),
    _get_float('C_DEFAULT', 50.0),
)

# Random seed for target placement (-1 = system randomness)
SEED = _get_int('SEED', -1)

# Show the session hit/miss counters in the panel
SHOW_COUNTERS = _get_bool('SHOW_COUNTERS', True)

# Visual (not configurable via .env)
BACKGROUND_COLOR = (255, 255, 255)
PANEL_COLOR = (240, 242, 245)
AXIS_COLOR = (204, 204, 204)
LABEL_COLOR = (136, 136, 136)
TARGET_COLOR = (76, 175, 80)
TARGET_EYE_COLOR = (255, 255, 255)
BIRD_COLOR = (211, 47, 47)
PREVIEW_COLOR = (128, 170, 217)  # 50% blue over the white background
TEXT_COLOR = (40, 40, 40)
SUCCESS_COLOR = (0, 128, 0)
FAILURE_COLOR = (220, 0, 0)
SLIDER_BG = (200, 205, 215)
SLIDER_FILL = (0, 86, 179)
KNOB_COLOR = (255, 255, 255)
BUTTON_COLOR = (0, 86, 179)
BUTTON_HOVER_COLOR = (0, 64, 140)
BUTTON_TEXT_COLOR = (255, 255, 255)
