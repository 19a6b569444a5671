"""
Parabola Launch game mode.

Wires the sliders and buttons to a game session and its animator, and
draws the canvas plus the control panel below it.

Controls:
    Mouse      drag sliders, click Lançar / Resetar, hover the canvas
               to read the coordinates under the pointer
    SPACE      launch
    R          reset (new target)
    Q / A      a up / down
    W / S      b up / down
    E / D      c up / down
    ESC        quit
"""

import random
from typing import Any, Dict, List, Optional, Tuple

import pygame

from parabola import config
from parabola.animator import AnimatorState, FrameScheduler, Outcome, TrajectoryAnimator
from parabola.coordinates import CoordinateMapper
from parabola.logging import get_logger
from parabola.models import CanvasPoint, Coefficients, MathPoint
from parabola.renderer import SceneRenderer
from parabola.session import GameSession
from parabola.spawner import TargetSpawner
from parabola.text import Tone, format_pointer, format_slider_value
from parabola.ui import Button, Slider

log = get_logger('game_mode')

_NUDGE_KEYS: Dict[int, Tuple[str, int]] = {
    pygame.K_q: ('a', 1),
    pygame.K_a: ('a', -1),
    pygame.K_w: ('b', 1),
    pygame.K_s: ('b', -1),
    pygame.K_e: ('c', 1),
    pygame.K_d: ('c', -1),
}

_TONE_COLORS = {
    Tone.NEUTRAL: config.TEXT_COLOR,
    Tone.SUCCESS: config.SUCCESS_COLOR,
    Tone.FAILURE: config.FAILURE_COLOR,
}


class ParabolaMode:
    """
    Parabola Launch game mode.

    Pick a, b and c so that y = ax² + bx + c passes through the target,
    then launch the bird along it.
    """

    # Game metadata
    NAME = "Parabola Launch"
    DESCRIPTION = "Tune a quadratic to hit the target with the bird."
    VERSION = "1.0.0"
    AUTHOR = "Parabola Launch Team"

    # CLI argument definitions
    ARGUMENTS: List[Dict[str, Any]] = [
        {'name': '--width', 'type': int, 'default': config.SCREEN_WIDTH,
         'help': 'Canvas width in pixels'},
        {'name': '--height', 'type': int, 'default': config.SCREEN_HEIGHT,
         'help': 'Canvas height in pixels'},
        {'name': '--seed', 'type': int, 'default': config.SEED,
         'help': 'Random seed for target placement (-1 = random)'},
        {'name': '--a', 'type': float, 'default': None,
         'help': 'Initial value of coefficient a'},
        {'name': '--b', 'type': float, 'default': None,
         'help': 'Initial value of coefficient b'},
        {'name': '--c', 'type': float, 'default': None,
         'help': 'Initial value of coefficient c'},
    ]

    def __init__(
        self,
        width: int = config.SCREEN_WIDTH,
        height: int = config.SCREEN_HEIGHT,
        seed: int = config.SEED,
        a: Optional[float] = None,
        b: Optional[float] = None,
        c: Optional[float] = None,
        origin: Optional[CanvasPoint] = None,
    ):
        """
        Initialize game mode.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            seed: Seed for target placement (-1 = system randomness)
            a: Initial a (defaults to config)
            b: Initial b (defaults to config)
            c: Initial c (defaults to config)
            origin: Canvas position of mathematical (0, 0)
        """
        self.width = width
        self.height = height
        self.quit_requested = False

        self.canvas = pygame.Surface((width, height))
        mapper = CoordinateMapper(origin or CanvasPoint(x=config.ORIGIN_X, y=config.ORIGIN_Y))
        self.renderer = SceneRenderer(self.canvas, mapper)
        if not (0 <= mapper.origin.x < width and 0 <= mapper.origin.y < height):
            log.warning("Origin (%s, %s) lies outside the %dx%d canvas",
                        mapper.origin.x, mapper.origin.y, width, height)

        self.sliders: Dict[str, Slider] = self._create_sliders(a, b, c)
        self.launch_button, self.reset_button = self._create_buttons()

        rng = random.Random(seed) if seed >= 0 else random.Random()
        self.session = GameSession(self.renderer, self.coefficients, spawner=TargetSpawner(rng))

        self.scheduler = FrameScheduler()
        self.animator = TrajectoryAnimator(self.session, self.scheduler)
        self.animator.on_finish(self._on_outcome)

        self._mouse_pos: Optional[Tuple[int, int]] = None
        self._font: Optional[pygame.font.Font] = None
        self._font_small: Optional[pygame.font.Font] = None

        self.session.draw_scene()
        log.info("Game ready: canvas %dx%d, target at (%s, %s)",
                 width, height, self.session.target.x, self.session.target.y)

    # =========================================================================
    # Layout
    # =========================================================================

    def _create_sliders(self, a: Optional[float], b: Optional[float],
                        c: Optional[float]) -> Dict[str, Slider]:
        """Three sliders side by side along the top of the panel."""
        margin = 20
        slider_w = (self.width - 4 * margin) // 3
        y = self.height + 40
        sliders = {}
        for i, (name, slider_range, initial) in enumerate((
            ('a', config.A_RANGE, a),
            ('b', config.B_RANGE, b),
            ('c', config.C_RANGE, c),
        )):
            lo, hi, step, default = slider_range
            rect = pygame.Rect(margin + i * (slider_w + margin), y, slider_w, 12)
            value = default if initial is None else initial
            sliders[name] = Slider(name, rect, lo, hi, step, value)
        return sliders

    def _create_buttons(self) -> Tuple[Button, Button]:
        y = self.height + 75
        launch = Button("Lançar", pygame.Rect(20, y, 110, 34))
        reset = Button("Resetar", pygame.Rect(140, y, 110, 34))
        return launch, reset

    def _get_font(self) -> pygame.font.Font:
        """Get or create font."""
        if self._font is None:
            self._font = pygame.font.Font(None, 26)
        return self._font

    def _get_font_small(self) -> pygame.font.Font:
        """Get or create small font."""
        if self._font_small is None:
            self._font_small = pygame.font.Font(None, 22)
        return self._font_small

    # =========================================================================
    # Game interface
    # =========================================================================

    @property
    def state(self) -> AnimatorState:
        return self.animator.state

    def get_score(self) -> int:
        return self.session.hits

    def coefficients(self) -> Coefficients:
        """Read the sliders."""
        return Coefficients(
            a=self.sliders['a'].value,
            b=self.sliders['b'].value,
            c=self.sliders['c'].value,
        )

    def pointer_position(self) -> Optional[MathPoint]:
        """Mathematical coordinates under the mouse, None when it is off the canvas."""
        if self._mouse_pos is None:
            return None
        x, y = self._mouse_pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.renderer.mapper.to_math(x, y)

    def launch(self) -> None:
        self.animator.launch()

    def reset(self) -> None:
        log.info("Reset requested")
        self.animator.reset()

    def handle_events(self, events: List[pygame.event.Event]) -> None:
        """
        Process pygame events for the panel and keyboard shortcuts.

        Args:
            events: Events collected this frame
        """
        for event in events:
            if event.type == pygame.MOUSEMOTION:
                self._mouse_pos = event.pos

            if event.type == pygame.KEYDOWN:
                self._handle_key(event.key)
                continue

            if self.launch_button.handle_event(event):
                self.launch()
                continue
            if self.reset_button.handle_event(event):
                self.reset()
                continue

            changed = False
            for slider in self.sliders.values():
                changed = slider.handle_event(event) or changed
            if changed:
                self._on_coefficients_changed()

    def _handle_key(self, key: int) -> None:
        if key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif key == pygame.K_SPACE:
            self.launch()
        elif key == pygame.K_r:
            self.reset()
        elif key in _NUDGE_KEYS:
            name, steps = _NUDGE_KEYS[key]
            if self.sliders[name].nudge(steps):
                self._on_coefficients_changed()

    def _on_coefficients_changed(self) -> None:
        """Refresh the preview; during a flight only the labels change."""
        if self.animator.is_running:
            self.session.refresh_text()
        else:
            self.session.draw_scene()

    def _on_outcome(self, outcome: Outcome) -> None:
        if outcome == Outcome.HIT:
            self.session.record_hit()
        elif outcome == Outcome.MISS:
            self.session.record_miss()

    def update(self, dt: float) -> None:
        """Advance the animation by one frame."""
        self.scheduler.run_frame()

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, screen: pygame.Surface) -> None:
        """Draw the canvas and the control panel."""
        screen.fill(config.PANEL_COLOR)
        screen.blit(self.canvas, (0, 0))
        self._render_panel(screen)

    def _render_panel(self, screen: pygame.Surface) -> None:
        font = self._get_font()
        font_small = self._get_font_small()

        for name, slider in self.sliders.items():
            label = f"{name} = {format_slider_value(name, slider.value)}"
            slider.render(screen, font_small, label)

        for button in (self.launch_button, self.reset_button):
            hovered = self._mouse_pos is not None and button.rect.collidepoint(self._mouse_pos)
            button.render(screen, font, hovered=hovered)

        x = 280
        y = self.height + 78
        text = font.render(self.session.equation_text, True, config.TEXT_COLOR)
        screen.blit(text, (x, y))
        text = font_small.render(self.session.target_text, True, config.TEXT_COLOR)
        screen.blit(text, (x, y + 26))

        status = self.session.status
        if status.text:
            text = font.render(status.text, True, _TONE_COLORS[status.tone])
            screen.blit(text, (20, self.height + 125))

        if config.SHOW_COUNTERS:
            counters = f"Acertos: {self.session.hits}  Erros: {self.session.misses}"
            text = font_small.render(counters, True, config.LABEL_COLOR)
            screen.blit(text, (self.width - text.get_width() - 20, self.height + 130))

        pointer = self.pointer_position()
        if pointer is not None:
            text = font_small.render(format_pointer(pointer), True, config.LABEL_COLOR)
            screen.blit(text, (self.width - text.get_width() - 20, self.height + 105))
