#!/usr/bin/env python3
"""Parabola Launch - Standalone entry point.

Tune y = ax² + bx + c with the sliders and launch the bird at the target.
"""

import argparse
import sys
from typing import List, Optional

import pygame

from parabola import config
from parabola.game_mode import ParabolaMode
from parabola.logging import configure_logging, get_logger

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='parabola-launch',
        description=ParabolaMode.DESCRIPTION,
    )
    for arg in ParabolaMode.ARGUMENTS:
        parser.add_argument(
            arg['name'],
            type=arg['type'],
            default=arg['default'],
            help=arg['help'],
        )
    parser.add_argument('--fps', type=int, default=config.FPS,
                        help='Frames per second (one animation step per frame)')
    parser.add_argument('--frames', type=int, default=0,
                        help='Exit after this many frames (0 = run until closed)')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Log level for all modules')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height + config.PANEL_HEIGHT))
    except pygame.error:
        log.exception("Could not open a %dx%d window", args.width, args.height + config.PANEL_HEIGHT)
        pygame.quit()
        return 1
    pygame.display.set_caption(ParabolaMode.NAME)

    game = ParabolaMode(width=args.width, height=args.height, seed=args.seed,
                        a=args.a, b=args.b, c=args.c)
    clock = pygame.time.Clock()
    log.info("Starting %s %s at %d fps", ParabolaMode.NAME, ParabolaMode.VERSION, args.fps)

    frames = 0
    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        events = pygame.event.get()
        if any(event.type == pygame.QUIT for event in events):
            running = False

        game.handle_events(events)
        if game.quit_requested:
            running = False

        game.update(dt)
        game.render(screen)
        pygame.display.flip()

        frames += 1
        if args.frames and frames >= args.frames:
            running = False

    log.info("Session over: %d hits, %d misses", game.session.hits, game.session.misses)
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
