#!/usr/bin/env python3
"""Break the Bricks - Standalone Entry Point.

Usage:
    breakbricks
    breakbricks --mute
    breakbricks --background table.jpg --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path

import pygame

from . import config
from .audio import SoundBoard
from .game_mode import BreakBricksGame
from .input import HeldKeys, KeyboardSource
from .logging import configure_logging, get_logger
from .session import TableSize, create_session

log = get_logger('main')


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(description="Break the Bricks")

    # Display options
    parser.add_argument('--width', type=int, default=config.TABLE_WIDTH, help='Table width')
    parser.add_argument('--height', type=int, default=config.TABLE_HEIGHT, help='Table height')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Frame rate cap')
    parser.add_argument('--background', type=Path, default=config.BACKGROUND_IMAGE,
                        help='Background image for the table')

    # Audio / diagnostics
    parser.add_argument('--mute', action='store_true', help='Disable all audio')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
                        help='Default log level')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run Break the Bricks."""
    args = parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    table = TableSize(width=args.width, height=args.height)
    screen = pygame.display.set_mode((table.width, table.height))
    pygame.display.set_caption(config.WINDOW_TITLE)

    # Create game
    audio = SoundBoard(audio_enabled=config.AUDIO_ENABLED and not args.mute)
    session = create_session(table=table, audio=audio, background_image=args.background)
    game = BreakBricksGame(session)
    keyboard = KeyboardSource()

    log.info("Starting %s at %s, %d fps", game.NAME, table, args.fps)

    # Game loop
    clock = pygame.time.Clock()
    running = True

    while running:
        clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        keys: HeldKeys = keyboard.poll()
        log.trace("Held keys: %s", sorted(keys))
        game.update(keys)
        game.render(screen)
        pygame.display.flip()

    log.info("Final score: %d", game.get_score())
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
