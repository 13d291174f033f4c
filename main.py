"""Demo entry point for the event spawner.

Initialises Pygame, loads a map from the data directory, runs the ``spawn``
plugin command once and shows the result until the window is closed."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import pygame

import constants
import settings
import spawner
from core.game import Game


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("map_id", type=int, help="map to load")
    parser.add_argument("--source-map", type=int, default=1)
    parser.add_argument("--source-event", type=int, default=1)
    parser.add_argument("--count", type=int, default=1)
    parser.add_argument("--region", type=int, default=1)
    parser.add_argument("--player", type=int, nargs=2, metavar=("X", "Y"), default=(0, 0))
    parser.add_argument("--frames", type=int, default=0,
                        help="stop after this many frames (0 runs until closed)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))

    pygame.init()
    game = Game()
    spawner.install(game)
    game.setup_map(args.map_id, *args.player)
    game.plugin_command(
        "spawn",
        {
            "sourceMapId": args.source_map,
            "sourceEventId": args.source_event,
            "eventCount": args.count,
            "targetRegionId": args.region,
        },
    )

    size = constants.TILE_SIZE
    window = (
        max(constants.WINDOW_WIDTH, game.game_map.width * size),
        max(constants.WINDOW_HEIGHT, game.game_map.height * size),
    )
    screen = pygame.display.set_mode(window)
    pygame.display.set_caption("Event Spawner")
    clock = pygame.time.Clock()

    frame = 0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
        game.update()
        screen.fill(constants.BLACK)
        game.spriteset.draw(screen)
        pygame.display.flip()
        clock.tick(constants.FPS)
        frame += 1
        if args.frames and frame >= args.frames:
            running = False
    pygame.quit()


if __name__ == "__main__":
    main()
