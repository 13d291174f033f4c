"""
Game session for the tile map runtime.

:class:`Game` ties together the map, the player, parked vehicles and the
sprites of the current scene, and routes plugin commands to the registry in
:mod:`events`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from core.characters import Player, Vehicle
from core.game_map import GameMap
from events import dispatch as dispatch_event
from loaders.core import Context
from loaders.map_loader import default_context
from render.sprites import Spriteset

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, ctx: Optional[Context] = None) -> None:
        self.ctx = ctx or default_context()
        self.game_map = GameMap(self.ctx)
        self.player = Player()
        self.spriteset: Optional[Spriteset] = None
        # Set by :func:`spawner.install`
        self.event_spawner = None

    def setup_map(self, map_id: int, x: Optional[int] = None, y: Optional[int] = None) -> None:
        """Enter ``map_id``, optionally placing the player at ``(x, y)``."""

        self.game_map.setup(map_id)
        if x is not None and y is not None:
            self.player.locate(x, y)
        self.spriteset = Spriteset(self.game_map, self.player)

    def add_vehicle(self, kind: str, map_id: int, x: int, y: int) -> Vehicle:
        vehicle = Vehicle(kind, map_id, x, y)
        self.game_map.vehicles.append(vehicle)
        return vehicle

    def plugin_command(self, command: str, args: Dict[str, Any]) -> None:
        """Run a registered plugin command with its raw arguments."""

        logger.debug("Plugin command %s %s", command, args)
        dispatch_event(self, {"type": command, "params": args})

    def update(self) -> None:
        if self.spriteset is not None:
            self.spriteset.update()
