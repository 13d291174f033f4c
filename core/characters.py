"""
Character definitions for the tile map runtime.

Characters are anything that occupies a tile and faces a direction: the
player, parked vehicles and map events.  This module does not depend on
Pygame so map logic can be tested without graphics; sprites live in
:mod:`render.sprites`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import constants

if TYPE_CHECKING:  # pragma: no cover
    from core.game_map import GameMap


class Character:
    """Base class for objects placed on a map tile."""

    kind = "character"

    def __init__(self, x: int = 0, y: int = 0, direction: int = constants.DIR_DOWN) -> None:
        self.x = x
        self.y = y
        self.direction = direction
        self.through = False

    def pos(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y

    def pos_nt(self, x: int, y: int) -> bool:
        """Return ``True`` if the character stands on ``(x, y)`` and blocks it."""

        return self.pos(x, y) and not self.through

    def locate(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_direction(self, direction: int) -> None:
        if direction in constants.DIRECTIONS:
            self.direction = direction

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y


class Player(Character):
    kind = "player"


class Vehicle(Character):
    """A boat, ship or airship parked on a map.

    Vehicles remember the map they were left on; only vehicles on the current
    map take part in collision checks.
    """

    def __init__(self, kind: str, map_id: int = 0, x: int = 0, y: int = 0) -> None:
        if kind not in constants.VEHICLE_KINDS:
            raise ValueError(f"Unknown vehicle kind: {kind}")
        super().__init__(x, y)
        self.kind = kind
        self.map_id = map_id


class GameEvent(Character):
    """Runtime object for one map event.

    The definition is never stored on the instance: :meth:`event` asks the
    map each time, so authored and spawned events are looked up the same way.
    """

    kind = "event"

    def __init__(self, game_map: "GameMap", event_id: int) -> None:
        super().__init__()
        self.game_map = game_map
        self.map_id = game_map.map_id
        self.event_id = event_id
        data = self.event()
        if data is None:
            raise KeyError(f"No definition for event {event_id} on map {self.map_id}")
        self.locate(int(data.get("x", 0)), int(data.get("y", 0)))
        page = self._first_page(data)
        image = page.get("image") or {}
        self.set_direction(int(image.get("direction", constants.DIR_DOWN)))
        self.through = bool(page.get("through", False))

    def event(self) -> Optional[Dict[str, Any]]:
        return self.game_map.event_data(self.event_id)

    @property
    def name(self) -> str:
        data = self.event() or {}
        return str(data.get("name", ""))

    @staticmethod
    def _first_page(data: Dict[str, Any]) -> Dict[str, Any]:
        pages = data.get("pages") or []
        return pages[0] if pages and isinstance(pages[0], dict) else {}

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"GameEvent(map={self.map_id}, id={self.event_id}, pos=({self.x}, {self.y}))"
