"""
Live map state for the tile map runtime.

The :class:`GameMap` holds the data of the currently loaded map together with
the runtime :class:`~core.characters.GameEvent` objects placed on it.  Two
extension points let plugins take part in the map lifecycle without patching
its methods:

* event providers registered with :meth:`GameMap.add_event_provider` are asked
  for an event definition whenever the authored map data has none;
* :data:`state.event_bus.ON_MAP_SETUP` is published before a map's data is
  loaded.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import constants
from core.characters import GameEvent, Vehicle
from loaders.core import Context
from loaders.map_loader import load_map
from state.event_bus import EVENT_BUS, ON_MAP_SETUP

logger = logging.getLogger(__name__)

# ``provider(map_id, event_id)`` returns an event definition or ``None``
EventProvider = Callable[[int, int], Optional[Dict[str, Any]]]


class GameMap:
    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx
        self.map_id = 0
        self.width = 0
        self.height = 0
        self.data: Dict[str, Any] = {"events": [None], "passage": [], "regions": []}
        self.events: Dict[int, GameEvent] = {}
        self.vehicles: List[Vehicle] = []
        self._event_providers: List[EventProvider] = []

    # ------------------------------------------------------------------ setup
    def setup(self, map_id: int) -> None:
        """Load ``map_id`` and create runtimes for its authored events."""

        EVENT_BUS.publish(ON_MAP_SETUP, map_id)
        self.data = load_map(self.ctx, map_id)
        self.map_id = map_id
        self.width = self.data["width"]
        self.height = self.data["height"]
        self.events = {}
        for event_id in self.authored_event_ids():
            self.events[event_id] = GameEvent(self, event_id)
        logger.info("Map %d set up with %d events", map_id, len(self.events))

    def add_event_provider(self, provider: EventProvider) -> None:
        """Register ``provider`` as a fallback source of event definitions."""

        if provider not in self._event_providers:
            self._event_providers.append(provider)

    # ---------------------------------------------------------------- queries
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.data["passage"][y][x] != constants.BLOCKED_TILE

    def region_id(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return 0
        return self.data["regions"][y][x]

    def events_xy(self, x: int, y: int) -> List[GameEvent]:
        return [event for event in self.events.values() if event.pos(x, y)]

    def is_collided_with_vehicles(self, x: int, y: int) -> bool:
        """Return ``True`` if a boat or ship on this map blocks ``(x, y)``."""

        return any(
            v.kind in constants.GROUND_VEHICLES and v.map_id == self.map_id and v.pos_nt(x, y)
            for v in self.vehicles
        )

    def authored_event_ids(self) -> List[int]:
        """Return the ids of the events defined in the map data."""

        return [index for index, entry in enumerate(self.data["events"]) if entry]

    def event_data(self, event_id: int) -> Optional[Dict[str, Any]]:
        """Return the definition of ``event_id``.

        Authored data wins; otherwise each registered provider is asked in
        registration order and the first non-``None`` answer is returned.
        """

        authored = self.data["events"]
        if 0 <= event_id < len(authored) and authored[event_id]:
            return authored[event_id]
        for provider in self._event_providers:
            data = provider(self.map_id, event_id)
            if data is not None:
                return data
        return None
