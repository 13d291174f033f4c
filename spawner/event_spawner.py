"""
Spawn copies of an authored event into the current map.

The :class:`EventSpawner` is the per-session state of the plugin.  It owns the
:class:`~spawner.registry.SpawnRegistry` and the
:class:`~spawner.source_cache.SourceEventCache` and hooks into the host through
two callbacks registered by :func:`install`:

* an event provider on the :class:`~core.game_map.GameMap` answering
  definition lookups for spawned ids;
* a subscription to :data:`state.event_bus.ON_MAP_SETUP` dropping the records
  of every map other than the one being entered.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import settings
from core.characters import GameEvent
from loaders.core import Context
from render.sprites import CharacterSprite
from state.event_bus import EVENT_BUS, ON_EVENTS_SPAWNED, ON_MAP_SETUP
from .records import SpawnRecord
from .registry import SpawnRegistry
from .sampling import Tile, allocate_event_ids, find_spawnable_tiles, sample_tiles
from .source_cache import SourceEventCache

if TYPE_CHECKING:  # pragma: no cover
    from core.game import Game

logger = logging.getLogger(__name__)

SpawnPoint = Tuple[int, Tile]


class EventSpawner:
    def __init__(
        self,
        game: "Game",
        ctx: Optional[Context] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.game = game
        self.sources = SourceEventCache(ctx or game.ctx)
        self.registry = SpawnRegistry(self.sources)
        self.rng = rng or random.Random(settings.RNG_SEED)

    # ---------------------------------------------------------------- command
    def spawn_events(
        self,
        source_map_id: int,
        source_event_id: int,
        event_count: int,
        target_region_id: int,
    ) -> List[SpawnRecord]:
        """Spawn ``event_count`` copies of a source event in a region.

        Returns the records created, which may be fewer than requested when
        the region lacks free tiles.
        """

        game_map = self.game.game_map
        ids = self.available_event_ids(event_count)
        tiles = find_spawnable_tiles(game_map, target_region_id, self.game.player)
        points = self.designate_spawn_points(ids, tiles)
        if len(points) < event_count:
            logger.warning(
                "Region %d on map %d has %d free tiles, %d events requested",
                target_region_id,
                game_map.map_id,
                len(tiles),
                event_count,
            )

        records = [
            self.setup_spawn_record(spawn_id, x, y, source_map_id, source_event_id)
            for spawn_id, (x, y) in points
        ]
        for record in records:
            self.initialize_event(record.spawn_id)

        if records:
            logger.info(
                "Spawned %d copies of map %d event %d on map %d: ids %s",
                len(records),
                source_map_id,
                source_event_id,
                game_map.map_id,
                [r.spawn_id for r in records],
            )
        EVENT_BUS.publish(ON_EVENTS_SPAWNED, game_map.map_id, records)
        return records

    # ------------------------------------------------------------ spawn points
    def available_event_ids(self, count: int) -> List[int]:
        game_map = self.game.game_map
        return allocate_event_ids(
            count,
            game_map.authored_event_ids(),
            self.registry.spawn_ids(game_map.map_id),
        )

    def designate_spawn_points(self, ids: Sequence[int], tiles: Sequence[Tile]) -> List[SpawnPoint]:
        """Pair each id with a random free tile; extra ids are dropped."""

        spawn_tiles = sample_tiles(len(ids), tiles, self.rng)
        return list(zip(ids, spawn_tiles))

    # -------------------------------------------------------------- runtimes
    def setup_spawn_record(
        self,
        spawn_id: int,
        x: int,
        y: int,
        source_map_id: int,
        source_event_id: int,
    ) -> SpawnRecord:
        record = SpawnRecord(
            spawn_id,
            x=x,
            y=y,
            source_map_id=source_map_id,
            source_event_id=source_event_id,
        )
        record.randomize_direction(self.rng)
        self.registry.store(self.game.game_map.map_id, record)
        return record

    def initialize_event(self, spawn_id: int) -> GameEvent:
        """Create the runtime and sprite of a stored spawn record."""

        game_map = self.game.game_map
        record = self.registry.record(game_map.map_id, spawn_id)
        if record is None:
            raise KeyError(f"No spawn record {spawn_id} on map {game_map.map_id}")
        event = GameEvent(game_map, spawn_id)
        game_map.events[spawn_id] = event
        event.set_direction(record.direction)
        spriteset = getattr(self.game, "spriteset", None)
        if spriteset is not None:
            spriteset.add_character(CharacterSprite(event))
        return event

    # ----------------------------------------------------------------- hooks
    def event_data(self, map_id: int, event_id: int) -> Optional[Dict[str, Any]]:
        return self.registry.event_data(map_id, event_id)

    def _on_map_setup(self, map_id: int) -> None:
        self.registry.discard_other_maps(map_id)


def install(game: "Game", rng: Optional[random.Random] = None) -> EventSpawner:
    """Attach an :class:`EventSpawner` to ``game`` once and return it."""

    spawner = getattr(game, "event_spawner", None)
    if spawner is not None:
        return spawner
    spawner = EventSpawner(game, rng=rng)
    game.game_map.add_event_provider(spawner.event_data)
    EVENT_BUS.subscribe(ON_MAP_SETUP, spawner._on_map_setup)
    game.event_spawner = spawner
    return spawner
