"""Per-map storage of spawn records."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .records import SpawnRecord
from .source_cache import SourceEventCache

logger = logging.getLogger(__name__)


class SpawnRegistry:
    """Spawn records grouped by map id, then by spawn id.

    Only the bucket of the map being played is kept alive: entering another
    map drops every other bucket through :meth:`discard_other_maps`.
    """

    def __init__(self, sources: SourceEventCache) -> None:
        self.sources = sources
        self._maps: Dict[int, Dict[int, SpawnRecord]] = {}

    def bucket(self, map_id: int) -> Dict[int, SpawnRecord]:
        return self._maps.setdefault(map_id, {})

    def store(self, map_id: int, record: SpawnRecord) -> None:
        self.bucket(map_id)[record.spawn_id] = record

    def record(self, map_id: int, spawn_id: int) -> Optional[SpawnRecord]:
        return self._maps.get(map_id, {}).get(spawn_id)

    def spawn_ids(self, map_id: int) -> List[int]:
        return list(self._maps.get(map_id, {}))

    def map_ids(self) -> List[int]:
        return list(self._maps)

    def event_data(self, map_id: int, spawn_id: int) -> Optional[Dict[str, Any]]:
        """Return the definition of a spawned event, building it on first use.

        The cached source text is parsed afresh so every spawn owns its own
        copy; ``id``, ``x`` and ``y`` are then replaced with the spawn values.
        """

        record = self.record(map_id, spawn_id)
        if record is None:
            return None
        if record.event_data is None:
            data = json.loads(self.sources.get(*record.source))
            data["id"] = record.spawn_id
            data["x"] = record.x
            data["y"] = record.y
            record.event_data = data
        return record.event_data

    def discard_other_maps(self, map_id: int) -> None:
        stale = [mid for mid in self._maps if mid != map_id]
        for mid in stale:
            del self._maps[mid]
        if stale:
            logger.debug("Discarded spawn records of maps %s", stale)
