"""Cache of source event definitions read from map data files."""

from __future__ import annotations

import json
import logging
from typing import Dict, Tuple

from loaders.core import Context
from loaders.map_loader import load_map, map_filename

logger = logging.getLogger(__name__)


class SourceEventCache:
    """Serialized event definitions keyed by ``(map_id, event_id)``.

    The first request for a pair reads the whole source map synchronously;
    later requests return the same JSON text.  Entries are never evicted.
    """

    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx
        self._events: Dict[Tuple[int, int], str] = {}

    def get(self, map_id: int, event_id: int) -> str:
        key = (map_id, event_id)
        event_json = self._events.get(key)
        if event_json is None:
            event_json = self._download(map_id, event_id)
            self._events[key] = event_json
        return event_json

    def _download(self, map_id: int, event_id: int) -> str:
        logger.debug("Fetching event %d from %s", event_id, map_filename(map_id))
        events = load_map(self.ctx, map_id)["events"]
        if not 0 <= event_id < len(events) or not events[event_id]:
            raise KeyError(f"Event {event_id} not found in {map_filename(map_id)}")
        return json.dumps(events[event_id])

    def __contains__(self, key: Tuple[int, int]) -> bool:
        return key in self._events

    def __len__(self) -> int:
        return len(self._events)
