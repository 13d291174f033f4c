"""Runtime event spawning for the tile map runtime."""

from .event_spawner import EventSpawner, install
from .records import SpawnRecord
from .registry import SpawnRegistry
from .sampling import allocate_event_ids, find_spawnable_tiles, sample_tiles
from .source_cache import SourceEventCache

__all__ = [
    "EventSpawner",
    "install",
    "SpawnRecord",
    "SpawnRegistry",
    "SourceEventCache",
    "allocate_event_ids",
    "find_spawnable_tiles",
    "sample_tiles",
]
