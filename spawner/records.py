"""Bookkeeping entries for events created at runtime."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

import constants


@dataclass
class SpawnRecord:
    """One spawned event.

    ``event_data`` stays ``None`` until the definition is first requested; it
    is then built from the source event with ``id``, ``x`` and ``y`` replaced
    by the spawn values.
    """

    spawn_id: int
    x: int = 0
    y: int = 0
    direction: int = constants.DIR_DOWN
    source_map_id: int = 1
    source_event_id: int = 1
    event_data: Optional[Dict[str, Any]] = None

    def randomize_direction(self, rng: Optional[random.Random] = None) -> None:
        """Face one of the four cardinal directions at random."""

        rng = rng or random
        self.direction = 2 * rng.randrange(4) + 2

    @property
    def source(self) -> tuple[int, int]:
        return self.source_map_id, self.source_event_id
