"""Spawn point selection: free tiles, random sampling and id allocation.

These helpers do not keep state of their own.  They read the live map and
the ids handed to them, so the same functions serve every map session.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple, TypeVar

if TYPE_CHECKING:  # pragma: no cover
    from core.characters import Player
    from core.game_map import GameMap

T = TypeVar("T")
Tile = Tuple[int, int]


def find_spawnable_tiles(
    game_map: "GameMap", region_id: int, player: Optional["Player"] = None
) -> List[Tile]:
    """Return the free tiles of ``region_id`` in row-major order.

    A tile qualifies when it is passable, carries the region id, is not the
    player's tile, holds no event and has no boat or ship parked on it.
    """

    tiles: List[Tile] = []
    for y in range(game_map.height):
        for x in range(game_map.width):
            if not game_map.is_passable(x, y):
                continue
            if game_map.region_id(x, y) != region_id:
                continue
            if player is not None and player.pos(x, y):
                continue
            if game_map.events_xy(x, y):
                continue
            if game_map.is_collided_with_vehicles(x, y):
                continue
            tiles.append((x, y))
    return tiles


def sample_tiles(count: int, tiles: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Pick ``count`` distinct entries of ``tiles`` at random.

    When ``count`` covers the whole pool every tile is returned.  Otherwise
    the cheaper route is taken: draw ``count`` tiles directly, or, when more
    than half the pool is wanted, draw the tiles to leave out and keep the
    rest in their original order.
    """

    if count <= 0:
        return []
    if count >= len(tiles):
        return list(tiles)
    rng = rng or random
    use_exclusion = len(tiles) < count * 2
    draws = len(tiles) - count if use_exclusion else count

    picked: List[int] = []
    seen = set()
    while len(picked) < draws:
        index = rng.randrange(len(tiles))
        if index in seen:
            continue
        seen.add(index)
        picked.append(index)

    if not use_exclusion:
        return [tiles[i] for i in picked]
    return [tile for i, tile in enumerate(tiles) if i not in seen]


def allocate_event_ids(count: int, *taken: Iterable[int]) -> List[int]:
    """Return ``count`` positive ids, lowest first, absent from ``taken``."""

    excluded = set()
    for ids in taken:
        excluded.update(ids)
    results: List[int] = []
    candidate = 1
    while len(results) < count:
        if candidate not in excluded:
            results.append(candidate)
        candidate += 1
    return results
