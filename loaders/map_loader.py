"""Read ``MapXXX.json`` data files.

Map files hold the tile layout of a map (``passage`` rows and ``regions``)
together with the authored ``events`` list, indexed by event id.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import constants
import settings
from .core import Context, read_json, require_keys

logger = logging.getLogger(__name__)


def default_context(repo_root: Optional[str] = None) -> Context:
    """Return a :class:`Context` searching :data:`settings.DATA_DIRS`."""

    if repo_root is None:
        repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return Context(repo_root=repo_root, search_paths=list(settings.DATA_DIRS))


def map_filename(map_id: int) -> str:
    """Return the data file name for ``map_id`` (``Map001.json`` for 1)."""

    return constants.MAP_FILE_TEMPLATE.format(int(map_id))


def load_map(ctx: Context, map_id: int) -> Dict[str, Any]:
    """Load and validate the data of ``map_id``.

    Missing optional sections are filled in so callers can index
    ``passage`` and ``regions`` directly.  ``FileNotFoundError`` propagates
    when no search path holds the file.
    """

    rel_path = map_filename(map_id)
    data = read_json(ctx, rel_path)
    if not isinstance(data, dict):
        raise ValueError(f"{rel_path}: expected a JSON object")
    require_keys(data, ("width", "height", "events"))
    width = int(data["width"])
    height = int(data["height"])
    data["width"] = width
    data["height"] = height

    data["passage"] = _normalise_passage(data.get("passage") or [], width, height)

    regions = data.get("regions")
    if regions is None:
        regions = [[0] * width for _ in range(height)]
    data["regions"] = _normalise_regions(regions, width, height)

    events: List[Optional[Dict[str, Any]]] = list(data["events"])
    if not events:
        events = [None]
    data["events"] = events
    logger.debug(
        "Loaded %s (%dx%d, %d events)",
        rel_path,
        width,
        height,
        sum(1 for e in events if e),
    )
    return data


def _normalise_passage(rows: List[str], width: int, height: int) -> List[str]:
    grid = [str(row)[:width].ljust(width, ".") for row in rows[:height]]
    grid += ["." * width] * (height - len(grid))
    return grid


def _normalise_regions(rows: List[List[int]], width: int, height: int) -> List[List[int]]:
    grid = [[0] * width for _ in range(height)]
    for y, row in enumerate(rows[:height]):
        for x, value in enumerate(row[:width]):
            grid[y][x] = int(value)
    return grid
