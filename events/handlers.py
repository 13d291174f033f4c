"""Built-in plugin command handlers."""
from typing import Any, Dict

import spawner


def _number(params: Dict[str, Any], key: str, default: int = 1) -> int:
    """Return ``params[key]`` as an int, accepting ``"3"`` and ``"3.0"`` alike."""
    return int(float(params.get(key, default)))


def spawn(game, params: Dict[str, Any]) -> None:
    """Spawn copies of an event into the current map.

    Parameters are expected to contain ``sourceMapId``, ``sourceEventId``,
    ``eventCount`` and ``targetRegionId``.  Values may be numbers or numeric
    strings; fractions are truncated and each one defaults to ``1`` when
    missing.  The spawner is attached to ``game`` on first use.
    """
    event_spawner = spawner.install(game)
    event_spawner.spawn_events(
        _number(params, "sourceMapId"),
        _number(params, "sourceEventId"),
        _number(params, "eventCount"),
        _number(params, "targetRegionId"),
    )
