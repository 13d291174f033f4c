import json
import os
import random
import sys

import pytest

# Headless pygame: must be set before pygame creates any surface
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure the project root is on the path so modules can be imported in tests
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.game import Game
from loaders.core import Context
from state.event_bus import EVENT_BUS


@pytest.fixture(autouse=True)
def _reset_event_bus():
    """Isolate global event subscriptions between tests."""

    EVENT_BUS.reset()
    yield
    EVENT_BUS.reset()


@pytest.fixture
def rng():
    """Return a deterministic random number generator."""

    return random.Random(0)


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def ctx(data_dir):
    return Context(repo_root=str(data_dir.parent), search_paths=[str(data_dir)])


@pytest.fixture
def write_map(data_dir):
    """Return a factory writing ``MapXXX.json`` files into ``data_dir``.

    ``rows`` describe the map one string per row: ``#`` blocks a tile and a
    digit gives the region id of a passable tile (``.`` is region ``0``).
    ``events`` maps event ids to ``(x, y)`` or to a full definition.
    """

    def _factory(map_id, rows, events=None):
        height = len(rows)
        width = max(len(r) for r in rows)
        passage = ["".join("#" if c == "#" else "." for c in row) for row in rows]
        regions = [[int(c) if c.isdigit() else 0 for c in row] for row in rows]
        events = events or {}
        entries = [None] * (max(events, default=0) + 1)
        for event_id, value in events.items():
            if isinstance(value, dict):
                entry = dict(value)
            else:
                x, y = value
                entry = {
                    "id": event_id,
                    "name": f"EV{event_id:03d}",
                    "x": x,
                    "y": y,
                    "pages": [{"image": {"direction": 2}, "through": False}],
                }
            entries[event_id] = entry
        data = {
            "width": width,
            "height": height,
            "passage": passage,
            "regions": regions,
            "events": entries,
        }
        path = data_dir / f"Map{map_id:03d}.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def make_game(ctx):
    """Return a factory building a :class:`Game` on the test data directory."""

    def _factory(map_id=None, player=(0, 0)):
        game = Game(ctx)
        if map_id is not None:
            game.setup_map(map_id, *player)
        return game

    return _factory
