import random

import pytest

from spawner.sampling import allocate_event_ids, find_spawnable_tiles, sample_tiles


@pytest.mark.parametrize("count", [1, 2, 5, 6, 9])
def test_sample_returns_distinct_candidates(count, rng):
    tiles = [(x, 0) for x in range(10)]
    picked = sample_tiles(count, tiles, rng)
    assert len(picked) == count
    assert len(set(picked)) == count
    assert set(picked) <= set(tiles)


@pytest.mark.parametrize("count", [10, 11, 50])
def test_sample_undersupply_returns_every_tile(count, rng):
    tiles = [(x, 1) for x in range(10)]
    assert sample_tiles(count, tiles, rng) == tiles


def test_sample_zero_or_negative_count(rng):
    tiles = [(0, 0), (1, 0)]
    assert sample_tiles(0, tiles, rng) == []
    assert sample_tiles(-3, tiles, rng) == []


def test_sample_empty_pool(rng):
    assert sample_tiles(4, [], rng) == []


def test_exclusion_route_keeps_scan_order(rng):
    tiles = [(x, y) for y in range(3) for x in range(4)]
    picked = sample_tiles(10, tiles, rng)
    assert len(picked) == 10
    assert picked == [t for t in tiles if t in picked]


def test_sampling_uses_fewest_draws():
    class CountingRandom(random.Random):
        calls = 0

        def randrange(self, *args, **kwargs):
            CountingRandom.calls += 1
            return super().randrange(*args, **kwargs)

    tiles = list(range(100))
    CountingRandom.calls = 0
    sample_tiles(99, tiles, CountingRandom(1))
    assert CountingRandom.calls == 1

    CountingRandom.calls = 0
    sample_tiles(1, tiles, CountingRandom(1))
    assert CountingRandom.calls == 1


def test_allocate_ids_skips_taken():
    assert allocate_event_ids(3, [1, 2, 4], [6]) == [3, 5, 7]


def test_allocate_ids_never_collides():
    gen = random.Random(5)
    for _ in range(50):
        authored = set(gen.sample(range(1, 40), gen.randint(0, 20)))
        spawned = set(gen.sample(range(1, 40), gen.randint(0, 20)))
        count = gen.randint(0, 15)
        ids = allocate_event_ids(count, authored, spawned)
        assert len(ids) == count
        assert len(set(ids)) == count
        assert not set(ids) & (authored | spawned)
        assert all(i > 0 for i in ids)


def test_allocate_zero_ids():
    assert allocate_event_ids(0, [1]) == []


def test_spawnable_tiles_filters(write_map, make_game):
    write_map(
        1,
        [
            "7#77",
            "7777",
            "0777",
        ],
        events={1: (2, 0)},
    )
    game = make_game(1, player=(0, 1))
    game.add_vehicle("boat", 1, 3, 0)
    game.add_vehicle("airship", 1, 1, 1)
    game.add_vehicle("ship", 2, 2, 1)

    tiles = find_spawnable_tiles(game.game_map, 7, game.player)

    assert tiles == [(0, 0), (1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (3, 2)]


def test_spawnable_tiles_other_region(write_map, make_game):
    write_map(1, ["1122", "1122"])
    game = make_game(1, player=(3, 1))
    assert find_spawnable_tiles(game.game_map, 2, game.player) == [(2, 0), (3, 0), (2, 1)]
    assert find_spawnable_tiles(game.game_map, 5, game.player) == []
