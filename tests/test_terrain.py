import math

import pytest

from procworld.entities import Category
from procworld.noise import noise
from procworld.terrain import Terrain


def keys(blocks):
    return sorted(b.key for b in blocks)


def columns(blocks):
    return sorted({b.x for b in blocks})


def test_ground_height_is_deterministic(config):
    a, b = Terrain(config), Terrain(config)
    for x in (-5000.5, -30, 0, 17.25, 4096):
        assert a.ground_height_at(x) == b.ground_height_at(x)
        assert a.ground_height_at(x) == a.ground_height_at(x)


def test_ground_height_is_continuous(config):
    terrain = Terrain(config)
    prev = terrain.ground_height_at(0.0)
    for x in range(1, 3000):
        cur = terrain.ground_height_at(float(x))
        assert abs(cur - prev) < config.block_size
        prev = cur


@pytest.mark.parametrize("a,b,c", [
    (0, 1024, 2048),
    (-1024, 0, 1024),
    (-1000, -517, 333),
    (-61, -31, 1),
    (7, 8, 95),
])
def test_partition_invariance(config, a, b, c):
    terrain = Terrain(config)
    whole = terrain.create_in_range(a, c)
    parts = terrain.create_in_range(a, b) + terrain.create_in_range(b, c)
    assert keys(whole) == keys(parts)
    assert len({blk.key for blk in parts}) == len(parts)


def test_many_small_pieces_match_one_call(config):
    terrain = Terrain(config)
    whole = terrain.create_in_range(-2000, 2000)
    pieces = []
    for start in range(-2000, 2000, 97):
        pieces += terrain.create_in_range(start, min(start + 97, 2000))
    assert keys(whole) == keys(pieces)


def test_range_snapping(config):
    terrain = Terrain(config)
    size = config.block_size
    # min floored toward -inf, max floored to its own multiple
    assert columns(terrain.create_in_range(-31, 61)) == [-60, -30, 0, 30]
    assert columns(terrain.create_in_range(-60, 60)) == [-60, -30, 0, 30]
    assert all(b.x % size == 0 for b in terrain.create_in_range(-1000, 1000))


@pytest.mark.parametrize("a,b", [(100, 100), (100, 50), (31, 59), (-29, -1)])
def test_empty_range(config, a, b):
    assert Terrain(config).create_in_range(a, b) == []


def test_column_layout(config):
    terrain = Terrain(config)
    size = config.block_size
    blocks = terrain.create_in_range(0, 300)
    assert len(blocks) == 10 * config.terrain_depth
    for x in columns(blocks):
        col = sorted(b.y for b in blocks if b.x == x)
        top = math.floor(terrain.ground_height_at(x) / size) * size
        assert col == [top + i * size for i in range(config.terrain_depth)]
    assert all(b.category is Category.GROUND and b.solid for b in blocks)


def test_ground_height_is_base_plus_scaled_noise(config):
    terrain = Terrain(config)
    for x in (-777.0, 0.0, 12.5, 3000.0):
        expected = config.base_height + noise(config.seed, x * config.noise_frequency) * config.noise_amplitude
        assert terrain.ground_height_at(x) == pytest.approx(expected)
