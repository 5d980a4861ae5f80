from __future__ import annotations

import random

import pytest

from chunkswap.engines.coordinate_resolver import CoordinateResolver, floor_div, floor_mod

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ============================================================
# 1. floor 语义
# ============================================================
@pytest.mark.parametrize(
    "a, b, expected",
    [
        (-1, 16, -1),
        (-16, 16, -1),
        (-17, 16, -2),
        (16, 16, 1),
        (15, 16, 0),
        (0, 16, 0),
    ],
)
def test_floor_div(a, b, expected):
    assert floor_div(a, b) == expected


def test_floor_mod_never_negative():
    assert floor_mod(-1, 32) == 31
    assert floor_mod(-32, 32) == 0
    assert floor_mod(-33, 32) == 31
    assert floor_mod(33, 32) == 1


# ============================================================
# 2. resolve 场景
# ============================================================
@pytest.mark.parametrize(
    "world, chunk, region, local",
    [
        (0, 0, 0, 0),
        (-1, -1, -1, 31),
        (15, 0, 0, 0),
        (16, 1, 0, 1),
        (-16, -1, -1, 31),
        (-17, -2, -1, 30),
        (511, 31, 0, 31),
        (512, 32, 1, 0),
        (-512, -32, -1, 0),
        (-513, -33, -2, 31),
    ],
)
def test_resolve_axis(world, chunk, region, local):
    pos = CoordinateResolver().resolve(world, world)

    assert (pos.chunk_x, pos.chunk_y) == (chunk, chunk)
    assert (pos.region_x, pos.region_y) == (region, region)
    assert (pos.local_x, pos.local_y) == (local, local)


def test_resolve_origin():
    pos = CoordinateResolver().resolve(0, 0)
    assert (pos.chunk_x, pos.chunk_y, pos.region_x, pos.region_y) == (0, 0, 0, 0)
    assert (pos.local_x, pos.local_y) == (0, 0)
    assert pos.index == 0


def test_resolve_minus_one():
    pos = CoordinateResolver().resolve(-1, -1)
    assert (pos.chunk_x, pos.chunk_y) == (-1, -1)
    assert (pos.region_x, pos.region_y) == (-1, -1)
    assert (pos.local_x, pos.local_y) == (31, 31)
    assert pos.index == 1023


def test_resolve_axes_independent():
    pos = CoordinateResolver().resolve(20, -20)
    assert (pos.local_x, pos.local_y) == (1, 30)
    assert pos.index == 30 * 32 + 1


def test_resolve_int64_extremes():
    lo = CoordinateResolver().resolve(INT64_MIN, INT64_MAX)

    assert lo.chunk_x == -(2 ** 59)
    assert lo.region_x == -(2 ** 54)
    assert lo.local_x == 0

    assert lo.chunk_y == 2 ** 59 - 1
    assert lo.region_y == 2 ** 54 - 1
    assert lo.local_y == 31


def test_local_always_in_range():
    rng = random.Random(1234)
    resolver = CoordinateResolver()

    for _ in range(2000):
        x = rng.randint(INT64_MIN, INT64_MAX)
        y = rng.randint(-5000, 5000)
        pos = resolver.resolve(x, y)

        for world, chunk, region, local in (
                (x, pos.chunk_x, pos.region_x, pos.local_x),
                (y, pos.chunk_y, pos.region_y, pos.local_y),
        ):
            assert 0 <= local < 32
            assert region * 32 + local == chunk
            assert chunk * 16 <= world < chunk * 16 + 16
