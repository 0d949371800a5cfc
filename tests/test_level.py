import math

import pytest

from endless_runner.config import PLATFORM_DEPTH
from endless_runner.errors import MalformedLevelError
from endless_runner.level import Level, Platform, PlatformBody, PlatformChunk, generate_chunk
from endless_runner.reachability import apex_height
from endless_runner.rng import SeededRandom

GOLDEN_PLATFORMS = [
    (18.915734184166137, 13.501872717635706, 3.0665987088005435),
    (36.75205006273392, 12.063992487033829, 6.042426088824868),
    (61.41756335422445, 7.803087301785126, -5.520854126662016),
    (72.95631122966877, 6.944812798406929, -2.4542554178614724),
    (84.42487239966815, 7.6627138908952475, 0.6123432909390711),
]


def test_starting_level():
    level = Level.starting()
    assert len(level.chunks) == 1
    assert level.last_platform() == Platform(3.0, 10.0, 0.0)
    assert level.last_chunk().median_position == 3.0


def test_golden_chunk():
    rng = SeededRandom(12345678)
    chunk = generate_chunk(Level.starting(), current_speed=8, height_radius=10,
                           jump_velocity=9.5, count=5, rng=rng)

    assert [(p.position, p.width, p.height) for p in chunk.platforms] == GOLDEN_PLATFORMS
    assert chunk.median_position == 54.89330624609229
    assert rng.seed == 2368843479


def test_generation_does_not_touch_the_level():
    level = Level.starting()
    generate_chunk(level, 8, 10, 9.5, 5, SeededRandom(1))
    assert len(level.chunks) == 1


@pytest.mark.parametrize("seed", [1, 2, 3, 12345678, 0xFFFFFFFF])
def test_positions_strictly_increase(seed):
    level = Level.starting()
    rng = SeededRandom(seed)
    for speed in (8, 9, 12):
        chunk = generate_chunk(level, speed, 10, 9.5, 5, rng)
        positions = [p.position for p in chunk.platforms]
        assert positions == sorted(positions)
        assert len(set(positions)) == len(positions)
        level.append(chunk)


@pytest.mark.parametrize("seed", range(10))
def test_heights_stay_in_band_and_under_the_apex(seed):
    level = Level.starting()
    rng = SeededRandom(seed)
    for _ in range(4):
        previous = level.last_platform()
        chunk = generate_chunk(level, 8, 10, 9.5, 5, rng)
        for platform in chunk.platforms:
            assert -9 <= platform.height <= 9
            assert platform.height <= apex_height(previous.height, 9.5) + 1e-9
            assert 6 <= platform.width < 15
            previous = platform
        level.append(chunk)


def test_median_divisor_is_fixed():
    rng = SeededRandom(77)
    chunk = generate_chunk(Level.starting(), 8, 10, 9.5, 3, rng)
    assert len(chunk.platforms) == 3
    assert chunk.median_position == pytest.approx(sum(p.position for p in chunk.platforms) / 5)


def test_empty_level_is_malformed():
    with pytest.raises(MalformedLevelError):
        generate_chunk(Level(), 8, 10, 9.5, 5, SeededRandom(1))


def test_empty_last_chunk_is_malformed():
    level = Level([PlatformChunk(0.0, ())])
    with pytest.raises(MalformedLevelError):
        generate_chunk(level, 8, 10, 9.5, 5, SeededRandom(1))


def test_append_rejects_backward_chunk():
    level = Level.starting()
    backwards = PlatformChunk(1.0, (Platform(1.0, 6.0, 0.0),))
    with pytest.raises(MalformedLevelError):
        level.append(backwards)
    assert len(level.chunks) == 1


def test_append_rejects_empty_chunk():
    with pytest.raises(MalformedLevelError):
        Level.starting().append(PlatformChunk(10.0, ()))


def test_platform_is_immutable():
    platform = Platform(3.0, 10.0, 0.0)
    with pytest.raises(AttributeError):
        platform.position = 4.0
    assert platform.right_edge == 8.0


def test_platform_body_bounds():
    body = PlatformBody(Platform(3.0, 10.0, 2.0), x=-1.0)
    box = body.bounds()
    assert box.max.y == pytest.approx(2.0)
    assert box.min.y == pytest.approx(-PLATFORM_DEPTH)
    assert box.min.x == pytest.approx(-6.0)
    assert box.max.x == pytest.approx(4.0)
    assert body.right_edge == pytest.approx(4.0)


@pytest.mark.parametrize("seed", list(range(50)) + [12345678, 0xFFFFFFFF])
def test_long_runs_keep_generating(seed):
    level = Level.starting()
    rng = SeededRandom(seed)
    speed = 8.0
    for _ in range(25):
        chunk = generate_chunk(level, speed, 10, 9.5, 5, rng)
        assert all(math.isfinite(p.position) for p in chunk.platforms)
        level.append(chunk)
        speed += 0.5
    assert len(level.chunks) == 26
