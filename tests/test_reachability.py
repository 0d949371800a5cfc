import math

import pytest

from endless_runner.config import GRAVITY, HORIZONTAL_LEEWAY
from endless_runner.reachability import apex_height, horizontal_distance_with_vy_max
from endless_runner.rng import SeededRandom


def test_apex_height():
    assert apex_height(0, 10) == 3.397893306150187
    assert apex_height(2.0, 10) == pytest.approx(2.0 + 100 / (2 * GRAVITY))


def test_target_above_apex_is_clamped_exactly():
    rng = SeededRandom(12345678)
    reach = horizontal_distance_with_vy_max(8, 10, 0, 100, rng)
    assert reach.adjusted_y1 == apex_height(0, 10)
    assert reach.distance == 4.436629289840299


def test_target_at_apex_only_rises():
    rng = SeededRandom(1)
    top = apex_height(1.5, 9.5)
    reach = horizontal_distance_with_vy_max(8, 9.5, 1.5, top, rng)
    assert reach.adjusted_y1 == top
    assert reach.distance == pytest.approx(8 * 9.5 / GRAVITY - HORIZONTAL_LEEWAY)


def test_ascending_target_uses_rise_and_fall_without_drawing():
    rng = SeededRandom(12345678)
    reach = horizontal_distance_with_vy_max(8, 10, 0, 2, rng)
    assert reach.adjusted_y1 == 2
    assert reach.distance == 7.923708914348532
    assert rng.seed == 12345678


def test_descending_target_draws_once_and_discounts_the_drop():
    rng = SeededRandom(42)
    expected_rnd = SeededRandom(42).random()

    reach = horizontal_distance_with_vy_max(8, 10, 2, -4, rng)

    top = apex_height(2, 10)
    time = 10 / GRAVITY + math.sqrt(2 * (top - -4 * expected_rnd * 0.9) / GRAVITY)
    assert reach.adjusted_y1 == -4
    assert reach.distance == pytest.approx(8 * time - HORIZONTAL_LEEWAY)
    assert rng.seed == SeededRandom(42).next_seed()


def test_distance_can_be_negative():
    rng = SeededRandom(7)
    reach = horizontal_distance_with_vy_max(0.1, 1.0, 0, 0, rng)
    assert reach.distance < 0


def test_faster_treadmill_reaches_further():
    slow = horizontal_distance_with_vy_max(8, 10, 0, 1, SeededRandom(1))
    fast = horizontal_distance_with_vy_max(12, 10, 0, 1, SeededRandom(1))
    assert fast.distance > slow.distance


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_low_start_with_small_roll_does_not_fall_below_zero():
    # apex from y0=-8 is about -4.94, the discounted drop stays above it
    reach = horizontal_distance_with_vy_max(8, 9.5, -8.0, -8.5, FixedRoll(0.01))

    assert reach.adjusted_y1 == -8.5
    assert reach.distance == pytest.approx(8 * 9.5 / GRAVITY - HORIZONTAL_LEEWAY)
    assert math.isfinite(reach.distance)
