"""Unit tests for the proper-time oracle."""

import numpy as np
import pytest

from minkowski.core.proper_time import proper_time_at, proper_time_at_time
from minkowski.core.worldline import Instant, Worldline
from minkowski.errors import InvalidIndex, InvalidVelocity


def piecewise_worldline(velocities, duration=1.0, start_tau=0.0):
    """Consistent worldline: each segment lasts `duration` at the given velocity."""
    x, t = 0.0, 0.0
    instants = [Instant(x, t, velocities[0], proper_time=start_tau)]
    for prev_v, v in zip(velocities, velocities[1:]):
        x += prev_v * duration
        t += duration
        instants.append(Instant(x, t, v))
    return Worldline("w", instants)


class TestProperTimeAt:
    """Tests for proper_time_at(worldline, index)."""

    def test_base_is_stored_value(self):
        w = piecewise_worldline([0.3], start_tau=2.5)
        assert proper_time_at(w, 0) == 2.5

    def test_single_segment(self):
        # γ(0.6) = 1.25, so one unit of coordinate time is 0.8 of proper time
        w = piecewise_worldline([0.6, 0.0])
        assert proper_time_at(w, 1) == pytest.approx(0.8)

    def test_at_rest_matches_coordinate_time(self):
        w = piecewise_worldline([0.0, 0.0, 0.0], duration=0.5)
        assert proper_time_at(w, 2) == pytest.approx(1.0)

    def test_twin_paradox(self):
        w = piecewise_worldline([0.6, -0.6, 0.0], duration=2.0)
        assert w[2].position == pytest.approx(0.0)
        assert proper_time_at(w, 2) == pytest.approx(3.2)

    def test_monotonically_non_decreasing(self):
        rng = np.random.default_rng(seed=42)
        velocities = list(rng.uniform(-0.95, 0.95, size=50))
        w = piecewise_worldline(velocities, duration=0.3)

        taus = [proper_time_at(w, i) for i in range(len(w))]
        assert all(b >= a for a, b in zip(taus, taus[1:]))

    def test_jump_uses_boosted_time_component(self):
        # Displacement (9.8, 0.2) boosted by v = 0 keeps dt = 0.2
        w = Worldline("w", [Instant(0.2, 0.0, 0.0), Instant(10.0, 0.2, 0.0)])
        assert proper_time_at(w, 1) == pytest.approx(0.2)

    def test_method_delegates(self):
        w = piecewise_worldline([0.6, 0.0])
        assert w.proper_time_at(1) == proper_time_at(w, 1)

    def test_numpy_integer_index(self):
        w = piecewise_worldline([0.6, 0.0])
        assert proper_time_at(w, np.int64(1)) == pytest.approx(0.8)


class TestMemoization:
    """Tests for the per-worldline cache."""

    def test_cache_filled_for_prefix(self):
        w = piecewise_worldline([0.1, 0.2, 0.3, 0.4])
        proper_time_at(w, 3)
        assert set(w.proper_time_cache) == {0, 1, 2, 3}

    def test_cached_values_are_not_recomputed(self):
        w = piecewise_worldline([0.1, 0.2, 0.3])
        proper_time_at(w, 1)
        w.proper_time_cache[1] = 42.0

        assert proper_time_at(w, 1) == 42.0
        # Later indices build on the cached prefix
        assert proper_time_at(w, 2) > 42.0

    def test_append_extends_without_touching_prefix(self):
        w = piecewise_worldline([0.6, 0.0])
        before = proper_time_at(w, 1)

        w.append(Instant(0.6, 3.0, 0.0))

        assert proper_time_at(w, 1) == before
        assert proper_time_at(w, 2) == pytest.approx(before + 2.0)

    def test_long_worldline_has_no_recursion_limit(self):
        w = piecewise_worldline([0.5] * 5000, duration=0.01)
        expected = 4999 * 0.01 * np.sqrt(1 - 0.25)
        assert proper_time_at(w, 4999) == pytest.approx(expected)


class TestInvalidIndex:
    """Tests for out-of-range queries."""

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_out_of_range(self, index):
        w = piecewise_worldline([0.1, 0.2])
        with pytest.raises(InvalidIndex):
            proper_time_at(w, index)

    @pytest.mark.parametrize("index", [0.5, "0", None, True])
    def test_non_integer(self, index):
        w = piecewise_worldline([0.1, 0.2])
        with pytest.raises(InvalidIndex):
            proper_time_at(w, index)

    def test_is_index_error(self):
        w = piecewise_worldline([0.1])
        with pytest.raises(IndexError):
            proper_time_at(w, 5)

    def test_invalid_segment_velocity_propagates(self):
        w = Worldline("w", [Instant(0.0, 0.0, 1.5), Instant(1.5, 1.0, 0.0)])
        with pytest.raises(InvalidVelocity):
            proper_time_at(w, 1)


class TestProperTimeAtTime:
    """Tests for clock readings between instants."""

    def test_inside_segment(self):
        w = piecewise_worldline([0.6, 0.0])
        assert proper_time_at_time(w, 0.5) == pytest.approx(0.4)
        assert proper_time_at_time(w, 2.0) == pytest.approx(1.8)

    def test_at_instant_matches_oracle(self):
        w = piecewise_worldline([0.6, -0.6, 0.0], duration=2.0)
        assert proper_time_at_time(w, 4.0) == pytest.approx(proper_time_at(w, 2))
