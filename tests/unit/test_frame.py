"""Unit tests for the observer frame transform."""

import math

import pytest

from minkowski.core.frame import TransformedInstant, to_observer_frame, transform_from_origin
from minkowski.core.worldline import Instant, Worldline
from minkowski.errors import InvalidVelocity


class TestToObserverFrame:
    """Tests for to_observer_frame()."""

    def test_observer_at_rest_at_origin_is_identity(self):
        observer = Worldline("o", [Instant(0.0, 0.0, 0.0)])
        result = to_observer_frame(Instant(0.7, 1.5, 0.3, proper_time=1.2), observer, 1.0)
        assert result == TransformedInstant(position=0.7, time=1.5, velocity=0.3, proper_time=1.2)

    def test_particle_seen_from_own_instant(self):
        """A worldline transformed against itself sits at the origin."""
        w = Worldline("a", [Instant(0.0, 0.0, 0.0)])
        result = to_observer_frame(w[0], w, 1.0)
        assert result.position == 0.0
        assert result.time == 0.0
        assert result.velocity == 0.0

    @pytest.mark.parametrize("v", [-0.9, -0.3, 0.0, 0.4, 0.95])
    def test_origin_maps_to_exact_zero(self, v):
        origin = Instant(position=0.123456789, time=7.654321, velocity=v)
        observer = Worldline("o", [Instant(-1.0, 0.0, 0.1), origin])
        result = to_observer_frame(origin, observer, 10.0)
        assert result.position == 0.0
        assert result.time == 0.0
        assert result.velocity == 0.0

    def test_jump_between_rest_instants(self):
        # Particle at rest at x = 0.2, then at x = 10 from t = 0.2
        particle = Worldline("p", [Instant(0.2, 0.0, 0.0), Instant(10.0, 0.2, 0.0)])
        observer = Worldline("o", [Instant(0.0, 0.0, 0.0)])

        result = to_observer_frame(particle.resolve(1), observer, 0.2)

        assert result.position == pytest.approx(10.0)
        assert result.time == pytest.approx(0.2)
        assert result.velocity == 0.0

    def test_opposing_velocities_match_lorentz_formulas(self):
        # Particle at v = 0.2 from the origin; observer at v = -0.2 from x = -0.2
        particle = Instant(0.0, 0.0, 0.2)
        observer = Worldline("o", [Instant(-0.2, 0.0, -0.2)])

        result = to_observer_frame(particle, observer, 0.0)

        gamma = 1.0 / math.sqrt(1.0 - 0.04)
        dx, dt, v = 0.2, 0.0, -0.2
        assert result.position == pytest.approx(gamma * (dx - v * dt), abs=1e-9)
        assert result.time == pytest.approx(gamma * (dt - v * dx), abs=1e-9)
        assert result.velocity == pytest.approx(0.4 / 1.04, abs=1e-9)

    def test_proper_time_is_carried_through(self):
        observer = Worldline("o", [Instant(0.0, 0.0, 0.8)])
        result = to_observer_frame(Instant(1.0, 2.0, -0.5, proper_time=3.75), observer, 0.0)
        assert result.proper_time == 3.75

    def test_observer_time_selects_segment(self):
        observer = Worldline("o", [Instant(0.0, 0.0, 0.0), Instant(0.0, 1.0, 0.5)])
        particle = Instant(0.0, 1.0, 0.0)

        before = to_observer_frame(particle, observer, 0.5)
        after = to_observer_frame(particle, observer, 1.5)

        assert before.velocity == 0.0
        assert before.time == pytest.approx(1.0)
        assert after.velocity == pytest.approx(-0.5)
        assert after.time == 0.0

    def test_observer_faster_than_light_raises(self):
        observer = Worldline("o", [Instant(0.0, 0.0, 1.0)])
        with pytest.raises(InvalidVelocity):
            to_observer_frame(Instant(0.0, 1.0, 0.0), observer, 0.0)

    def test_particle_faster_than_light_raises(self):
        observer = Worldline("o", [Instant(0.0, 0.0, 0.0)])
        with pytest.raises(InvalidVelocity):
            to_observer_frame(Instant(0.0, 1.0, -1.0), observer, 0.0)


class TestTransformFromOrigin:
    """Tests for transforming against a resolved origin."""

    def test_matches_to_observer_frame(self):
        origin = Instant(0.5, 1.0, 0.3)
        observer = Worldline("o", [origin])
        instant = Instant(2.0, 3.0, -0.1, proper_time=0.9)
        assert transform_from_origin(instant, origin) == to_observer_frame(instant, observer, 5.0)

    def test_simultaneity_is_relative(self):
        # Two events simultaneous at rest are not simultaneous for a moving observer
        origin = Instant(0.0, 0.0, 0.5)
        left = transform_from_origin(Instant(-1.0, 0.0), origin)
        right = transform_from_origin(Instant(1.0, 0.0), origin)
        assert left.time > 0.0 > right.time
