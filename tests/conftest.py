"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def rest_observer():
    """Observer at rest at the origin."""
    from minkowski.core import create_particle
    return create_particle("observer", initial_position=0.0, initial_velocity=0.0)


@pytest.fixture
def mover():
    """Particle leaving the origin at v = 0.5."""
    from minkowski.core import create_particle
    return create_particle("mover", initial_position=0.0, initial_velocity=0.5)


@pytest.fixture
def simple_state(rest_observer, mover):
    """Two-particle state viewed from the resting observer."""
    from minkowski.core import create_state
    return create_state([rest_observer, mover], observer_id="observer")
