"""
Particle: a worldline plus the identity the renderer reconciles on.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable

from minkowski.core.worldline import Instant, Worldline


@dataclass(frozen=True)
class Particle:
    """A point particle. `id` is stable across ticks and unique per simulation."""

    id: Hashable
    worldline: Worldline

    def with_worldline(self, worldline: Worldline) -> "Particle":
        """Same particle, different (usually extended) worldline."""
        return Particle(id=self.id, worldline=worldline)


def create_particle(
    particle_id: Hashable,
    initial_position: float,
    initial_velocity: float,
    time: float = 0.0,
    proper_time: float = 0.0,
) -> Particle:
    """
    Convenience factory for a particle with a single-instant worldline.

    Args:
        particle_id: Unique identifier
        initial_position: Position at `time` in the stationary frame
        initial_velocity: Velocity of the first segment (|v| < 1)
        time: Stationary-frame time of the first instant
        proper_time: Clock reading at the first instant

    Note:
        The velocity is not validated here. A particle with |v| >= 1 is
        reported and skipped by the simulation each tick instead.
    """
    instant = Instant(
        position=float(initial_position),
        time=float(time),
        velocity=float(initial_velocity),
        proper_time=float(proper_time),
    )
    return Particle(id=particle_id, worldline=Worldline(particle_id, [instant]))
