"""
Core engine: relativistic frame transformation and worldline state.

This layer knows NOTHING about pixels, canvases or timers.
It only knows:
- The Lorentz boost and relativistic velocity composition (c = 1)
- Worldlines: append-only, piecewise-inertial histories
- Proper time accumulated along a worldline (memoized per worldline)
- Mapping stationary-frame instants into an observer's frame
- Advancing an immutable SimulationState by one tick
"""

from minkowski.core.lorentz import boost, compose_velocity, lorentz_factor, check_velocity
from minkowski.core.worldline import Instant, Worldline
from minkowski.core.proper_time import proper_time_at, proper_time_at_time
from minkowski.core.frame import TransformedInstant, to_observer_frame, transform_from_origin
from minkowski.core.particle import Particle, create_particle
from minkowski.core.simulation import (
    SimulationConfig,
    SimulationState,
    VelocityChange,
    TrailPoint,
    ParticlePosition,
    RenderModel,
    create_state,
    enqueue_velocity_change,
    with_observer,
    advance,
    visible_instant,
)
from minkowski.core.scheduler import Scheduler

__all__ = [
    "boost",
    "compose_velocity",
    "lorentz_factor",
    "check_velocity",
    "Instant",
    "Worldline",
    "proper_time_at",
    "proper_time_at_time",
    "TransformedInstant",
    "to_observer_frame",
    "transform_from_origin",
    "Particle",
    "create_particle",
    "SimulationConfig",
    "SimulationState",
    "VelocityChange",
    "TrailPoint",
    "ParticlePosition",
    "RenderModel",
    "create_state",
    "enqueue_velocity_change",
    "with_observer",
    "advance",
    "visible_instant",
    "Scheduler",
]
