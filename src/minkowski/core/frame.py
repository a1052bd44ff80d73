"""
Frame transform: map stationary-frame instants into an observer's frame.

The observer's frame at a given time is the local inertial frame of the
observer's current segment:
- origin  = the observer instant at or before that time (position, time)
- boost   = that instant's velocity

Every visual effect (time dilation, relativity of simultaneity, length
contraction of apparent positions) comes out of this one mapping, so it
uses the kernel formulas directly with no approximation.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from minkowski.core.lorentz import boost, compose_velocity

if TYPE_CHECKING:
    from minkowski.core.worldline import Instant, Worldline


@dataclass(frozen=True)
class TransformedInstant:
    """An instant expressed in the observer's frame."""

    position: float  # x' relative to the observer origin
    time: float  # t' relative to the observer origin
    velocity: float  # v' seen by the observer
    proper_time: float  # Frame-invariant, carried through unchanged


def transform_from_origin(instant: "Instant", origin: "Instant") -> TransformedInstant:
    """
    Transform `instant` into the frame anchored at `origin`.

    Transforming the origin itself gives exactly (0, 0): the displacement
    is an exact zero before boosting.
    """
    dx = instant.position - origin.position
    dt = instant.time - origin.time
    x_prime, t_prime = boost(dx, dt, origin.velocity)
    v_prime = compose_velocity(instant.velocity, origin.velocity)
    return TransformedInstant(
        position=x_prime,
        time=t_prime,
        velocity=v_prime,
        proper_time=instant.proper_time,
    )


def to_observer_frame(
    instant: "Instant",
    observer_worldline: "Worldline",
    observer_time: float,
) -> TransformedInstant:
    """
    Transform `instant` into the observer's frame at `observer_time`.

    Args:
        instant: Instant in the stationary frame
        observer_worldline: Worldline whose current segment defines the frame
        observer_time: Stationary-frame time selecting the observer's segment

    Returns:
        TransformedInstant with position, time and velocity in the observer
        frame and the instant's proper time unchanged
    """
    index = observer_worldline.index_at_or_before(observer_time)
    origin = observer_worldline.recorded(index)
    return transform_from_origin(instant, origin)
