"""
Lorentz kernel: the only place where relativity is actually computed.

Natural units throughout (speed of light c = 1), one spatial dimension.

    γ   = 1 / sqrt(1 - v²)
    dx' = γ·(dx - v·dt)
    dt' = γ·(dt - v·dx)

Everything here is a pure function of its arguments. A velocity outside
the open interval (-1, 1) raises InvalidVelocity instead of leaking
NaN or infinity into the rest of the engine.
"""

from __future__ import annotations

import numpy as np

from minkowski.errors import InvalidVelocity


def check_velocity(v: float) -> float:
    """
    Validate a velocity and return it as a plain float.

    Raises:
        InvalidVelocity: if v is not finite or |v| >= 1
    """
    try:
        value = float(v)
    except (TypeError, ValueError) as exc:
        raise InvalidVelocity(v) from exc
    if not np.isfinite(value) or abs(value) >= 1.0:
        raise InvalidVelocity(v)
    return value


def lorentz_factor(v: float) -> float:
    """γ(v) = 1 / sqrt(1 - v²)."""
    v = check_velocity(v)
    return float(1.0 / np.sqrt(1.0 - v * v))


def boost(dx: float, dt: float, v: float) -> tuple[float, float]:
    """
    Boost a spacetime displacement into a frame moving at velocity v.

    Args:
        dx: Spatial displacement in the original frame
        dt: Temporal displacement in the original frame
        v: Velocity of the target frame relative to the original, |v| < 1

    Returns:
        (dx', dt') in the target frame
    """
    gamma = lorentz_factor(v)
    dx_prime = gamma * (dx - v * dt)
    dt_prime = gamma * (dt - v * dx)
    return float(dx_prime), float(dt_prime)


def compose_velocity(v1: float, v2: float) -> float:
    """
    Velocity of a body moving at v1, seen from a frame moving at v2.

        v' = (v1 - v2) / (1 - v1·v2)

    For valid inputs the denominator is strictly positive; anything else
    is reported as InvalidVelocity rather than clamped.
    """
    v1 = check_velocity(v1)
    v2 = check_velocity(v2)
    denominator = 1.0 - v1 * v2
    if denominator <= 0.0:
        raise InvalidVelocity(
            (v1, v2), f"velocity composition diverges for v1={v1!r}, v2={v2!r}"
        )
    return (v1 - v2) / denominator
