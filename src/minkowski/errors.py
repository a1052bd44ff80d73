"""
Error taxonomy for the spacetime engine.

Each error also derives from the closest builtin, so callers that only
catch ValueError or LookupError keep working.
"""

from __future__ import annotations
from typing import Any


class MinkowskiError(Exception):
    """Base class for all engine errors."""


class InvalidVelocity(MinkowskiError, ValueError):
    """A velocity with |v| >= 1 (or a non-finite one) reached the kernel."""

    def __init__(self, velocity: Any, message: str | None = None):
        self.velocity = velocity
        super().__init__(message or f"velocity must satisfy |v| < 1, got {velocity!r}")


class OutOfOrderInstant(MinkowskiError, ValueError):
    """An append would make worldline time decrease."""

    def __init__(self, time: float, last_time: float):
        self.time = time
        self.last_time = last_time
        super().__init__(
            f"instant at t={time!r} precedes last instant at t={last_time!r}"
        )


class InvalidIndex(MinkowskiError, IndexError):
    """Proper-time query outside the worldline."""

    def __init__(self, index: Any, length: int):
        self.index = index
        self.length = length
        super().__init__(f"index {index!r} out of range for worldline of length {length}")


class UnknownParticle(MinkowskiError, LookupError):
    """An event or query names a particle that does not exist."""

    kind = "particle"

    def __init__(self, particle_id: Any):
        self.particle_id = particle_id
        super().__init__(f"unknown {self.kind}: {particle_id!r}")


class UnknownObserver(UnknownParticle):
    """The observer id does not name any particle."""

    kind = "observer"


class MalformedEvent(MinkowskiError, ValueError):
    """A queued event that cannot be applied. Dropped during drain, never fatal."""

    def __init__(self, event: Any, reason: str):
        self.event = event
        self.reason = reason
        super().__init__(f"dropped {event!r}: {reason}")


class NonFiniteValue(MinkowskiError, ValueError):
    """A coordinate or clock reading that is NaN or infinite."""

    def __init__(self, name: str, value: Any):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be finite, got {value!r}")
