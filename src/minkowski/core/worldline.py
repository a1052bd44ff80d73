"""
Worldline: one particle's piecewise-inertial history in the stationary frame.

A worldline is an append-only sequence of instants. Each instant starts a
segment of uniform motion that lasts until the next instant. Because
instants are never edited or removed, anything derived from a prefix of
the worldline (proper time in particular) can be cached forever.
"""

from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass, replace
from typing import Hashable, Iterator

import numpy as np

from minkowski.errors import NonFiniteValue, OutOfOrderInstant
from minkowski.core.proper_time import proper_time_at


@dataclass(frozen=True)
class Instant:
    """A point on a worldline, in the stationary frame."""

    position: float
    time: float
    velocity: float = 0.0  # Velocity of the segment beginning here
    proper_time: float = 0.0  # Clock reading; the worldline recomputes it after index 0


class Worldline:
    """
    Ordered, append-only sequence of instants.

    Only the first instant's proper_time is taken as given. Later clock
    readings are derived by the proper-time oracle and memoized in
    `proper_time_cache` (index → τ). Indexing, iteration, `instants`,
    `last` and `instant_at_or_before` all return instants with the oracle's
    proper_time filled in; `recorded()` gives the instant as appended.
    """

    def __init__(self, worldline_id: Hashable, instants: list[Instant] | None = None):
        self.id = worldline_id
        self._instants: list[Instant] = []
        self._times: list[float] = []
        self.proper_time_cache: dict[int, float] = {}
        for instant in instants or ():
            self.append(instant)

    def __len__(self) -> int:
        return len(self._instants)

    def __getitem__(self, index: int) -> Instant:
        if index < 0:
            index += len(self._instants)
        return self.resolve(index)

    def __iter__(self) -> Iterator[Instant]:
        return (self.resolve(i) for i in range(len(self._instants)))

    def __repr__(self) -> str:
        return f"Worldline(id={self.id!r}, instants={len(self)})"

    @property
    def instants(self) -> tuple[Instant, ...]:
        """All instants, with proper times resolved."""
        return tuple(self)

    @property
    def last(self) -> Instant:
        """Most recently appended instant, with its proper time resolved."""
        return self[-1]

    def recorded(self, index: int) -> Instant:
        """The instant at `index` exactly as it was appended."""
        return self._instants[index]

    def append(self, instant: Instant) -> None:
        """
        Append an instant.

        Raises:
            NonFiniteValue: if position, time or proper_time is NaN or infinite
            OutOfOrderInstant: if instant.time is earlier than the last instant's
                time.
        The worldline is left unchanged when either is raised.
        """
        for name in ("position", "time", "proper_time"):
            value = getattr(instant, name)
            if not np.isfinite(value):
                raise NonFiniteValue(name, value)
        if self._instants and instant.time < self._instants[-1].time:
            raise OutOfOrderInstant(instant.time, self._instants[-1].time)
        self._instants.append(instant)
        self._times.append(instant.time)

    def index_at_or_before(self, time: float) -> int:
        """
        Index of the last instant with instant.time <= time.

        Equal times resolve to the later index. A query before the first
        instant clamps to index 0.
        """
        if not self._instants:
            raise IndexError("worldline has no instants")
        return max(bisect_right(self._times, time) - 1, 0)

    def instant_at_or_before(self, time: float) -> Instant:
        """The instant whose segment is in effect at `time` (see index_at_or_before)."""
        return self.resolve(self.index_at_or_before(time))

    def proper_time_at(self, index: int) -> float:
        """Proper time elapsed up to instant `index` (memoized)."""
        return proper_time_at(self, index)

    def resolve(self, index: int) -> Instant:
        """The instant at `index` with its proper_time filled in."""
        tau = proper_time_at(self, index)
        instant = self._instants[index]
        if instant.proper_time == tau:
            return instant
        return replace(instant, proper_time=tau)

    def extrapolate(self, time: float) -> Instant:
        """
        Where the last segment puts the particle at `time`.

        This is the instant a velocity change at `time` starts from; its
        velocity is still the old one.
        """
        last = self._instants[-1]
        position = last.position + last.velocity * (time - last.time)
        return Instant(position=position, time=time, velocity=last.velocity)

    def copy(self) -> "Worldline":
        """Independent worldline sharing the same instants and cached proper times."""
        clone = Worldline(self.id)
        clone._instants = list(self._instants)
        clone._times = list(self._times)
        clone.proper_time_cache = dict(self.proper_time_cache)
        return clone
