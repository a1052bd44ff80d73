"""
Proper-time oracle: what a particle's own clock reads at each instant.

Between two consecutive instants the particle moves uniformly with the
velocity of the earlier one, so the clock advances by the time component
of the displacement boosted into that segment's rest frame:

    τ[0] = instants[0].proper_time
    τ[k] = τ[k-1] + boost(x[k] - x[k-1], t[k] - t[k-1], v[k-1]).dt

Worldlines are append-only, so τ[k] depends only on a prefix that never
changes. Values are memoized in the worldline's own cache and never
invalidated.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from minkowski.errors import InvalidIndex
from minkowski.core.lorentz import boost, check_velocity

if TYPE_CHECKING:
    from minkowski.core.worldline import Worldline


def proper_time_at(worldline: "Worldline", index: int) -> float:
    """
    Proper time elapsed along `worldline` up to instant `index`.

    Raises:
        InvalidIndex: if index is not an integer in [0, len(worldline))
        InvalidVelocity: if a segment before `index` has |v| >= 1
    """
    n = len(worldline)
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise InvalidIndex(index, n)
    index = int(index)
    if index < 0 or index >= n:
        raise InvalidIndex(index, n)

    cache = worldline.proper_time_cache
    if index in cache:
        return cache[index]

    # Walk forward from the highest contiguous cached entry
    k = index
    while k > 0 and k not in cache:
        k -= 1
    if k not in cache:
        cache[0] = float(worldline.recorded(0).proper_time)

    tau = cache[k]
    for i in range(k + 1, index + 1):
        prev, cur = worldline.recorded(i - 1), worldline.recorded(i)
        _, dtau = boost(cur.position - prev.position, cur.time - prev.time, prev.velocity)
        tau += dtau
        cache[i] = tau

    return tau


def proper_time_at_time(worldline: "Worldline", time: float) -> float:
    """
    Clock reading at an arbitrary stationary-frame time.

    Uses the segment in effect at `time` and advances its starting
    reading by (time - t_k)·sqrt(1 - v_k²).
    """
    index = worldline.index_at_or_before(time)
    instant = worldline.recorded(index)
    v = check_velocity(instant.velocity)
    return proper_time_at(worldline, index) + (time - instant.time) * float(np.sqrt(1.0 - v * v))
