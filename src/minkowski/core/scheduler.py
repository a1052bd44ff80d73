"""
Scheduler: holds the current snapshot and drives ticks.

The state machine itself is pure. Something still has to own "the
current state" between timer callbacks, collect UI requests, and hand
the latest render model to whoever draws it. That is this class.

Single writer: only `step()` replaces the snapshot. UI code may queue
velocity changes or switch observers between ticks; they take effect
(and are validated) on the next step.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Hashable
import logging

from minkowski.core.simulation import (
    RenderModel,
    SimulationState,
    advance,
    enqueue_velocity_change,
    with_observer,
)

logger = logging.getLogger(__name__)


@dataclass
class Scheduler:
    """Owns the current SimulationState and advances it one tick at a time."""

    state: SimulationState
    render_model: RenderModel | None = field(default=None, init=False)

    # Counters across the scheduler's lifetime
    ticks: int = field(default=0, init=False)
    rejected_events: int = field(default=0, init=False)
    skipped_particles: int = field(default=0, init=False)

    @property
    def global_tick(self) -> float:
        return self.state.global_tick

    def enqueue_velocity_change(self, particle_id: Hashable, new_velocity: float) -> None:
        """Queue a velocity change for the next tick."""
        self.state = enqueue_velocity_change(self.state, particle_id, new_velocity)

    def select_observer(self, observer_id: Hashable) -> None:
        """View the simulation from another particle's frame from the next tick on."""
        self.state = with_observer(self.state, observer_id)

    def step(self, dt: float | None = None) -> RenderModel:
        """
        Advance one tick.

        Args:
            dt: Simulated time for this tick (config.default_dt if None)

        Returns:
            The render model for the new tick
        """
        if dt is None:
            dt = self.state.config.default_dt

        self.state, self.render_model = advance(self.state, dt)

        self.ticks += 1
        self.rejected_events += len(self.render_model.rejected_events)
        self.skipped_particles += len(self.render_model.skipped)
        return self.render_model

    def run(self, n_ticks: int, dt: float | None = None) -> dict:
        """Run n_ticks ticks and return summary statistics."""
        rejected_before = self.rejected_events
        skipped_before = self.skipped_particles

        for _ in range(n_ticks):
            self.step(dt)

        logger.debug(f"Ran {n_ticks} ticks, now at t={self.global_tick:g}")

        return {
            "n_ticks": n_ticks,
            "global_tick": self.global_tick,
            "total_ticks": self.ticks,
            "rejected_events": self.rejected_events - rejected_before,
            "skipped_particles": self.skipped_particles - skipped_before,
            "n_particles": len(self.state.particles),
        }
