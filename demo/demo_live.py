#!/usr/bin/env python3
"""
Demo: Live observer-frame animation

Opens a window that ticks every 40 ms. Three particles drift at
different speeds; every second of simulated time the observer's
velocity flips, so the whole picture re-boosts around it.

Close the window to stop.
"""

import matplotlib.pyplot as plt

from minkowski.core import Scheduler, create_particle, create_state
from minkowski.logging_config import setup_logging
from minkowski.viz import AnimationConfig, animate


class FlippingScheduler(Scheduler):
    """Scheduler that flips the observer's velocity every `flip_every` ticks."""

    flip_every = 100
    velocities = (0.3, -0.3)

    def step(self, dt=None):
        if self.ticks and self.ticks % self.flip_every == 0:
            v = self.velocities[(self.ticks // self.flip_every) % 2]
            self.enqueue_velocity_change("observer", v)
        return super().step(dt)


def main():
    setup_logging()

    particles = [
        create_particle("observer", 0.0, 0.0),
        create_particle("slow", -0.5, 0.1),
        create_particle("fast", 0.5, -0.4),
    ]
    scheduler = FlippingScheduler(create_state(particles, observer_id="observer"))

    fig, anim = animate(scheduler, config=AnimationConfig(interval_ms=40, show_clocks=True))
    plt.show()


if __name__ == "__main__":
    main()
