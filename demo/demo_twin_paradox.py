#!/usr/bin/env python3
"""
Demo: The Twin Paradox

Two twins start together at x = 0:

1. "home" stays at rest in the stationary frame
2. "traveler" leaves at v = 0.6, turns around at t = 2, stops at t = 4
3. Both clocks are read off the render model every tick
4. Back home, the traveler's clock shows 3.2 while home shows 4.0

γ(0.6) = 1.25, so every leg of the trip runs at 1/γ = 0.8 clock rate.

Output: output/demo_twin_paradox/twins.png
"""

import os

import numpy as np
import matplotlib.pyplot as plt

from minkowski.core import Scheduler, SimulationConfig, create_particle, create_state
from minkowski.core import proper_time_at
from minkowski.logging_config import setup_logging
from minkowski.viz import plot_render_model, save_figure


def main():
    setup_logging()

    print("=" * 60)
    print("  THE TWIN PARADOX")
    print("=" * 60)

    speed = 0.6
    turnaround = 2.0
    dt = 0.04
    n_ticks = 100  # 4.0 time units

    print("\n1. Setup:")
    home = create_particle("home", initial_position=0.0, initial_velocity=0.0)
    traveler = create_particle("traveler", initial_position=0.0, initial_velocity=speed)
    state = create_state([home, traveler], observer_id="home", config=SimulationConfig(trail_length=60))
    scheduler = Scheduler(state)
    print(f"   Traveler speed: v = {speed} (γ = {1 / np.sqrt(1 - speed**2):.3f})")
    print(f"   Turnaround at t = {turnaround}, tick dt = {dt}")

    print("\n2. Running...")
    ticks, home_clock, traveler_clock, traveler_x = [], [], [], []
    for i in range(n_ticks):
        step = i + 1
        if step == int(round(turnaround / dt)):
            scheduler.enqueue_velocity_change("traveler", -speed)
        if step == n_ticks:
            scheduler.enqueue_velocity_change("traveler", 0.0)

        model = scheduler.step(dt)
        ticks.append(scheduler.global_tick)
        home_clock.append(model.position_of("home").proper_time)
        traveler_clock.append(model.position_of("traveler").proper_time)
        traveler_x.append(model.position_of("traveler").position)

    worldline = scheduler.state.particle("traveler").worldline
    print(f"   {n_ticks} ticks completed, t = {scheduler.global_tick:.3f}")
    print(f"   Traveler worldline has {len(worldline)} instants")

    print("\n3. Clock readings at reunion:")
    print(f"   Home:     τ = {home_clock[-1]:.4f}")
    print(f"   Traveler: τ = {traveler_clock[-1]:.4f}")
    print(f"   Oracle:   τ = {proper_time_at(worldline, len(worldline) - 1):.4f}")

    print("\n4. Creating visualization...")
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    ax = axes[0]
    ax.plot(traveler_x, ticks, color="#d62728", linewidth=2, label="traveler")
    ax.plot(np.zeros_like(ticks), ticks, color="#1f77b4", linewidth=2, label="home")
    ax.set_xlabel("x")
    ax.set_ylabel("t")
    ax.set_title("Worldlines (home frame)")
    ax.legend(loc="upper right")
    ax.set_aspect("equal")

    ax = axes[1]
    ax.plot(ticks, home_clock, color="#1f77b4", linewidth=2, label="home")
    ax.plot(ticks, traveler_clock, color="#d62728", linewidth=2, label="traveler")
    ax.plot(ticks, ticks, color="gray", linestyle="--", linewidth=1, label="coordinate time")
    ax.set_xlabel("t (home frame)")
    ax.set_ylabel("proper time τ")
    ax.set_title("Clock readings")
    ax.legend(loc="upper left")

    fig.suptitle("Twin Paradox", fontsize=14, fontweight="bold")
    fig.tight_layout()

    os.makedirs("output/demo_twin_paradox", exist_ok=True)
    save_figure(fig, "output/demo_twin_paradox/twins.png")
    plt.close(fig)
    print("   Saved: output/demo_twin_paradox/twins.png")

    fig, _ = plot_render_model(scheduler.render_model, observer_id="home", title="Reunion (home frame)")
    save_figure(fig, "output/demo_twin_paradox/reunion.png")
    plt.close(fig)
    print("   Saved: output/demo_twin_paradox/reunion.png")

    print("\n" + "=" * 60)
    print("  SUMMARY")
    print("=" * 60)
    print(f"  • Home clock advanced {home_clock[-1]:.2f}, traveler clock {traveler_clock[-1]:.2f}")
    print(f"  • Ratio {traveler_clock[-1] / home_clock[-1]:.3f} = 1/γ")
    print("  • The twin who changed frames is the younger one")


if __name__ == "__main__":
    main()
