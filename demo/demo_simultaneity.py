#!/usr/bin/env python3
"""
Demo: Relativity of Simultaneity

Five particles at rest, evenly spaced on x ∈ [-0.8, 0.8], and one rider
moving at v = 0.5. The same instant is rendered twice:

1. From the frame of a particle at rest: everything sits still
2. From the rider's frame: the row is contracted by 1/γ and slides by

Output: output/demo_simultaneity/frames.png
"""

import os

import matplotlib.pyplot as plt

from minkowski.core import advance, create_particle, create_state, with_observer
from minkowski.viz import DiagramRenderer, DisplayScale, create_canvas, save_figure


def main():
    print("=" * 60)
    print("  RELATIVITY OF SIMULTANEITY")
    print("=" * 60)

    rider_speed = 0.5
    positions = [-0.8, -0.4, 0.0, 0.4, 0.8]

    particles = [create_particle(f"p{i}", x, 0.0) for i, x in enumerate(positions)]
    particles.append(create_particle("rider", 0.0, rider_speed))
    state = create_state(particles, observer_id="p2")

    print(f"\n1. {len(positions)} particles at rest, rider at v = {rider_speed}")

    scale = DisplayScale()
    fig, axes = plt.subplots(1, 2, figsize=(10, 5))

    for ax, observer in zip(axes, ["p2", "rider"]):
        snapshot = with_observer(state, observer)
        for _ in range(20):
            snapshot, model = advance(snapshot, 0.01)

        print(f"\n2. Seen from {observer!r} at t = {snapshot.global_tick:.2f}:")
        for p in model.particle_positions:
            print(f"   {p.id:>6}: x = {p.position:+.4f}, v = {p.velocity:+.3f}, τ = {p.proper_time:.4f}")

        ax.set_xlim(0, scale.width)
        ax.set_ylim(scale.height, 0)
        ax.set_aspect("equal")
        ax.axis("off")
        DiagramRenderer(ax, scale, show_clocks=True).update(model, observer)
        ax.set_title(f"Frame of {observer}")

    fig.tight_layout()
    os.makedirs("output/demo_simultaneity", exist_ok=True)
    save_figure(fig, "output/demo_simultaneity/frames.png")
    plt.close(fig)
    print("\n   Saved: output/demo_simultaneity/frames.png")


if __name__ == "__main__":
    main()
