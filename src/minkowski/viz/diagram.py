"""
Spacetime diagram renderer.

Draws one render model as seen by the observer:
- axes: x from -1 to 1 along the "now" line, t from 0 to 1 upward
- one circle per particle on the now line (t = 0)
- each trail as a path of (position, relative_time) reaching into the past

Everything is drawn in display coordinates produced by a DisplayScale,
so the canvas behaves like the original SVG: origin at (x0, y0) and
display y growing downward.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Hashable

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from minkowski.viz.scale import DisplayScale

if TYPE_CHECKING:
    from minkowski.core.simulation import RenderModel


PARTICLE_COLOR = "#1f77b4"
OBSERVER_COLOR = "#d62728"
AXIS_COLOR = "#000000"
LIGHT_CONE_COLOR = "#bbbbbb"


def create_canvas(
    scale: DisplayScale | None = None,
    dpi: float = 100.0,
) -> tuple[Figure, Axes]:
    """Create a figure sized to the scale's canvas, with SVG-like orientation."""
    scale = scale or DisplayScale()
    fig = plt.figure(figsize=(scale.width / dpi, scale.height / dpi), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, scale.width)
    ax.set_ylim(scale.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    return fig, ax


def draw_axes(ax: Axes, scale: DisplayScale) -> list[Line2D]:
    """Draw the x axis (t = 0, x in [-1, 1]) and t axis (x = 0, t in [0, 1])."""
    x_endpoints = ([-1.0, 1.0], [0.0, 0.0])
    t_endpoints = ([0.0, 0.0], [0.0, 1.0])

    lines = []
    for xs, ts in (x_endpoints, t_endpoints):
        (line,) = ax.plot(scale.x(xs), scale.t(ts), color=AXIS_COLOR, linewidth=1.0, zorder=1)
        lines.append(line)
    return lines


def draw_light_cone(ax: Axes, scale: DisplayScale) -> list[Line2D]:
    """Dashed lines x = ±t through the observer's here-and-now."""
    t_lo, t_hi = scale.t_range
    ts = np.array([t_lo, t_hi])
    lines = []
    for sign in (1.0, -1.0):
        (line,) = ax.plot(
            scale.x(sign * ts), scale.t(ts),
            color=LIGHT_CONE_COLOR, linestyle="--", linewidth=0.8, zorder=0,
        )
        lines.append(line)
    return lines


class DiagramRenderer:
    """
    Keeps one circle and one trail line per particle id and updates them
    in place each tick.

    Artists are reconciled by particle id: new ids get new artists, ids
    missing from the render model are hidden for that tick (a skipped
    particle keeps its trail).
    """

    def __init__(
        self,
        ax: Axes,
        scale: DisplayScale | None = None,
        radius: float = 5.0,
        show_trails: bool = True,
        show_light_cone: bool = True,
        show_clocks: bool = False,
    ):
        self.ax = ax
        self.scale = scale or DisplayScale()
        self.radius = radius
        self.show_trails = show_trails
        self.show_clocks = show_clocks

        self.axis_lines = draw_axes(ax, self.scale)
        self.light_cone = draw_light_cone(ax, self.scale) if show_light_cone else []

        self.circles: dict[Hashable, Circle] = {}
        self.trails: dict[Hashable, Line2D] = {}
        self.labels: dict = {}

    def update(self, render_model: "RenderModel", observer_id: Hashable | None = None) -> list:
        """Bring the artists in line with `render_model`. Returns the changed artists."""
        scale = self.scale
        changed = []
        visible = set()

        for p in render_model.particle_positions:
            visible.add(p.id)
            color = OBSERVER_COLOR if p.id == observer_id else PARTICLE_COLOR
            center = (float(scale.x(p.position)), float(scale.t(0.0)))

            circle = self.circles.get(p.id)
            if circle is None:
                circle = Circle(center, self.radius, zorder=3)
                self.ax.add_patch(circle)
                self.circles[p.id] = circle
            circle.center = center
            circle.set_facecolor(color)
            circle.set_edgecolor(color)
            circle.set_visible(True)
            changed.append(circle)

            if self.show_clocks:
                label = self.labels.get(p.id)
                if label is None:
                    label = self.ax.text(0, 0, "", fontsize=7, ha="center", va="bottom", zorder=4)
                    self.labels[p.id] = label
                label.set_position((center[0], center[1] - 1.5 * self.radius))
                label.set_text(f"τ={p.proper_time:.2f}")
                label.set_visible(True)
                changed.append(label)

        for particle_id, circle in self.circles.items():
            if particle_id not in visible:
                circle.set_visible(False)
                changed.append(circle)
        for particle_id, label in self.labels.items():
            if particle_id not in visible:
                label.set_visible(False)
                changed.append(label)

        if self.show_trails:
            for particle_id, trail in render_model.trails.items():
                line = self.trails.get(particle_id)
                if line is None:
                    (line,) = self.ax.plot([], [], linewidth=1.0, zorder=2)
                    self.trails[particle_id] = line
                xs = np.array([pt.position for pt in trail])
                ts = np.array([pt.relative_time for pt in trail])
                line.set_data(scale.x(xs), scale.t(ts))
                line.set_color(OBSERVER_COLOR if particle_id == observer_id else PARTICLE_COLOR)
                changed.append(line)

        return changed


def plot_render_model(
    render_model: "RenderModel",
    observer_id: Hashable | None = None,
    scale: DisplayScale | None = None,
    title: str | None = None,
    show_clocks: bool = True,
) -> tuple[Figure, Axes]:
    """
    Draw a single render model as a static figure.

    Returns:
        (fig, ax) tuple
    """
    scale = scale or DisplayScale()
    fig, ax = create_canvas(scale)
    renderer = DiagramRenderer(ax, scale, show_clocks=show_clocks)
    renderer.update(render_model, observer_id)
    if title:
        ax.text(scale.width / 2, 12, title, ha="center", va="top", fontsize=9)
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
