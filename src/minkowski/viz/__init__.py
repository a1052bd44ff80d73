"""
Visualization: the thin rendering layer on top of the engine.

- Display scale (spacetime units → canvas units)
- Spacetime diagram: axes, particles on the now line, trails
- Animation timer driving the scheduler
"""

from minkowski.viz.scale import DisplayScale
from minkowski.viz.diagram import (
    DiagramRenderer,
    create_canvas,
    draw_axes,
    draw_light_cone,
    plot_render_model,
    save_figure,
)
from minkowski.viz.animation import AnimationConfig, animate

__all__ = [
    "DisplayScale",
    "DiagramRenderer",
    "create_canvas",
    "draw_axes",
    "draw_light_cone",
    "plot_render_model",
    "save_figure",
    "AnimationConfig",
    "animate",
]
