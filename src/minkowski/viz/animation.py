"""
Animation driver: a matplotlib timer that ticks the scheduler.

The timer is the only thing that calls Scheduler.step(); the renderer
only ever reads the render model that step returns.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import logging

import matplotlib.animation as animation

from minkowski.viz.diagram import DiagramRenderer, create_canvas
from minkowski.viz.scale import DisplayScale

if TYPE_CHECKING:
    from matplotlib.figure import Figure
    from minkowski.core.scheduler import Scheduler

logger = logging.getLogger(__name__)


@dataclass
class AnimationConfig:
    """Configuration for the animation timer."""

    interval_ms: int = 40  # Wall-clock time between ticks
    frames: int | None = None  # None = run until the window is closed
    dt: float | None = None  # Simulated time per tick (scheduler default if None)
    show_trails: bool = True
    show_light_cone: bool = True
    show_clocks: bool = False


def animate(
    scheduler: "Scheduler",
    scale: DisplayScale | None = None,
    config: AnimationConfig | None = None,
) -> tuple["Figure", animation.FuncAnimation]:
    """
    Build a FuncAnimation that advances `scheduler` once per frame.

    The caller must keep a reference to the returned animation object;
    if it is garbage-collected matplotlib stops the timer.

    Returns:
        (fig, anim)
    """
    scale = scale or DisplayScale()
    config = config or AnimationConfig()

    fig, ax = create_canvas(scale)
    renderer = DiagramRenderer(
        ax,
        scale,
        show_trails=config.show_trails,
        show_light_cone=config.show_light_cone,
        show_clocks=config.show_clocks,
    )

    def update(frame_idx):
        render_model = scheduler.step(config.dt)
        return renderer.update(render_model, scheduler.state.observer_id)

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=config.frames,
        interval=config.interval_ms,
        blit=False,
        cache_frame_data=False,
    )
    logger.info(f"Animation started: {config.interval_ms} ms per tick")
    return fig, anim
