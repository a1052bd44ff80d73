"""
Display scale: spacetime coordinates → display coordinates.

Two linear maps, one per axis, fixed by where the unit points land:
(x, t) = (0, 0) goes to display (x0, y0) and (1, 1) goes to (x1, y1).
With the defaults the origin sits at the centre of a 400×400 canvas and
time runs upward (display y decreases as t grows).
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class DisplayScale:
    """Linear map from abstract (x, t) to display units."""

    x0: float = 200.0  # Display x of spacetime x = 0
    y0: float = 200.0  # Display y of spacetime t = 0
    x1: float = 400.0  # Display x of spacetime x = 1
    y1: float = 0.0  # Display y of spacetime t = 1

    def __post_init__(self):
        if self.x1 == self.x0 or self.y1 == self.y0:
            raise ValueError("DisplayScale needs distinct unit points on both axes")

    @property
    def width(self) -> float:
        """Canvas width: the origin is centred horizontally."""
        return 2 * self.x0

    @property
    def height(self) -> float:
        """Canvas height: the origin is centred vertically."""
        return 2 * self.y0

    def x(self, position):
        """Display x for a spatial coordinate (scalar or array)."""
        return self.x0 + np.asarray(position, dtype=np.float64) * (self.x1 - self.x0)

    def t(self, time):
        """Display y for a time coordinate (scalar or array)."""
        return self.y0 + np.asarray(time, dtype=np.float64) * (self.y1 - self.y0)

    def to_display(self, position, time) -> tuple:
        """Map (x, t) to (display_x, display_y)."""
        return self.x(position), self.t(time)

    def invert_x(self, display_x):
        """Spatial coordinate for a display x."""
        return (np.asarray(display_x, dtype=np.float64) - self.x0) / (self.x1 - self.x0)

    def invert_t(self, display_y):
        """Time coordinate for a display y."""
        return (np.asarray(display_y, dtype=np.float64) - self.y0) / (self.y1 - self.y0)

    @property
    def x_range(self) -> tuple[float, float]:
        """Spatial coordinates at the left and right canvas edges."""
        return float(self.invert_x(0.0)), float(self.invert_x(self.width))

    @property
    def t_range(self) -> tuple[float, float]:
        """Time coordinates at the bottom and top canvas edges."""
        lo, hi = float(self.invert_t(self.height)), float(self.invert_t(0.0))
        return (lo, hi) if lo <= hi else (hi, lo)
