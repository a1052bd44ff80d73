"""
minkowski: Special-Relativistic Spacetime Visualizer

Animates point particles moving through a stationary reference frame and
re-renders them as seen from a chosen observer's moving frame.

Core concepts:
- A worldline is a piecewise-inertial history of instants
- Proper time is what each particle's own clock reads
- The observer's current segment defines "now" (the viewing frame)
- Every other instant is Lorentz-boosted into that frame each tick

The engine (minkowski.core) has no rendering dependency.
Drawing and the animation timer live in minkowski.viz.
"""

__version__ = "0.1.0"
