"""
Simulation state machine: one tick of the observer-frame animation.

The whole simulation is a single immutable SimulationState value.
`advance(state, dt)` returns a NEW state plus the render model for that
tick; the input state is never modified, so a renderer holding the old
snapshot always sees a consistent picture.

Each tick:
1. tick' = tick + dt
2. Resolve the observer (UnknownObserver is fatal)
3. Drain queued velocity changes (malformed ones are dropped and reported)
4. Fix the observer frame at tick', find each particle's visible instant
5. Extrapolate uniform motion from that instant up to tick'
   (a particle whose result is not finite is skipped for the tick)
6. Shift, extend and cap the trails
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Hashable, Iterable, Mapping
import logging

import numpy as np

from minkowski.errors import (
    InvalidVelocity,
    MalformedEvent,
    MinkowskiError,
    NonFiniteValue,
    OutOfOrderInstant,
    UnknownObserver,
    UnknownParticle,
)
from minkowski.core.lorentz import check_velocity
from minkowski.core.frame import TransformedInstant, transform_from_origin
from minkowski.core.particle import Particle
from minkowski.core.worldline import Instant, Worldline

logger = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for the simulation state machine."""

    trail_length: int = 30  # Max trail points kept per particle (oldest evicted first)
    default_dt: float = 0.01  # Simulated time per tick when the caller gives none

    def __post_init__(self):
        if self.trail_length < 1:
            raise ValueError(f"trail_length must be >= 1, got {self.trail_length}")
        if not self.default_dt > 0:
            raise ValueError(f"default_dt must be positive, got {self.default_dt}")


@dataclass(frozen=True)
class VelocityChange:
    """Request: from the next tick on, `particle_id` moves at `velocity`."""

    particle_id: Hashable
    velocity: float


@dataclass(frozen=True)
class TrailPoint:
    """One point of a trail. relative_time is 0 for the newest point, negative before."""

    position: float
    relative_time: float


@dataclass(frozen=True)
class ParticlePosition:
    """Where a particle is drawn this tick, in the observer frame."""

    id: Hashable
    position: float
    velocity: float
    proper_time: float  # The particle's own clock reading at the observer's "now"


@dataclass(frozen=True)
class RenderModel:
    """Everything the renderer needs for one tick."""

    particle_positions: tuple[ParticlePosition, ...]
    trails: Mapping[Hashable, tuple[TrailPoint, ...]]
    rejected_events: tuple[MalformedEvent, ...] = ()
    skipped: Mapping[Hashable, MinkowskiError] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def position_of(self, particle_id: Hashable) -> ParticlePosition | None:
        """Rendered position of one particle, or None if it was skipped."""
        for p in self.particle_positions:
            if p.id == particle_id:
                return p
        return None


@dataclass(frozen=True)
class SimulationState:
    """
    The complete simulation at one tick.

    Immutable: every operation returns a new value, and the mappings are
    read-only views.
    """

    global_tick: float
    particles: Mapping[Hashable, Particle]
    observer_id: Hashable
    trail_history: Mapping[Hashable, tuple[TrailPoint, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    pending_events: tuple[VelocityChange, ...] = ()
    config: SimulationConfig = field(default_factory=SimulationConfig)

    def particle(self, particle_id: Hashable) -> Particle:
        """Look up a particle by id."""
        try:
            return self.particles[particle_id]
        except KeyError:
            raise UnknownParticle(particle_id) from None

    @property
    def observer(self) -> Particle:
        """The particle whose frame is being viewed."""
        try:
            return self.particles[self.observer_id]
        except KeyError:
            raise UnknownObserver(self.observer_id) from None


def create_state(
    particles: Iterable[Particle],
    observer_id: Hashable,
    config: SimulationConfig | None = None,
    global_tick: float = 0.0,
) -> SimulationState:
    """
    Build the initial state.

    Raises:
        ValueError: if two particles share an id or global_tick is not finite
        UnknownObserver: if no particle has id `observer_id`
    """
    by_id: dict[Hashable, Particle] = {}
    for particle in particles:
        if particle.id in by_id:
            raise ValueError(f"duplicate particle id: {particle.id!r}")
        by_id[particle.id] = particle

    if observer_id not in by_id:
        raise UnknownObserver(observer_id)
    if not np.isfinite(global_tick):
        raise ValueError(f"global_tick must be finite, got {global_tick!r}")

    return SimulationState(
        global_tick=float(global_tick),
        particles=MappingProxyType(by_id),
        observer_id=observer_id,
        config=config or SimulationConfig(),
    )


def enqueue_velocity_change(
    state: SimulationState,
    particle_id: Hashable,
    new_velocity: float,
) -> SimulationState:
    """Queue a velocity change. It is validated when the next tick drains it."""
    event = VelocityChange(particle_id=particle_id, velocity=new_velocity)
    return replace(state, pending_events=state.pending_events + (event,))


def with_observer(state: SimulationState, observer_id: Hashable) -> SimulationState:
    """Switch the viewing frame to another particle."""
    if observer_id not in state.particles:
        raise UnknownObserver(observer_id)
    if observer_id != state.observer_id:
        logger.info(f"Observer changed: {state.observer_id!r} -> {observer_id!r}")
    return replace(state, observer_id=observer_id)


def advance(state: SimulationState, dt: float) -> tuple[SimulationState, RenderModel]:
    """
    Advance the simulation by one tick.

    Args:
        state: Current snapshot (not modified)
        dt: Simulated time to advance

    Returns:
        (new_state, render_model)

    Raises:
        ValueError: if dt is not finite
        UnknownObserver: if state.observer_id names no particle
    """
    if not np.isfinite(dt):
        raise ValueError(f"dt must be finite, got {dt!r}")
    tick = state.global_tick + dt

    if state.observer_id not in state.particles:
        raise UnknownObserver(state.observer_id)

    particles, rejected = _drain_events(state.particles, state.pending_events, tick)

    # Resolve the observer frame once; every particle is seen from it
    observer_line = particles[state.observer_id].worldline
    origin = observer_line.recorded(observer_line.index_at_or_before(tick))

    cap = state.config.trail_length
    positions: list[ParticlePosition] = []
    trails: dict[Hashable, tuple[TrailPoint, ...]] = {}
    skipped: dict[Hashable, MinkowskiError] = {}

    for particle_id, particle in particles.items():
        trail = state.trail_history.get(particle_id)
        try:
            rendered = _render_particle(particle, origin, tick)
        except (InvalidVelocity, NonFiniteValue) as exc:
            logger.warning(f"Skipping particle {particle_id!r} at tick {tick:g}: {exc}")
            skipped[particle_id] = exc
            if trail is not None:
                trails[particle_id] = _shift_trail(trail, dt)
            continue

        positions.append(rendered)
        trails[particle_id] = _extend_trail(trail or (), rendered.position, dt, cap)

    trail_view = MappingProxyType(trails)
    new_state = replace(
        state,
        global_tick=tick,
        particles=MappingProxyType(particles),
        trail_history=trail_view,
        pending_events=(),
    )
    render_model = RenderModel(
        particle_positions=tuple(positions),
        trails=trail_view,
        rejected_events=tuple(rejected),
        skipped=MappingProxyType(skipped),
    )
    return new_state, render_model


def visible_instant(
    worldline: Worldline,
    origin: Instant,
    tick: float,
) -> tuple[int, TransformedInstant]:
    """
    Most recent instant the observer can currently see.

    Searches backwards for the last instant whose transformed time is
    <= tick (ties go to the later instant). If every instant lies in the
    observer's future, the first instant is used.

    Returns:
        (index, transformed instant)
    """
    for index in range(len(worldline) - 1, -1, -1):
        transformed = transform_from_origin(worldline.resolve(index), origin)
        if transformed.time <= tick:
            return index, transformed
    return 0, transform_from_origin(worldline.resolve(0), origin)


def _render_particle(particle: Particle, origin: Instant, tick: float) -> ParticlePosition:
    """
    Visible instant plus uniform-motion extrapolation up to tick.

    Raises:
        InvalidVelocity: if a segment velocity has |v| >= 1
        NonFiniteValue: if the result overflows to infinity or NaN
    """
    _, seen = visible_instant(particle.worldline, origin, tick)
    delta = tick - seen.time
    position = seen.position + seen.velocity * delta
    clock = seen.proper_time + delta * float(np.sqrt(1.0 - seen.velocity ** 2))
    checks = (("position", position), ("velocity", seen.velocity), ("proper_time", clock))
    for name, value in checks:
        if not np.isfinite(value):
            raise NonFiniteValue(name, value)
    return ParticlePosition(
        id=particle.id,
        position=position,
        velocity=seen.velocity,
        proper_time=clock,
    )


def _drain_events(
    particles: Mapping[Hashable, Particle],
    events: tuple[VelocityChange, ...],
    tick: float,
) -> tuple[dict[Hashable, Particle], list[MalformedEvent]]:
    """
    Apply queued velocity changes at `tick`.

    Worldlines are copied before the first append so that the previous
    snapshot keeps its own, unchanged worldlines.
    """
    updated = dict(particles)
    copied: set[Hashable] = set()
    rejected: list[MalformedEvent] = []

    for event in events:
        try:
            worldline = _worldline_for_event(updated, copied, event)
            try:
                velocity = check_velocity(event.velocity)
            except InvalidVelocity as exc:
                raise MalformedEvent(event, str(exc)) from exc

            start = worldline.extrapolate(tick)
            try:
                worldline.append(replace(start, velocity=velocity))
            except (OutOfOrderInstant, NonFiniteValue) as exc:
                raise MalformedEvent(event, str(exc)) from exc
        except MalformedEvent as exc:
            logger.warning(f"Dropping velocity change at tick {tick:g}: {exc.reason}")
            rejected.append(exc)
            continue

        logger.debug(f"{event.particle_id!r} now moving at v={velocity:g} from t={tick:g}")

    return updated, rejected


def _worldline_for_event(
    particles: dict[Hashable, Particle],
    copied: set[Hashable],
    event: VelocityChange,
) -> Worldline:
    """Worldline this event appends to, copied on first use in the tick."""
    if event.particle_id not in particles:
        raise MalformedEvent(event, str(UnknownParticle(event.particle_id)))

    particle = particles[event.particle_id]
    if event.particle_id not in copied:
        particle = particle.with_worldline(particle.worldline.copy())
        particles[event.particle_id] = particle
        copied.add(event.particle_id)
    return particle.worldline


def _shift_trail(trail: tuple[TrailPoint, ...], dt: float) -> tuple[TrailPoint, ...]:
    return tuple(TrailPoint(p.position, p.relative_time - dt) for p in trail)


def _extend_trail(
    trail: tuple[TrailPoint, ...],
    position: float,
    dt: float,
    cap: int,
) -> tuple[TrailPoint, ...]:
    """Age existing points by dt, append the newest at relative time 0, keep the last `cap`."""
    extended = _shift_trail(trail, dt) + (TrailPoint(position, 0.0),)
    return extended[-cap:]
