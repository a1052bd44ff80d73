"""Unit tests for the Scheduler."""

import pytest

from minkowski.core import Scheduler, SimulationConfig, create_particle, create_state
from minkowski.errors import UnknownObserver


@pytest.fixture
def scheduler(simple_state):
    return Scheduler(simple_state)


class TestScheduler:
    """Tests for Scheduler."""

    def test_initial(self, scheduler, simple_state):
        assert scheduler.state is simple_state
        assert scheduler.render_model is None
        assert scheduler.ticks == 0
        assert scheduler.global_tick == 0.0

    def test_step_uses_default_dt(self, scheduler):
        model = scheduler.step()
        assert scheduler.global_tick == pytest.approx(0.01)
        assert scheduler.render_model is model
        assert scheduler.ticks == 1

    def test_step_with_dt(self, scheduler):
        scheduler.step(0.5)
        assert scheduler.global_tick == 0.5
        assert scheduler.render_model.position_of("mover").position == pytest.approx(0.25)

    def test_custom_default_dt(self, rest_observer):
        state = create_state([rest_observer], "observer", config=SimulationConfig(default_dt=0.25))
        scheduler = Scheduler(state)
        scheduler.step()
        assert scheduler.global_tick == 0.25

    def test_enqueue_applies_on_next_step(self, scheduler):
        scheduler.enqueue_velocity_change("mover", 0.0)
        assert len(scheduler.state.particle("mover").worldline) == 1

        scheduler.step(0.2)
        assert len(scheduler.state.particle("mover").worldline) == 2
        assert scheduler.state.pending_events == ()

    def test_select_observer(self, scheduler):
        scheduler.select_observer("mover")
        model = scheduler.step(0.1)
        assert model.position_of("mover").position == 0.0

    def test_select_unknown_observer(self, scheduler):
        with pytest.raises(UnknownObserver):
            scheduler.select_observer("ghost")
        assert scheduler.state.observer_id == "observer"

    def test_run_summary(self, scheduler):
        scheduler.enqueue_velocity_change("ghost", 0.1)
        stats = scheduler.run(20, dt=0.05)

        assert stats["n_ticks"] == 20
        assert stats["total_ticks"] == 20
        assert stats["global_tick"] == pytest.approx(1.0)
        assert stats["rejected_events"] == 1
        assert stats["skipped_particles"] == 0
        assert stats["n_particles"] == 2

    def test_run_counts_skips(self, rest_observer):
        state = create_state([rest_observer, create_particle("tachyon", 0.0, 2.0)], "observer")
        scheduler = Scheduler(state)
        stats = scheduler.run(3)
        assert stats["skipped_particles"] == 3
        assert scheduler.skipped_particles == 3
