import numpy as np
import pytest

from pitch_curator.config import EnergyParams
from pitch_curator.controller import AgentState, InspectAndRepairController
from pitch_curator.coverage import CoverageTracker
from pitch_curator.grid import SurfaceGrid


@pytest.fixture
def ctrl(rng):
    h = np.zeros((20, 30))
    h[8:11, 10:13] = -3.0
    surface = SurfaceGrid(h)
    return InspectAndRepairController(
        surface, CoverageTracker(surface.shape), EnergyParams(move_J=1.5, repair_J=15.0),
        depth_threshold=-1.0, footprint_half=2, noise_amplitude=0.05, rng=rng,
    )


class TestDecisionRule:
    def test_defect_triggers_repair(self, ctrl):
        out = ctrl.step(11, 9)
        assert out.state is AgentState.REPAIRING
        assert out.repaired
        assert out.min_depth == pytest.approx(-3.0)
        assert out.cost_J == pytest.approx(16.5)
        assert ctrl.repair_count == 1

    def test_repair_clears_the_footprint(self, ctrl):
        ctrl.step(11, 9)
        assert ctrl.surface.read_footprint(11, 9, 2).min() >= -1.0
        again = ctrl.step(11, 9)
        assert again.state is AgentState.MOVING

    def test_clean_ground_only_moves(self, ctrl):
        out = ctrl.step(25, 15)
        assert out.state is AgentState.MOVING
        assert out.cost_J == pytest.approx(1.5)
        assert ctrl.repair_count == 0

    def test_energy_accumulates(self, ctrl):
        ctrl.step(11, 9)
        out = ctrl.step(25, 15)
        assert out.energy_J == pytest.approx(18.0)
        assert ctrl.steps == 2


class TestPositionHandling:
    def test_out_of_range_sample_is_clamped(self, ctrl):
        out = ctrl.step(-100.0, 1000.0)
        assert out.position == (2, 17)
        assert out.footprint.shape == (5, 5)

    def test_coverage_reported_after_marking(self, ctrl):
        out = ctrl.step(25, 15)
        assert out.coverage_pct == pytest.approx(100.0 * 25 / 600)
