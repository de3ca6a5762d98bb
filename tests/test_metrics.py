import numpy as np
import pytest

from pitch_curator.config import EnergyParams
from pitch_curator.energy import expected_energy_J, joule_to_Wh, step_energy_J
from pitch_curator.metrics import duty_cycle, mean_abs_roughness, rms_roughness, summarize
from pitch_curator.models import RunLog


def test_roughness_values():
    h = np.array([[3.0, -4.0]])
    assert mean_abs_roughness(h) == pytest.approx(3.5)
    assert rms_roughness(h) == pytest.approx(np.sqrt(12.5))


def test_flat_surface_is_smooth():
    h = np.zeros((5, 5))
    assert rms_roughness(h) == 0.0
    assert mean_abs_roughness(h) == 0.0


def test_duty_cycle():
    assert duty_cycle(3, 12) == pytest.approx(25.0)
    assert duty_cycle(0, 0) == 0.0
    assert duty_cycle(5, 5) == pytest.approx(100.0)


def test_step_energy():
    P = EnergyParams(move_J=1.5, repair_J=15.0)
    assert step_energy_J(False, P) == pytest.approx(1.5)
    assert step_energy_J(True, P) == pytest.approx(16.5)
    assert expected_energy_J(10, 2, P) == pytest.approx(8 * 1.5 + 2 * 16.5)
    assert joule_to_Wh(3600.0) == pytest.approx(1.0)


def test_summarize_uses_last_entries():
    log = RunLog()
    log.append(1.5, False, 40.0, 0.5, 0.4)
    log.append(18.0, True, 60.0, 0.1, 0.08)
    s = summarize(log, repair_count=1, num_defects=2)
    assert s.steps == 2
    assert s.total_energy_J == pytest.approx(18.0)
    assert s.duty_cycle_pct == pytest.approx(50.0)
    assert s.final_rms_mm == pytest.approx(0.1)
    assert s.coverage_pct == pytest.approx(60.0)
    assert "Total Energy: 18.00 Joules" in s.report()


def test_summarize_empty_log():
    s = summarize(RunLog(), repair_count=0, num_defects=0)
    assert s.steps == 0 and s.duty_cycle_pct == 0.0
