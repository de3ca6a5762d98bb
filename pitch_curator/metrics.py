# metrics.py
import numpy as np

from .models import MissionSummary, RunLog


def mean_abs_roughness(h: np.ndarray) -> float:
    """Ra: mean absolute height deviation (mm)."""
    return float(np.mean(np.abs(h)))


def rms_roughness(h: np.ndarray) -> float:
    """Rrms: root-mean-square height (mm)."""
    h = np.asarray(h, dtype=np.float64)
    return float(np.sqrt(np.mean(h * h)))


def duty_cycle(repairs: int, steps: int) -> float:
    if steps <= 0:
        return 0.0
    return repairs / steps * 100.0


def summarize(log: RunLog, repair_count: int, num_defects: int) -> MissionSummary:
    steps = len(log)
    return MissionSummary(
        total_energy_J=log.energy_J[-1] if steps else 0.0,
        duty_cycle_pct=duty_cycle(repair_count, steps),
        final_rms_mm=log.rms_mm[-1] if steps else 0.0,
        final_ra_mm=log.ra_mm[-1] if steps else 0.0,
        repair_count=repair_count,
        steps=steps,
        coverage_pct=log.coverage_pct[-1] if steps else 0.0,
        num_defects=num_defects,
    )
