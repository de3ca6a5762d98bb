# region Imports
from __future__ import annotations
import logging
from typing import List, Optional
import numpy as np

from .config import SimConfig
from .controller import InspectAndRepairController
from .coverage import CoverageTracker
from .defects import generate_defects
from .grid import SurfaceGrid
from .metrics import mean_abs_roughness, rms_roughness, summarize
from .models import DefectPatch, MissionResult, RunLog
from .planner import interpolate, plan
# endregion

logger = logging.getLogger(__name__)


# region Mission Loop
def run_mission(
    config: Optional[SimConfig] = None,
    defects: Optional[List[DefectPatch]] = None,
    rng: Optional[np.random.Generator] = None,
) -> MissionResult:
    """
    Build the pitch, plan the sweep and drive it once, sample by sample.

    ``defects`` overrides the random generator (pass ``[]`` for a clean
    pitch). Roughness is recomputed over the whole surface after each step's
    repair, so every log entry reflects that step's mutation.
    """
    cfg = (config or SimConfig()).validate()
    rng = rng if rng is not None else np.random.default_rng(cfg.seed)
    H, W = cfg.pitch.shape
    noise = cfg.pitch.noise_amplitude

    # region Setup
    if defects is None:
        defects = generate_defects((H, W), cfg.defects, rng)
    surface = SurfaceGrid.initialize(H, W, noise, defects, cfg.defects.depth_range, rng)
    initial = surface.copy_heights()

    waypoints = plan(H, W, cfg.row_spacing, cfg.margin, cfg.include_far_edge)
    path = interpolate(waypoints)

    tracker = CoverageTracker(surface.shape)
    ctrl = InspectAndRepairController(
        surface, tracker, cfg.energy,
        depth_threshold=cfg.depth_threshold,
        footprint_half=cfg.footprint_half,
        noise_amplitude=noise,
        rng=rng,
    )
    log = RunLog()
    # endregion

    logger.info("Simulating %d steps on a %dx%d pitch", len(path), H, W)
    for x, y in path:
        out = ctrl.step(x, y)
        h = surface.heights
        log.append(out.energy_J, out.repaired, out.coverage_pct,
                   rms_roughness(h), mean_abs_roughness(h))

    summary = summarize(log, ctrl.repair_count, len(defects))
    logger.info("Done: %d repairs, %.1f J, coverage %.1f%%",
                summary.repair_count, summary.total_energy_J, summary.coverage_pct)

    return MissionResult(
        initial_surface=initial,
        final_surface=surface.copy_heights(),
        waypoints=waypoints,
        path=path,
        defects=list(defects),
        log=log,
        summary=summary,
    )
# endregion
