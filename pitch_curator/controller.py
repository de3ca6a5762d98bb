# region Imports
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import numpy as np

from .config import EnergyParams
from .coverage import CoverageTracker
from .energy import step_energy_J
from .grid import SurfaceGrid
from .models import Footprint
# endregion

logger = logging.getLogger(__name__)


class AgentState(Enum):
    MOVING = "moving"
    REPAIRING = "repairing"  # lasts one step only


@dataclass
class StepOutcome:
    position: Tuple[int, int]  # clamped (x, y) actually reached
    footprint: Footprint
    state: AgentState
    min_depth: float           # before any repair
    cost_J: float
    energy_J: float            # cumulative
    coverage_pct: float

    @property
    def repaired(self) -> bool:
        return self.state is AgentState.REPAIRING


# region Inspect & Repair
class InspectAndRepairController:
    """
    Reads the sensor footprint at every path sample and fires the tamper
    when any cell in it is deeper than ``depth_threshold``.

    The threshold must sit well below the soil noise floor, otherwise
    ordinary texture triggers repairs.
    """

    def __init__(
        self,
        surface: SurfaceGrid,
        tracker: CoverageTracker,
        energy: EnergyParams,
        depth_threshold: float,
        footprint_half: int,
        noise_amplitude: float,
        rng: Optional[np.random.Generator] = None,
    ):
        self.surface = surface
        self.tracker = tracker
        self.energy = energy
        self.depth_threshold = float(depth_threshold)
        self.half = int(footprint_half)
        self.noise_amplitude = float(noise_amplitude)
        self.rng = rng if rng is not None else np.random.default_rng()

        self.energy_J = 0.0
        self.repair_count = 0
        self.steps = 0

    def step(self, x: float, y: float) -> StepOutcome:
        cx, cy = self.surface.clamp_position(x, y, self.half)
        fp = self.surface.footprint(cx, cy, self.half)
        self.tracker.mark_footprint(fp.rows, fp.cols)

        min_depth = float(np.min(self.surface.read_footprint(cx, cy, self.half)))
        state = AgentState.MOVING
        if min_depth < self.depth_threshold:
            self.surface.flatten_footprint(cx, cy, self.half, self.noise_amplitude, self.rng)
            self.repair_count += 1
            state = AgentState.REPAIRING
            logger.debug("Repair at (%d, %d): min depth %.3f mm", cx, cy, min_depth)

        cost = step_energy_J(state is AgentState.REPAIRING, self.energy)
        self.energy_J += cost
        self.steps += 1

        return StepOutcome(
            position=(cx, cy),
            footprint=fp,
            state=state,
            min_depth=min_depth,
            cost_J=cost,
            energy_J=self.energy_J,
            coverage_pct=self.tracker.coverage_percent(),
        )
# endregion
