# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import numpy as np


@dataclass
class DefectPatch:
    x: int          # column of the top-left cell
    y: int          # row of the top-left cell
    width: int      # cells along the pitch length
    height: int     # cells across the pitch width
    depth: Optional[float] = None  # mm below surface; None = draw from range


@dataclass
class Footprint:
    row0: int
    row1: int  # exclusive
    col0: int
    col1: int  # exclusive

    @property
    def rows(self) -> slice:
        return slice(self.row0, self.row1)

    @property
    def cols(self) -> slice:
        return slice(self.col0, self.col1)

    @property
    def shape(self):
        return (self.row1 - self.row0, self.col1 - self.col0)


@dataclass
class RunLog:
    """Per-step series, one entry per path sample."""
    energy_J: List[float] = field(default_factory=list)
    repaired: List[bool] = field(default_factory=list)
    coverage_pct: List[float] = field(default_factory=list)
    rms_mm: List[float] = field(default_factory=list)
    ra_mm: List[float] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.energy_J)

    def append(self, energy_J: float, repaired: bool, coverage_pct: float,
               rms_mm: float, ra_mm: float) -> None:
        self.energy_J.append(float(energy_J))
        self.repaired.append(bool(repaired))
        self.coverage_pct.append(float(coverage_pct))
        self.rms_mm.append(float(rms_mm))
        self.ra_mm.append(float(ra_mm))


@dataclass
class MissionSummary:
    total_energy_J: float
    duty_cycle_pct: float
    final_rms_mm: float
    final_ra_mm: float
    repair_count: int
    steps: int
    coverage_pct: float
    num_defects: int

    def report(self) -> str:
        return "\n".join([
            "--- MISSION SUMMARY ---",
            f"Total Energy: {self.total_energy_J:.2f} Joules",
            f"Actuator Duty Cycle: {self.duty_cycle_pct:.2f}%",
            f"Final RMS Roughness: {self.final_rms_mm:.4f} mm",
            f"Repairs: {self.repair_count} over {self.steps} steps",
            f"Coverage: {self.coverage_pct:.1f}%",
        ])


@dataclass
class MissionResult:
    initial_surface: np.ndarray   # (H,W) mm, before any repair
    final_surface: np.ndarray     # (H,W) mm
    waypoints: np.ndarray         # (K,2) x,y
    path: np.ndarray              # (N,2) x,y
    defects: List[DefectPatch]
    log: RunLog
    summary: MissionSummary
