# config.py
# region Imports
from __future__ import annotations
import logging
import numbers
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional, Tuple
# endregion

logger = logging.getLogger(__name__)

# region Defaults (standard pitch, 1 cell = 5 cm)
PITCH_LENGTH_CM = 2012.0
PITCH_WIDTH_CM = 305.0
CM_PER_CELL = 5.0

NOISE_AMPLITUDE_MM = 0.05

# Defects are always below the surface; depth is a positive magnitude
DEFECT_COUNT_RANGE = (5, 8)
DEFECT_SIZE_RANGE = (6, 15)
DEFECT_DEPTH_RANGE_MM = (2.0, 4.0)
DEFECT_SAFE_MARGIN = 5

ENERGY_MOVE_J = 1.5
ENERGY_REPAIR_J = 15.0

DEPTH_THRESHOLD_MM = -1.0
ROBOT_ROW_SPACING = 6  # < footprint diameter, rows overlap
PATH_MARGIN = 5
FOOTPRINT_HALF = 5
# endregion


class ConfigError(ValueError):
    """Raised when a simulation configuration cannot produce a valid run."""


# region Type Checks
def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigError(f"{name} must be a number (got {value!r})")


def _require_range(name: str, value: Any) -> None:
    if not isinstance(value, tuple) or len(value) != 2:
        raise ConfigError(f"{name} must be a [low, high] pair (got {value!r})")
    for v in value:
        _require_number(name, v)
# endregion


# region Parameter Blocks
@dataclass
class PitchConfig:
    length_cm: float = PITCH_LENGTH_CM
    width_cm: float = PITCH_WIDTH_CM
    cm_per_cell: float = CM_PER_CELL
    noise_amplitude: float = NOISE_AMPLITUDE_MM

    @property
    def length_cells(self) -> int:
        return int(round(self.length_cm / self.cm_per_cell))

    @property
    def width_cells(self) -> int:
        return int(round(self.width_cm / self.cm_per_cell))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.width_cells, self.length_cells


@dataclass
class DefectConfig:
    count_range: Tuple[int, int] = DEFECT_COUNT_RANGE
    size_range: Tuple[int, int] = DEFECT_SIZE_RANGE
    depth_range: Tuple[float, float] = DEFECT_DEPTH_RANGE_MM
    safe_margin: int = DEFECT_SAFE_MARGIN


@dataclass
class EnergyParams:
    move_J: float = ENERGY_MOVE_J
    repair_J: float = ENERGY_REPAIR_J


@dataclass
class SimConfig:
    pitch: PitchConfig = field(default_factory=PitchConfig)
    defects: DefectConfig = field(default_factory=DefectConfig)
    energy: EnergyParams = field(default_factory=EnergyParams)
    depth_threshold: float = DEPTH_THRESHOLD_MM
    row_spacing: float = ROBOT_ROW_SPACING
    margin: float = PATH_MARGIN
    footprint_half: int = FOOTPRINT_HALF
    include_far_edge: bool = False
    seed: Optional[int] = None

    # region Validation
    def validate(self) -> "SimConfig":
        """
        Reject configurations the run loop cannot handle. Called once at
        setup; the loop itself never re-checks.
        """
        p, d = self.pitch, self.defects
        for name, value in [
            ("pitch.length_cm", p.length_cm),
            ("pitch.width_cm", p.width_cm),
            ("pitch.cm_per_cell", p.cm_per_cell),
            ("pitch.noise_amplitude", p.noise_amplitude),
            ("defects.safe_margin", d.safe_margin),
            ("energy.move_J", self.energy.move_J),
            ("energy.repair_J", self.energy.repair_J),
            ("depth_threshold", self.depth_threshold),
            ("row_spacing", self.row_spacing),
            ("margin", self.margin),
            ("footprint_half", self.footprint_half),
        ]:
            _require_number(name, value)
        for name, value in [
            ("defects.count_range", d.count_range),
            ("defects.size_range", d.size_range),
            ("defects.depth_range", d.depth_range),
        ]:
            _require_range(name, value)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, numbers.Integral)):
            raise ConfigError(f"seed must be an integer (got {self.seed!r})")

        if p.cm_per_cell <= 0:
            raise ConfigError(f"cm_per_cell must be > 0 (got {p.cm_per_cell})")
        H, W = p.shape
        if H < 1 or W < 1:
            raise ConfigError(f"pitch grid is empty ({H}x{W} cells)")
        if p.noise_amplitude < 0:
            raise ConfigError("noise_amplitude must be >= 0")

        if self.footprint_half < 0:
            raise ConfigError("footprint_half must be >= 0")
        if self.row_spacing <= 0:
            raise ConfigError("row_spacing must be > 0")
        diameter = 2 * self.footprint_half + 1
        if self.row_spacing >= diameter:
            raise ConfigError(
                f"row_spacing {self.row_spacing} must be smaller than the "
                f"sensor footprint diameter {diameter} to keep rows overlapping"
            )
        if self.margin < 0 or H - 2 * self.margin < 0:
            raise ConfigError(
                f"margin {self.margin} leaves no sweep row on a {H}-cell wide pitch"
            )
        if W - 2 * self.margin < 0:
            raise ConfigError(
                f"margin {self.margin} leaves no sweep length on a {W}-cell long pitch"
            )
        if self.margin > self.footprint_half:
            logger.warning(
                "margin %s exceeds footprint_half %s: cells near the pitch edges will not be swept",
                self.margin, self.footprint_half,
            )
        if self.depth_threshold >= 0:
            raise ConfigError("depth_threshold must be negative (defects are depressions)")

        lo, hi = d.count_range
        if lo < 0 or hi < lo:
            raise ConfigError(f"invalid defect count_range {d.count_range}")
        smin, smax = d.size_range
        if smin < 1 or smax < smin:
            raise ConfigError(f"invalid defect size_range {d.size_range}")
        dmin, dmax = d.depth_range
        if dmin < 0 or dmax < dmin:
            raise ConfigError(f"invalid defect depth_range {d.depth_range}")
        if hi > 0:
            need = smax + 2 * d.safe_margin
            if need > W or need > H:
                raise ConfigError(
                    f"defects up to {smax} cells with margin {d.safe_margin} "
                    f"do not fit a {H}x{W} grid"
                )
        if self.energy.move_J < 0 or self.energy.repair_J < 0:
            raise ConfigError("energy constants must be >= 0")
        return self
    # endregion

    # region (De)serialisation
    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SimConfig":
        try:
            data = dict(data or {})
            dfx = dict(data.pop("defects", None) or {})
            for k in ("count_range", "size_range", "depth_range"):
                if k in dfx:
                    if not isinstance(dfx[k], (list, tuple)):
                        raise ConfigError(f"defects.{k} must be a [low, high] pair (got {dfx[k]!r})")
                    dfx[k] = tuple(dfx[k])
            pitch = PitchConfig(**(data.pop("pitch", None) or {}))
            defects = DefectConfig(**dfx)
            energy = EnergyParams(**(data.pop("energy", None) or {}))
            return cls(pitch=pitch, defects=defects, energy=energy, **data)
        except (TypeError, ValueError) as e:
            if isinstance(e, ConfigError):
                raise
            raise ConfigError(f"invalid configuration: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
    # endregion
# endregion


def load_config(path: Optional[str]) -> SimConfig:
    """Load a YAML config file; ``None`` returns the standard pitch defaults."""
    if path is None:
        return SimConfig()
    import yaml

    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: malformed YAML: {e}") from e
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return SimConfig.from_dict(data)
