# region Imports
from __future__ import annotations
import logging
from typing import Iterable, Optional, Tuple
import numpy as np

from .config import DEFECT_DEPTH_RANGE_MM
from .models import DefectPatch, Footprint
# endregion

logger = logging.getLogger(__name__)


# region Index Helpers
def _clamp_axis(v: float, half: int, n: int) -> int:
    """Round, keep the footprint inside the grid, and never leave the grid."""
    i = int(round(v))
    i = max(half, min(n - 1 - half, i))
    return max(0, min(n - 1, i))


def footprint_bounds(cx: int, cy: int, half: int, shape: Tuple[int, int]) -> Footprint:
    H, W = shape
    return Footprint(
        row0=max(0, cy - half), row1=min(H, cy + half + 1),
        col0=max(0, cx - half), col1=min(W, cx + half + 1),
    )
# endregion


# region Surface Grid
class SurfaceGrid:
    """
    Height map of the pitch in millimetres, shape (H,W): rows run across the
    pitch width, columns along its length. The shape is fixed at construction.
    """

    def __init__(self, heights: np.ndarray):
        heights = np.asarray(heights, dtype=np.float64)
        if heights.ndim != 2 or heights.size == 0:
            raise ValueError(f"heights must be a non-empty 2-D array (got shape {heights.shape})")
        self._h = heights.copy()

    @classmethod
    def initialize(
        cls,
        width: int,
        length: int,
        noise_amplitude: float,
        defects: Iterable[DefectPatch] = (),
        depth_range: Tuple[float, float] = DEFECT_DEPTH_RANGE_MM,
        rng: Optional[np.random.Generator] = None,
    ) -> "SurfaceGrid":
        rng = rng if rng is not None else np.random.default_rng()
        H, W = int(width), int(length)
        heights = noise_amplitude * rng.standard_normal((H, W))

        # Union of patches: the deepest offset wins where patches overlap
        lo, hi = depth_range
        drawn = rng.uniform(lo, hi, (H, W))
        offsets = np.zeros((H, W))
        n = 0
        for d in defects:
            rs = slice(d.y, d.y + d.height)
            cs = slice(d.x, d.x + d.width)
            depth = drawn[rs, cs] if d.depth is None else abs(float(d.depth))
            offsets[rs, cs] = np.maximum(offsets[rs, cs], depth)
            n += 1

        logger.debug("Initialised %dx%d surface with %d defect patches", H, W, n)
        return cls(heights - offsets)

    # region Accessors
    @property
    def shape(self) -> Tuple[int, int]:
        return self._h.shape

    @property
    def heights(self) -> np.ndarray:
        """Read-only view of the live surface."""
        v = self._h.view()
        v.flags.writeable = False
        return v

    def copy_heights(self) -> np.ndarray:
        return self._h.copy()
    # endregion

    # region Footprint Operations
    def clamp_position(self, x: float, y: float, half: int) -> Tuple[int, int]:
        H, W = self.shape
        return _clamp_axis(x, half, W), _clamp_axis(y, half, H)

    def footprint(self, cx: int, cy: int, half: int) -> Footprint:
        return footprint_bounds(cx, cy, half, self.shape)

    def read_footprint(self, cx: int, cy: int, half: int) -> np.ndarray:
        fp = self.footprint(cx, cy, half)
        return self.heights[fp.rows, fp.cols]

    def flatten_footprint(
        self,
        cx: int,
        cy: int,
        half: int,
        noise_amplitude: float,
        rng: Optional[np.random.Generator] = None,
    ) -> Footprint:
        """Tamp the footprint back to baseline: replace it with fresh soil noise."""
        rng = rng if rng is not None else np.random.default_rng()
        fp = self.footprint(cx, cy, half)
        self._h[fp.rows, fp.cols] = noise_amplitude * rng.standard_normal(fp.shape)
        return fp
    # endregion
# endregion
