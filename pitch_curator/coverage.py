# region Imports
from typing import Tuple
import numpy as np
# endregion


# region Coverage Mask
class CoverageTracker:
    """Append-only record of every cell that has been under the sensor."""

    def __init__(self, shape: Tuple[int, int]):
        H, W = shape
        if H < 1 or W < 1:
            raise ValueError(f"coverage grid must be non-empty (got {shape})")
        self._mask = np.zeros((H, W), dtype=bool)

    def mark_footprint(self, rows: slice, cols: slice) -> None:
        self._mask[rows, cols] = True

    @property
    def covered_cells(self) -> int:
        return int(np.count_nonzero(self._mask))

    @property
    def mask(self) -> np.ndarray:
        return self._mask.copy()

    def coverage_percent(self) -> float:
        return 100.0 * self.covered_cells / self._mask.size
# endregion
