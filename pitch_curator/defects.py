# region Imports
from __future__ import annotations
import logging
from typing import List, Optional, Tuple
import numpy as np

from .config import DefectConfig
from .models import DefectPatch
# endregion

logger = logging.getLogger(__name__)


# region Random Defect Patches
def generate_defects(
    shape: Tuple[int, int],
    cfg: DefectConfig,
    rng: Optional[np.random.Generator] = None,
) -> List[DefectPatch]:
    """
    Draw a random number of rectangular depressions, each fully inside the
    grid with ``cfg.safe_margin`` cells to spare on every side. Depth is left
    unset so the surface draws it per cell from ``cfg.depth_range``.
    """
    rng = rng if rng is not None else np.random.default_rng()
    H, W = shape
    lo, hi = cfg.count_range
    smin, smax = cfg.size_range
    m = cfg.safe_margin

    n = int(rng.integers(lo, hi + 1))
    patches = []
    for _ in range(n):
        w = int(rng.integers(smin, smax + 1))
        h = int(rng.integers(smin, smax + 1))
        if w + 2 * m > W or h + 2 * m > H:
            raise ValueError(f"defect {w}x{h} with margin {m} does not fit a {H}x{W} grid")
        x = int(rng.integers(m, W - w - m + 1))
        y = int(rng.integers(m, H - h - m + 1))
        patches.append(DefectPatch(x=x, y=y, width=w, height=h))

    logger.info("Generated %d random defect patches", n)
    return patches
# endregion
