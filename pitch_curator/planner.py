# region Imports
from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple
import numpy as np
# endregion

logger = logging.getLogger(__name__)


class PlannerError(ValueError):
    """Raised when the sweep parameters leave no row to drive."""


# region Row Positions
def sweep_rows(width: float, spacing: float, margin: float,
               include_far_edge: bool = False) -> np.ndarray:
    if spacing <= 0:
        raise PlannerError(f"row spacing must be > 0 (got {spacing})")
    last = width - margin
    if last < margin:
        raise PlannerError(f"margin {margin} leaves no row on a pitch {width} cells wide")

    n = int(math.floor((last - margin) / spacing + 1e-9)) + 1
    rows = margin + spacing * np.arange(n, dtype=np.float64)
    # spacing may not divide the span; the last row then stops short of the edge
    if include_far_edge and last - rows[-1] > 1e-9:
        rows = np.append(rows, last)
    return rows
# endregion


# region Boustrophedon Waypoints
def plan(width: float, length: float, robot_width: float, margin: float,
         include_far_edge: bool = False) -> np.ndarray:
    """
    Ox-plow sweep over the pitch. Rows run along the length at
    ``y = margin, margin + robot_width, ...``; even rows go left to right,
    odd rows right to left, so each row ends where the next one begins.

    Returns:
      (2*rows, 2) array of (x, y) waypoints.
    """
    x0, x1 = float(margin), float(length - margin)
    rows = sweep_rows(width, robot_width, margin, include_far_edge)

    wps = []
    for k, y in enumerate(rows):
        if k % 2 == 0:
            wps += [(x0, y), (x1, y)]
        else:
            wps += [(x1, y), (x0, y)]

    logger.debug("Planned %d sweep rows (%d waypoints)", len(rows), len(wps))
    return np.asarray(wps, dtype=np.float64)
# endregion


# region Path Interpolation
def interpolate(waypoints: Sequence[Tuple[float, float]]) -> np.ndarray:
    """
    Resample the waypoint polyline at unit resolution.

    Each leg contributes ``max(1, ceil(dist))`` samples starting at its first
    waypoint (its end point is the next leg's start); the final waypoint is
    appended once. Consecutive samples are therefore never more than one
    cell apart, and a zero-length leg emits a single sample.

    The path has ``sum(max(1, ceil(dist))) + 1`` samples: the trailing
    one is the final waypoint.
    """
    wp = np.asarray(waypoints, dtype=np.float64).reshape(-1, 2)
    if len(wp) == 0:
        return np.empty((0, 2))
    if len(wp) == 1:
        return wp.copy()

    segs = []
    for p1, p2 in zip(wp[:-1], wp[1:]):
        dist = float(np.hypot(*(p2 - p1)))
        n = max(1, int(math.ceil(dist)))
        t = np.arange(n, dtype=np.float64)[:, None] / n
        segs.append(p1 + t * (p2 - p1))
    segs.append(wp[-1:])
    return np.vstack(segs)
# endregion


def max_step(path: np.ndarray) -> float:
    if len(path) < 2:
        return 0.0
    return float(np.max(np.hypot(*np.diff(path, axis=0).T)))
