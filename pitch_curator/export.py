# region Imports
from __future__ import annotations
import json
import logging
from dataclasses import asdict
from typing import Any, Dict

from .energy import joule_to_Wh
# endregion

logger = logging.getLogger(__name__)


# region Mission JSON
def mission_to_dict(result, include_log: bool = True) -> Dict[str, Any]:
    s = result.summary
    out: Dict[str, Any] = {
        "summary": {**asdict(s), "total_energy_Wh": joule_to_Wh(s.total_energy_J)},
        "grid_shape": list(result.final_surface.shape),
        "defects": [asdict(d) for d in result.defects],
        "waypoints": [{"x": float(x), "y": float(y)} for x, y in result.waypoints],
    }
    if include_log:
        out["log"] = asdict(result.log)
        out["path"] = [{"x": float(x), "y": float(y)} for x, y in result.path]
    return out


def write_mission_json(result, out_path: str = "mission.json", include_log: bool = True) -> str:
    """Export summary, plan and per-step series for external reporting."""
    data = mission_to_dict(result, include_log=include_log)
    with open(out_path, "w") as f:
        json.dump(data, f, indent=2)
    logger.info("Wrote %d steps to %s", result.summary.steps, out_path)
    return out_path
# endregion
