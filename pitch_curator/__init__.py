from .config import ConfigError, EnergyParams, PitchConfig, DefectConfig, SimConfig, load_config
from .controller import AgentState, InspectAndRepairController, StepOutcome
from .coverage import CoverageTracker
from .defects import generate_defects
from .grid import SurfaceGrid
from .metrics import duty_cycle, mean_abs_roughness, rms_roughness
from .models import DefectPatch, Footprint, MissionResult, MissionSummary, RunLog
from .planner import PlannerError, interpolate, plan
from .simulation import run_mission

__version__ = "0.1.0"
