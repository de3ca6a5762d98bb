# region Header
"""
run_simulation.py — Autonomous Pitch Curator

Requires:
  pip install numpy matplotlib pyyaml
Optional (for 3D):
  pip install pyvista
"""
# endregion
import sys

from pitch_curator.cli import main

if __name__ == "__main__":
    sys.exit(main())
