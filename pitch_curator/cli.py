# region Header
"""
Autonomous pitch curator: randomized defect detection and repair on a
standard cricket pitch.

Usage:
    pitch-curator --config params.yaml --seed 7 --save-figures out/
"""
# endregion

# region Imports
import argparse
import logging
import os
import sys

from .config import ConfigError, load_config
from .simulation import run_mission

try:
    from .terrain_3d import plot_pitch_3d
    HAVE_3D = True
except ImportError:
    HAVE_3D = False
# endregion

logger = logging.getLogger("pitch_curator")


def _setup_logging(verbose: int) -> None:
    level = logging.DEBUG if verbose > 1 else logging.INFO if verbose else logging.WARNING
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pitch-curator", description="Autonomous Pitch Curator")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML configuration file (defaults to a standard pitch)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--no-plot", action="store_true", help="Skip matplotlib figures")
    parser.add_argument("--save-figures", type=str, default=None, metavar="DIR",
                        help="Write figures as PNG into DIR instead of showing them")
    parser.add_argument("--export", type=str, default=None, metavar="PATH",
                        help="Write summary and per-step logs as JSON")
    parser.add_argument("--show-3d", action="store_true", help="3D view of the restored pitch (pyvista)")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        cfg = load_config(args.config)
        if args.seed is not None:
            cfg.seed = args.seed
        result = run_mission(cfg)
    except (ConfigError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(result.summary.report())

    if args.export:
        from .export import write_mission_json
        write_mission_json(result, args.export)

    # region Plots
    if not args.no_plot:
        import matplotlib.pyplot as plt
        from . import viz
        figs = {
            "surfaces": viz.plot_surfaces(result),
            "metrics": viz.plot_metrics(result),
        }
        if args.save_figures:
            os.makedirs(args.save_figures, exist_ok=True)
            for name, fig in figs.items():
                fig.savefig(os.path.join(args.save_figures, f"{name}.png"), dpi=120)
                plt.close(fig)
            logger.info("Saved figures to %s", args.save_figures)
        else:
            viz.show()

    if args.show_3d:
        if not HAVE_3D:
            logger.warning("pyvista not installed; skipping 3D view")
        else:
            plot_pitch_3d(result.final_surface, path=result.path,
                          cm_per_cell=cfg.pitch.cm_per_cell,
                          title="Pitch Surface (Restored)")
    # endregion
    return 0


if __name__ == "__main__":
    sys.exit(main())
