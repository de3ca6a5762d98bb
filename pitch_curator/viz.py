# region Imports
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
# endregion


# region Surface Maps
def plot_surfaces(result, path=True, title=None):
    """
    Before/after height maps of the pitch. The sweep path is drawn over the
    restored surface when ``path`` is true.
    """
    n = result.summary.num_defects
    vmin = float(min(result.initial_surface.min(), result.final_surface.min()))
    vmax = float(max(result.initial_surface.max(), result.final_surface.max()))

    fig, (ax0, ax1) = plt.subplots(2, 1, figsize=(10, 6))
    fig.suptitle(title or "Randomized Field Results")
    im = ax0.imshow(result.initial_surface, origin="upper", cmap="viridis",
                    vmin=vmin, vmax=vmax, aspect="equal")
    ax0.set_title(f"A. Initial Surface (Generated {n} Random Defects)")
    ax1.imshow(result.final_surface, origin="upper", cmap="viridis",
               vmin=vmin, vmax=vmax, aspect="equal")
    ax1.set_title("B. Post-Curation (Restored)")

    if path and len(result.path):
        xs, ys = result.path[:, 0], result.path[:, 1]
        ax1.plot(xs, ys, color="white", linewidth=0.6, alpha=0.7)
        ax1.legend(handles=[Line2D([0], [0], color="white", lw=1, label="Sweep path")],
                   loc="lower right", fontsize=8, framealpha=0.6)

    cbar = fig.colorbar(im, ax=[ax0, ax1], fraction=0.046, pad=0.04)
    cbar.set_label("Height (mm)")
    return fig
# endregion


# region Time Series
def plot_metrics(result):
    """RMS roughness, cumulative energy and coverage against step number."""
    log, s = result.log, result.summary
    t = np.arange(1, len(log) + 1)

    fig = plt.figure(figsize=(9, 6))
    fig.suptitle("System Performance")

    ax = fig.add_subplot(2, 2, 1)
    ax.plot(t, log.rms_mm, "r", linewidth=1.5)
    ax.grid(True)
    ax.set_title("Surface Roughness (RMS) Improvement")
    ax.set_ylabel("RMS (mm)"); ax.set_xlabel("Time Steps")

    ax = fig.add_subplot(2, 2, 2)
    ax.plot(t, log.energy_J, "k", linewidth=1.5)
    ax.grid(True)
    ax.set_title("Cumulative Energy Consumption")
    ax.set_ylabel("Joules"); ax.set_xlabel("Time Steps")
    if len(t):
        ax.text(0.1, 0.8, f"Total: {s.total_energy_J:.0f} J", transform=ax.transAxes,
                bbox=dict(facecolor="yellow", edgecolor="black"))

    ax = fig.add_subplot(2, 1, 2)
    ax.fill_between(t, log.coverage_pct, color=(0.2, 0.7, 0.3), alpha=0.6)
    ax.grid(True)
    ax.set_title(f"Coverage Efficiency (Duty Cycle: {s.duty_cycle_pct:.1f}%)")
    ax.set_ylabel("Coverage %"); ax.set_xlabel("Time Steps")
    ax.set_ylim(0, 105)

    fig.tight_layout()
    return fig
# endregion


def show():
    plt.show()
