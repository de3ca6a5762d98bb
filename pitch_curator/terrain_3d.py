# region Imports
import numpy as np
import pyvista as pv
# endregion


# region Pitch 3D Plot
def plot_pitch_3d(surface, path=None, cm_per_cell=5.0, z_exaggeration=50.0,
                  title="Pitch Surface 3D"):
    """
    Render a pitch height map (mm) with an optional sweep path overlay.
    Heights are tiny next to the pitch, so z is exaggerated for display.
    Requires pyvista installed.
    """
    if surface is None or np.ndim(surface) != 2:
        raise ValueError("surface must be a 2-D height map")
    H, W = surface.shape
    mpc = cm_per_cell / 100.0
    z = np.asarray(surface, dtype=np.float32) / 1000.0 * z_exaggeration

    # region Build Grid
    xs = np.arange(W, dtype=np.float32) * mpc
    ys = np.arange(H, dtype=np.float32) * mpc
    xx, yy = np.meshgrid(xs, ys)
    surf = pv.StructuredGrid(xx, yy, z)
    surf["height_mm"] = np.asarray(surface, dtype=np.float32).ravel(order="F")
    # endregion

    p = pv.Plotter()
    p.add_mesh(surf, scalars="height_mm", cmap="viridis", show_edges=False)
    p.add_scalar_bar(title="height_mm")

    # region Path Overlay
    if path is not None and len(path) > 1:
        xy = np.asarray(path, dtype=np.float64)
        pc = np.clip(np.rint(xy[:, 0]).astype(int), 0, W - 1)
        pr = np.clip(np.rint(xy[:, 1]).astype(int), 0, H - 1)
        pts = np.c_[pc * mpc, pr * mpc, z[pr, pc] + 0.01]
        p.add_lines(pts, color="cyan", width=2, connected=True)
    # endregion

    p.add_axes()
    p.add_text(title, color="white")
    p.set_background("black")
    p.show()
# endregion
