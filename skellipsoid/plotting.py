"""Plotting module

"""

import numpy as np
import matplotlib.pyplot as plt


def _ellipsoid_mesh(center, radii, evecs, n_mesh):
    """Mesh grid of the ellipsoid surface

    Returns
    -------
    tuple
        Three (n_mesh, n_mesh) arrays with x, y, z coordinates.

    """
    u = np.linspace(0, 2 * np.pi, n_mesh)
    v = np.linspace(0, np.pi, n_mesh)
    sphere = np.stack((np.outer(np.cos(u), np.sin(v)),
                       np.outer(np.sin(u), np.sin(v)),
                       np.outer(np.ones_like(u), np.cos(v))), axis=-1)
    surf = (sphere * radii) @ evecs.T + center
    return (surf[..., 0], surf[..., 1], surf[..., 2])


def plot_ellipsoid(points, ellfit, n_mesh=30, ax=None, title=None,
                   **kwargs):
    """3D scatter plot of points along with fitted ellipsoid

    Parameters
    ----------
    points : array_like, shape (N, 3)
        Array with the points that were fit.
    ellfit : EllipsoidFit
        Fit including eigenvectors (i.e. from ``fit_ellipsoid(...,
        eigen=True)``).
    n_mesh : int, optional
        Number of mesh lines along each parametric direction of the
        surface.
    ax : matplotlib.axes.Axes, optional
        3D axes to plot on.  A new figure is created if not provided.
    title : str, optional
        Title for the plot.
    **kwargs
        Optional keyword arguments passed to
        :func:`~matplotlib.pyplot.figure` (e.g. ``figsize``).

    Returns
    -------
    tuple
        Pyplot Figure and Axes instances.

    Notes
    -----
    The surface is not drawn if any of the radii is not finite.

    """
    if ellfit.eigenvectors is None:
        raise ValueError("ellfit must include eigenvectors; "
                         "fit with eigen=True")

    pts = np.asarray(points)
    if ax is None:
        fig = plt.figure(**kwargs)
        ax = fig.add_subplot(111, projection="3d")
    else:
        fig = ax.get_figure()

    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.scatter3D(pts[:, 0], pts[:, 1], pts[:, 2], s=3, color="k")
    if np.all(np.isfinite(ellfit.radii)):
        xs, ys, zs = _ellipsoid_mesh(ellfit.center, ellfit.radii,
                                     ellfit.eigenvectors, n_mesh)
        ax.plot_wireframe(xs, ys, zs, color="C0", linewidth=0.5,
                          alpha=0.6)

    return(fig, ax)
