"""scikit-ellipsoid tests"""

import numpy as np
from skellipsoid.vector import normalize


def random_ellipsoid(n, center, radii, rotm=None, noise=0, rng=None):
    r"""Generate samples on the surface of an ellipsoid

    Points on the unit sphere are scaled by `radii` along each axis,
    rotated by `rotm`, and translated to `center`.

    Parameters
    ----------
    n : int
        Output sample size.
    center : array_like
        (3,) array with the ellipsoid center.
    radii : array_like
        (3,) array with the radius along each axis.
    rotm : array_like, optional
        (3, 3) rotation matrix whose columns are the ellipsoid axes.
        Axes are aligned with the reference frame if not provided.
    noise : float, optional
        Standard deviation of Gaussian noise added to each coordinate.
    rng : Generator
        Random number generator object.  If not provided, a default one is
        used.

    Returns
    -------
    `ndarray`
        (n, 3) array of points.

    Examples
    --------
    >>> rng = np.random.default_rng(123)
    >>> pts = random_ellipsoid(500, [1, 0, 0], [3, 2, 1], rng=rng)
    >>> pts.shape
    (500, 3)

    """
    if rng is None:
        rng = np.random.default_rng()
    if rotm is None:
        rotm = np.eye(3)

    sphere = normalize(rng.standard_normal((n, 3)))
    pts = (sphere * radii) @ np.asarray(rotm).T + center
    if noise > 0:
        pts = pts + rng.normal(scale=noise, size=pts.shape)

    return(pts)


def random_hyperboloid(n, center, radii, rng=None):
    r"""Generate samples on an axis-aligned hyperboloid of one sheet

    Points satisfy :math:`x^2/a^2 + y^2/b^2 - z^2/c^2 = 1` relative to
    `center`, with :math:`(a, b, c)` given by `radii`.

    Parameters
    ----------
    n : int
        Output sample size.
    center : array_like
        (3,) array with the hyperboloid center.
    radii : array_like
        (3,) array with :math:`(a, b, c)`.
    rng : Generator
        Random number generator object.  If not provided, a default one is
        used.

    Returns
    -------
    `ndarray`
        (n, 3) array of points.

    """
    if rng is None:
        rng = np.random.default_rng()

    s = rng.uniform(-1, 1, n)
    t = rng.uniform(0, 2 * np.pi, n)
    pts = np.column_stack((np.cosh(s) * np.cos(t),
                           np.cosh(s) * np.sin(t),
                           np.sinh(s)))
    return(pts * radii + center)
