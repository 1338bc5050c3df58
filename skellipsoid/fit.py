"""Least squares fitting of ellipsoids to 3D point clouds

The general quadric

.. math::

   Ax^2 + By^2 + Cz^2 + 2Dxy + 2Exz + 2Fyz + 2Gx + 2Hy + 2Iz + J = 0

is fit under the constraint :math:`A + B + C = -3`, which removes the scale
ambiguity of the homogeneous equation and leaves a linear least squares
problem in at most nine unknowns.  Constrained variants of the fit impose
equal radii along some axes and/or axes aligned with the reference frame.

"""

import enum
import logging
import numpy as np
from .eigenorder import least_rotation_angle
import skellipsoid.plotting as plotting

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())


class EllipsoidType(enum.Enum):
    """Types of ellipsoid fits

    ARBITRARY : rotated ellipsoid (any axes)
    XY_EQUAL : rotated ellipsoid with radius x=y
    XZ_EQUAL : rotated ellipsoid with radius x=z
    SPHERE : sphere, radius x=y=z
    ALIGNED : non-rotated ellipsoid
    ALIGNED_XY_EQUAL : non-rotated ellipsoid with radius x=y
    ALIGNED_XZ_EQUAL : non-rotated ellipsoid with radius x=z

    """
    ARBITRARY = "arbitrary"
    XY_EQUAL = "xy_equal"
    XZ_EQUAL = "xz_equal"
    SPHERE = "sphere"
    ALIGNED = "aligned"
    ALIGNED_XY_EQUAL = "aligned_xy_equal"
    ALIGNED_XZ_EQUAL = "aligned_xz_equal"


# Types of ellipsoid accepted fits
_ELLIPSOID_FTYPES = [t.value for t in EllipsoidType]


# Design matrix columns.  The quadratic combinations come from substituting
# A + B + C = -3 into the general quadric.

def _design_arbitrary(x, y, z):
    return np.hstack((x ** 2 + y ** 2 - 2 * z ** 2,
                      x ** 2 + z ** 2 - 2 * y ** 2,
                      2 * x * y, 2 * x * z, 2 * y * z,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_xy_equal(x, y, z):
    return np.hstack((x ** 2 + y ** 2 - 2 * z ** 2,
                      2 * x * y, 2 * x * z, 2 * y * z,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_xz_equal(x, y, z):
    return np.hstack((x ** 2 + z ** 2 - 2 * y ** 2,
                      2 * x * y, 2 * x * z, 2 * y * z,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_sphere(x, y, z):
    return np.hstack((2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_aligned(x, y, z):
    return np.hstack((x ** 2 + y ** 2 - 2 * z ** 2,
                      x ** 2 + z ** 2 - 2 * y ** 2,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_aligned_xy_equal(x, y, z):
    return np.hstack((x ** 2 + y ** 2 - 2 * z ** 2,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


def _design_aligned_xz_equal(x, y, z):
    return np.hstack((x ** 2 + z ** 2 - 2 * y ** 2,
                      2 * x, 2 * y, 2 * z, np.ones_like(x)))


# Conversion of the least squares solution back to the conventional
# algebraic form [A, B, C, D, E, F, G, H, I, J]

def _quad_free(u):
    return [u[0] + u[1] - 1, u[0] - 2 * u[1] - 1, u[1] - 2 * u[0] - 1]


def _quad_xy_equal(u):
    return [u[0] - 1, u[0] - 1, -2 * u[0] - 1]


def _quad_xz_equal(u):
    return [u[0] - 1, -2 * u[0] - 1, u[0] - 1]


def _coefs_arbitrary(u):
    return np.concatenate((_quad_free(u), u[2:9]))


def _coefs_xy_equal(u):
    return np.concatenate((_quad_xy_equal(u), u[1:8]))


def _coefs_xz_equal(u):
    return np.concatenate((_quad_xz_equal(u), u[1:8]))


def _coefs_sphere(u):
    return np.concatenate(([-1, -1, -1], np.zeros(3), u[0:4]))


def _coefs_aligned(u):
    return np.concatenate((_quad_free(u), np.zeros(3), u[2:6]))


def _coefs_aligned_xy_equal(u):
    return np.concatenate((_quad_xy_equal(u), np.zeros(3), u[1:5]))


def _coefs_aligned_xz_equal(u):
    return np.concatenate((_quad_xz_equal(u), np.zeros(3), u[1:5]))


# Mapping of fit type with design matrix builder and back-substitution
_FIT_MODELS = {
    EllipsoidType.ARBITRARY: (_design_arbitrary, _coefs_arbitrary),
    EllipsoidType.XY_EQUAL: (_design_xy_equal, _coefs_xy_equal),
    EllipsoidType.XZ_EQUAL: (_design_xz_equal, _coefs_xz_equal),
    EllipsoidType.SPHERE: (_design_sphere, _coefs_sphere),
    EllipsoidType.ALIGNED: (_design_aligned, _coefs_aligned),
    EllipsoidType.ALIGNED_XY_EQUAL: (_design_aligned_xy_equal,
                                     _coefs_aligned_xy_equal),
    EllipsoidType.ALIGNED_XZ_EQUAL: (_design_aligned_xz_equal,
                                     _coefs_aligned_xz_equal),
}


class EllipsoidFit:
    """Results of an ellipsoid fit

    Unpacks as ``center, radii = fit`` for convenience.

    Attributes
    ----------
    center : numpy.ndarray
        (3,) array with the center of the ellipsoid.
    radii : numpy.ndarray
        (3,) array with the radius along each principal axis, ordered as
        the columns of `eigenvectors`.  NaN where the fitted surface is not
        an ellipsoid along that axis.
    ftype : EllipsoidType
        Type of fit.
    coefficients : numpy.ndarray or None
        (10,) array with the coefficients ``[A, B, C, D, E, F, G, H, I,
        J]`` of the algebraic form, if requested.
    eigenvalues : numpy.ndarray or None
        (3,) array with the canonicalized eigenvalues, if requested.
    eigenvectors : numpy.ndarray or None
        (3, 3) array with the canonicalized eigenvectors as columns, if
        requested.

    """
    def __init__(self, center, radii, ftype, coefficients=None,
                 eigenvalues=None, eigenvectors=None):
        self.center = center
        self.radii = radii
        self.ftype = ftype
        self.coefficients = coefficients
        self.eigenvalues = eigenvalues
        self.eigenvectors = eigenvectors

    def __iter__(self):
        return iter((self.center, self.radii))

    def plot(self, points, **kwargs):
        """3D scatter plot of points along with the fitted ellipsoid

        Parameters
        ----------
        points : array_like, shape (N, 3)
            Array with the points that were fit.
        **kwargs : optional keyword arguments
            Passed to :func:`~plotting.plot_ellipsoid`.

        Returns
        -------
        tuple
            Pyplot Figure and Axes instances.

        """
        return plotting.plot_ellipsoid(points, self, **kwargs)

    def __str__(self):
        objcls = ("Ellipsoid fit -- Class {} object\n"
                  .format(self.__class__.__name__))
        ftype = "{0:<20} {1}\n".format("Type", self.ftype.value)
        center = "{0:<20} {1}\n".format("Center", self.center)
        radii = "{0:<20} {1}".format("Radii", self.radii)
        out = objcls + ftype + center + radii
        if self.coefficients is not None:
            out += "\n{0:<20} {1}".format("Coefficients", self.coefficients)
        if self.eigenvalues is not None:
            out += "\n{0:<20} {1}".format("Eigenvalues", self.eigenvalues)
        if self.eigenvectors is not None:
            evecs = np.array2string(self.eigenvectors,
                                    prefix=" " * 21)
            out += "\n{0:<20} {1}".format("Eigenvectors", evecs)

        return out


def _get_ftype(ftype):
    """Return the EllipsoidType member for a member or its value"""
    if isinstance(ftype, EllipsoidType):
        return ftype
    if ftype not in _ELLIPSOID_FTYPES:
        raise ValueError("ftype must be one of: {}"
                         .format(_ELLIPSOID_FTYPES))
    return EllipsoidType(ftype)


def _as_points(points):
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("points must be an (N, 3) array, got shape {}"
                         .format(pts.shape))
    return pts


def quadric_matrix(coefficients):
    """Symmetric 4x4 matrix of the algebraic form of a quadric

    Parameters
    ----------
    coefficients : array_like
        (10,) array with coefficients ``[A, B, C, D, E, F, G, H, I, J]``.

    Returns
    -------
    numpy.ndarray
        (4, 4) array such that :math:`[x, y, z, 1] M [x, y, z, 1]^T` is the
        quadric's value at :math:`(x, y, z)`.

    """
    v = np.asarray(coefficients, dtype=float)
    return np.array([[v[0], v[3], v[4], v[6]],
                     [v[3], v[1], v[5], v[7]],
                     [v[4], v[5], v[2], v[8]],
                     [v[6], v[7], v[8], v[9]]])


def quadric_residuals(points, coefficients):
    """Algebraic residual of each point with respect to a quadric

    Parameters
    ----------
    points : array_like
        (N, 3) array of x, y, z coordinates.
    coefficients : array_like
        (10,) array with coefficients ``[A, B, C, D, E, F, G, H, I, J]``.

    Returns
    -------
    numpy.ndarray
        (N,) array with the value of the quadric at each point; zero for
        points lying on the surface.

    """
    pts = _as_points(points)
    homog = np.column_stack((pts, np.ones(pts.shape[0])))
    qmtx = quadric_matrix(coefficients)
    return np.einsum("ij,jk,ik->i", homog, qmtx, homog)


def fit_ellipsoid(points, ftype="arbitrary", coefficients=False,
                  eigen=False):
    """Fit a (non) rotated ellipsoid or sphere to 3D point data

    Parameters
    ----------
    points : array_like
        (N, 3) array of measured x, y, z components.  At least 9
        (non-degenerate) points are needed for an arbitrary fit; this is
        not checked.
    ftype : str or EllipsoidType, optional
        Model to fit (one of 'arbitrary', 'xy_equal', 'xz_equal',
        'sphere', 'aligned', 'aligned_xy_equal', 'aligned_xz_equal').
    coefficients : bool, optional
        Whether to include the coefficients of the algebraic form in the
        output.
    eigen : bool, optional
        Whether to include the canonicalized eigenvalues and eigenvectors
        in the output.

    Returns
    -------
    EllipsoidFit

    Notes
    -----
    The fit never fails on degenerate input.  A rank deficient problem
    yields the minimum norm least squares solution, and a fitted surface
    that is not an ellipsoid yields NaN radii.

    Examples
    --------
    >>> rng = np.random.default_rng(123)
    >>> u = rng.standard_normal((100, 3))
    >>> u /= np.linalg.norm(u, axis=1, keepdims=True)
    >>> center, radii = fit_ellipsoid(u * [3, 2, 1] + [1, 0, -1])
    >>> np.round(radii, 6)
    array([3., 2., 1.])

    """
    ftype = _get_ftype(ftype)
    pts = _as_points(points)
    design_fun, coefs_fun = _FIT_MODELS[ftype]

    x = pts[:, 0, np.newaxis]
    y = pts[:, 1, np.newaxis]
    z = pts[:, 2, np.newaxis]

    D = design_fun(x, y, z)
    d2 = (x ** 2 + y ** 2 + z ** 2).ravel()
    logger.debug("Fitting {} ellipsoid to {} points ({} parameters)"
                 .format(ftype.value, pts.shape[0], D.shape[1]))

    # Solve the normal system of equations
    u, _, rank, _ = np.linalg.lstsq(D.T @ D, D.T @ d2, rcond=None)
    logger.debug("Normal equations rank: {}".format(rank))
    if rank < D.shape[1]:
        logger.warning("Rank deficient design matrix ({} < {}); using "
                       "minimum norm solution".format(rank, D.shape[1]))

    v = coefs_fun(u)
    A = quadric_matrix(v)
    ofs = np.linalg.lstsq(A[:3, :3], -v[6:9], rcond=None)[0]
    Tmtx = np.eye(4)
    Tmtx[3, :3] = ofs
    AT = Tmtx @ A @ Tmtx.T      # ellipsoid translated to 0, 0, 0
    with np.errstate(divide="ignore", invalid="ignore"):
        AT_norm = AT[:3, :3] / -AT[3, 3]
    if np.all(np.isfinite(AT_norm)):
        ev, evecs = np.linalg.eig(AT_norm)
        ev, evecs = least_rotation_angle(ev.real, evecs.real)
    else:
        # Zero constant term after translation; no eigenproblem to solve
        ev = np.full(3, np.nan)
        evecs = np.full((3, 3), np.nan)
    with np.errstate(divide="ignore", invalid="ignore"):
        radii = np.sqrt(1.0 / ev)

    if not np.all(np.isfinite(radii)):
        logger.warning("Non-finite radii {}; fitted surface is not an "
                       "ellipsoid".format(radii))

    out = EllipsoidFit(ofs, radii, ftype)
    if coefficients:
        out.coefficients = v
    if eigen:
        out.eigenvalues = ev
        out.eigenvectors = evecs

    return out


def apply_ellipsoid(points, center, radii, evecs, ref_r=1.0):
    """Apply ellipsoid fit to point array

    Map points on the fitted ellipsoid onto a sphere of radius `ref_r`
    centered at the origin.

    Parameters
    ----------
    points : array_like
        (N, 3) array of x, y, z components.
    center : array_like
        (3,) array with the ellipsoid center.
    radii : array_like
        (3,) array with the ellipsoid radii.
    evecs : array_like
        (3, 3) array with the ellipsoid axes as columns, ordered as
        `radii`.
    ref_r : float, optional
        Radius of the output sphere.

    Returns
    -------
    numpy.ndarray
        (N, 3) array with calibrated points, expressed in the frame of the
        ellipsoid axes.

    """
    points_new = _as_points(points) - center
    points_new = points_new @ evecs
    # Scale to sphere
    points_new = points_new / radii * ref_r
    return points_new
