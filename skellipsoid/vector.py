"""Utilities for common vector operations


"""
import numpy as np
from scipy.spatial.transform import Rotation as R


def normalize(v):
    """Normalize vector

    Parameters
    ----------
    v : array_like (N,) or (M,N)
        input vector

    Returns
    -------
    numpy.ndarray
        Normalized vector having magnitude 1.

    """
    return v / np.linalg.norm(v, axis=-1, keepdims=True)


def vangle(v1, v2):
    """Angle between one or more vectors

    Parameters
    ----------
    v1 : array_like (N,) or (M,N)
        vector 1
    v2 : array_like (N,) or (M,N)
        vector 2

    Returns
    -------
    angle : double or numpy.ndarray(M,)
        angle between v1 and v2

    Example
    -------
    >>> v1 = np.array([[1,2,3],
    ...                [4,5,6]])
    >>> v2 = np.array([[1,0,0],
    ...                [0,1,0]])
    >>> vangle(v1,v2)
    array([1.30024656, 0.96453036])

    Notes
    -----
    .. math::

       \\alpha =arccos(\\frac{\\vec{v_1} \\cdot \\vec{v_2}}{| \\vec{v_1} |
       \\cdot | \\vec{v_2}|})

    """
    v1_norm = normalize(np.asarray(v1, dtype=float))
    v2_norm = normalize(np.asarray(v2, dtype=float))
    v1v2 = np.einsum("ij,ij->i", *np.atleast_2d(v1_norm, v2_norm))
    angle = np.arccos(np.clip(v1v2, -1, 1))

    if len(angle) == 1:
        angle = angle.item()

    return angle


def rotation_angle(rotm):
    """Angle of the axis-angle representation of rotation matrices

    Parameters
    ----------
    rotm : array_like (3,3) or (M,3,3)
        One or more rotation matrices, with positive determinant.
        Matrices that are not exactly orthogonal are approximated by the
        closest orthogonal matrix.

    Returns
    -------
    angle : double or numpy.ndarray(M,)
        Rotation angle in radians, in [0, pi].

    Example
    -------
    >>> rotation_angle(np.array([[0, -1, 0],
    ...                          [1, 0, 0],
    ...                          [0, 0, 1]]))
    1.5707963267948966

    """
    return R.from_matrix(rotm).magnitude()
