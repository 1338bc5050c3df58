"""Canonical ordering of eigenvalue/eigenvector sets

Eigensolvers return eigenpairs in no particular order, and each
eigenvector is only defined up to its sign.  The functions here choose,
among all equivalent relabelings, the right-handed basis closest to the
reference frame, so that ellipsoid axes are reported consistently.

"""

import itertools
import logging
import numpy as np
from .vector import rotation_angle

logger = logging.getLogger(__name__)
# Add the null handler if importing as library; whatever using this library
# should set up logging.basicConfig() as needed
logger.addHandler(logging.NullHandler())

# Angles within this tolerance of the minimum are considered ties [rad]
_ANGLE_TOL = 1e-10

# Column permutations and sign patterns, in order of preference for ties
_PERMUTATIONS = np.array(list(itertools.permutations(range(3))))
_SIGNS = np.array(list(itertools.product((1.0, -1.0), repeat=3)))


def _relabelings(evecs):
    """Stack all column permutations and sign flips of a 3x3 matrix

    Returns
    -------
    tuple
        (48, 3, 3) array with candidate matrices, and (48,) arrays with
        the index of the permutation and sign pattern of each candidate.

    """
    perm_idx, sign_idx = np.meshgrid(np.arange(len(_PERMUTATIONS)),
                                     np.arange(len(_SIGNS)),
                                     indexing="ij")
    perm_idx = perm_idx.ravel()
    sign_idx = sign_idx.ravel()
    cands = (evecs[:, _PERMUTATIONS[perm_idx]]
             .transpose(1, 0, 2) * _SIGNS[sign_idx][:, np.newaxis, :])
    return cands, perm_idx, sign_idx


def least_rotation_angle(evals, evecs):
    """Order eigenpairs for the least rotation from the reference frame

    Among the 48 column permutations and sign flips of `evecs`, consider
    the right-handed ones (positive determinant) as rotation matrices and
    choose the one with the smallest rotation angle.  Eigenvalues are
    permuted along with their eigenvectors.

    Parameters
    ----------
    evals : numpy.ndarray
        (3,) array of eigenvalues.  Overwritten with the result.
    evecs : numpy.ndarray
        (3, 3) array with eigenvectors as columns.  Overwritten with the
        result.

    Returns
    -------
    tuple
        The reordered `evals` and `evecs` arrays (the input objects).

    Notes
    -----
    Candidates whose angles are within 1e-10 rad of the minimum, such as
    those arising from repeated eigenvalues, are resolved by taking the
    first in enumeration order: permutations in lexicographic order, then
    sign patterns with later axes flipped first.  The identity relabeling
    is therefore preferred whenever it ties.

    Examples
    --------
    >>> evals = np.array([1.0, 2.0, 3.0])
    >>> evecs = np.array([[0.0, -1.0, 0.0],
    ...                   [1.0, 0.0, 0.0],
    ...                   [0.0, 0.0, 1.0]])
    >>> evals, evecs = least_rotation_angle(evals, evecs)
    >>> evals
    array([2., 1., 3.])

    """
    cands, perm_idx, sign_idx = _relabelings(evecs)
    proper = np.linalg.det(cands) > 0
    if not np.any(proper):
        logger.warning("Singular eigenvector matrix; eigenpairs "
                       "left in input order")
        return evals, evecs

    angles = rotation_angle(cands[proper])
    best = np.flatnonzero(angles <= angles.min() + _ANGLE_TOL)[0]
    perm = _PERMUTATIONS[perm_idx[proper][best]]
    logger.debug("Eigenpair order {}, signs {}, rotation angle {:.6f}"
                 .format(perm, _SIGNS[sign_idx[proper][best]],
                         angles[best]))
    evals[:] = evals[perm]
    evecs[:] = cands[proper][best]

    return evals, evecs
