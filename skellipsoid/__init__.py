"""Fit ellipsoids to 3D point clouds

Point clouds sampled around an ellipsoidal surface arise in the
calibration of magnetometers and accelerometers, and in 3D shape
estimation.  Function :func:`fit_ellipsoid` performs a closed-form linear
least squares fit of the algebraic quadric

.. math::

   Ax^2 + By^2 + Cz^2 + 2Dxy + 2Exz + 2Fyz + 2Gx + 2Hy + 2Iz + J = 0

and reduces it to the center and radii of the surface.  The fit can be
constrained to any of the types in :class:`EllipsoidType`.  The processing
sequence is:

1. Least squares solution of the design matrix for the requested type
2. Reconstruction of the algebraic form of the quadric
3. Translation of the quadric to its center
4. Eigendecomposition of the quadratic form
5. Canonical ordering of the axes (:func:`least_rotation_angle`)

Fitting
-------

.. autosummary::

   EllipsoidType
   EllipsoidFit
   fit_ellipsoid
   apply_ellipsoid
   quadric_matrix
   quadric_residuals
   least_rotation_angle

Plotting
--------

.. autosummary::

   EllipsoidFit.plot
   plotting.plot_ellipsoid

Files and configuration
-----------------------

.. autosummary::

   fit_points
   dump_config_template

"""

from skellipsoid.fit import (EllipsoidType, EllipsoidFit, fit_ellipsoid,
                             apply_ellipsoid, quadric_matrix,
                             quadric_residuals)
from skellipsoid.eigenorder import least_rotation_angle
from skellipsoid.fitfile import fit_points
from skellipsoid.fitconfig import dump_config_template

__author__ = "Sebastian Luque <spluque@gmail.com>"
__license__ = "AGPLv3"
__version__ = "0.1.0"
__all__ = ["EllipsoidType", "EllipsoidFit", "fit_ellipsoid",
           "apply_ellipsoid", "quadric_matrix", "quadric_residuals",
           "least_rotation_angle", "fit_points", "dump_config_template"]
