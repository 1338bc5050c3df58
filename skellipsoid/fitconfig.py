"""Read and write ellipsoid fit configuration files

A configuration is a JSON object with the following keys:

``log_level``
    Level name for the ``skellipsoid`` loggers, e.g. ``"INFO"``.
``read.points_name``
    Name of the ``(N, 3)`` variable in the NetCDF points file.
``read.load_dataset_kwargs``
    Keyword arguments passed to :func:`xarray.load_dataset`.
``fit.ftype``
    Fit type; one of the :class:`~skellipsoid.EllipsoidType` values,
    e.g. ``"arbitrary"`` or ``"aligned_xy_equal"``.
``fit.coefficients``
    Whether to keep the 10 quadric coefficients in the result.
``fit.eigen``
    Whether to keep eigenvalues and eigenvectors in the result.

"""
import json

__all__ = ["dump_config_template", "dump_config", "read_config"]

_DEFAULT_CONFIG = {
    'log_level': "INFO",
    'read': {
        'points_name': "points",
        'load_dataset_kwargs': {}
    },
    'fit': {
        'ftype': "arbitrary",
        'coefficients': True,
        'eigen': True
    }
}

_DUMP_INDENT = 4


def dump_config_template(fname):
    """Write the default fit configuration as a JSON template

    The template reads the points from a variable named ``points`` and
    requests an ``arbitrary`` fit keeping coefficients and eigen
    decomposition.

    Parameters
    ----------
    fname : str
        Path of the output file.

    Examples
    --------
    >>> dump_config_template("fit_config.json")  # doctest: +SKIP

    Set ``read.points_name`` to the variable holding the points in the
    NetCDF file, and ``fit.ftype`` to the constraints wanted.

    """
    with open(fname, "w") as ofile:
        json.dump(_DEFAULT_CONFIG, ofile, indent=_DUMP_INDENT)


def read_config(config_file):
    """Read a JSON fit configuration

    Keys are not validated here; an unknown ``fit.ftype`` is rejected
    when the fit runs.

    Parameters
    ----------
    config_file : str
        Path of the configuration file.

    Returns
    -------
    out : dict
        Nested dictionary with ``log_level``, ``read`` and ``fit`` keys.

    """
    with open(config_file, "r") as ifile:
        config = json.load(ifile)

    return(config)


def dump_config(fname, config_dict):
    """Write a fit configuration dictionary as JSON

    Parameters
    ----------
    fname : str
        Path of the output file.
    config_dict : dict
        Configuration with the ``read.points_name`` and ``fit.ftype``
        keys described in the module docstring.

    """
    with open(fname, "w") as ofile:
        json.dump(config_dict, ofile, indent=_DUMP_INDENT)
