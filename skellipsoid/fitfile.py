"""Fit an ellipsoid to point data in a NetCDF file

"""

import copy
import logging
import xarray as xr
import skellipsoid.fitconfig as fitconfig
from skellipsoid.fit import fit_ellipsoid


def fit_points(points_file, config_file=None, **kwargs):
    """Perform ellipsoid fit, given a configuration file

    Parameters
    ----------
    points_file : str
        A valid string path for NetCDF data file containing an (N, 3)
        variable with the points to fit.
    config_file : str, optional
        A valid string path for fit configuration file.  The default
        configuration is used if not provided.
    **kwargs : optional keyword arguments
        Override the ``fit`` section of the configuration (e.g.
        ``ftype``).

    Returns
    -------
    out : EllipsoidFit

    See Also
    --------
    dump_config_template : configuration template

    """
    if config_file is None:
        config = copy.deepcopy(fitconfig._DEFAULT_CONFIG)
    else:
        config = fitconfig.read_config(config_file)

    logger = logging.getLogger(__name__)
    logger.setLevel(config["log_level"])

    load_dataset_kwargs = config["read"].get("load_dataset_kwargs", {})
    logger.info("Reading config: {}, {}"
                .format(config["read"], load_dataset_kwargs))
    points_ds = xr.load_dataset(points_file, **load_dataset_kwargs)
    points = points_ds[config["read"]["points_name"]].to_numpy()

    fit_config = dict(config["fit"], **kwargs)
    logger.info("Fit config: {}".format(fit_config))
    ellfit = fit_ellipsoid(points, **fit_config)
    logger.info("Center: {}, radii: {}".format(ellfit.center, ellfit.radii))

    return(ellfit)
