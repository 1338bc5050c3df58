import sys
import argparse
import logging
from skellipsoid import fit_points, EllipsoidType


def main(argv=None):
    _DESCRIPTION = "Fit an ellipsoid to points, given a configuration file"
    _FORMATERCLASS = argparse.ArgumentDefaultsHelpFormatter
    parser = argparse.ArgumentParser(prog="skellipsoid",
                                     description=_DESCRIPTION,
                                     formatter_class=_FORMATERCLASS)
    parser.add_argument("--config-file",
                        help="Path to JSON configuration file.")
    parser.add_argument("--ftype", choices=[t.value for t in EllipsoidType],
                        help="Type of fit, overriding configuration.")
    parser.add_argument("points_file",
                        help="Path to NetCDF points data file.")
    args = parser.parse_args(argv)
    # Level is set from the configuration file
    logging.basicConfig()
    kwargs = {}
    if args.ftype is not None:
        kwargs["ftype"] = args.ftype
    ellfit = fit_points(args.points_file, args.config_file, **kwargs)
    print(ellfit)
    return(0)


if __name__ == "__main__":
    sys.exit(main())
