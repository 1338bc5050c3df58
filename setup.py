import re
from setuptools import setup


def get_meta(name):
    """Read a dunder attribute from the package without importing it"""
    with open("skellipsoid/__init__.py") as f:
        meta = re.search(r'^__{}__ = "([^"]+)"'.format(name),
                         f.read(), re.M)

    return(meta.group(1))


def readme():
    with open("README.rst") as f:
        return(f.read())


def get_requirements():
    with open("requirements.txt") as f:
        reqs = f.read().splitlines()

    return(reqs)


REQUIREMENTS = get_requirements()
DEV_REQUIRES = ["ipython", "pytest"]
PACKAGES = ["skellipsoid", "skellipsoid.tests"]

setup(
    name="scikit-ellipsoid",
    version=get_meta("version"),
    python_requires=">=3.8",
    packages=PACKAGES,
    include_package_data=True,
    install_requires=REQUIREMENTS,
    extras_require={
        "dev": DEV_REQUIRES,
        "test": ["pytest"],
        "docs": ["sphinx"]
    },
    entry_points={
        "console_scripts": ["skellipsoid=skellipsoid.__main__:main"]
    },
    # metadata for upload to PyPI
    author="Sebastian Luque",
    author_email="spluque@gmail.com",
    description="Least squares fitting of ellipsoids to 3D point clouds",
    long_description=readme(),
    long_description_content_type="text/x-rst",
    license=get_meta("license"),
    keywords=["ellipsoid", "quadric", "least squares", "calibration",
              "magnetometer", "IMU"],
    classifiers=["Development Status :: 4 - Beta",
                 "Programming Language :: Python :: 3",
                 "Intended Audience :: Developers",
                 "Intended Audience :: Science/Research",
                 ("License :: OSI Approved :: "
                  "GNU Affero General Public License v3"),
                 "Topic :: Scientific/Engineering"]
)
