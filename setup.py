# -*- coding: utf-8 -*-
"""This module contains the setup for the installation of ecmodels."""
from sys import argv

from setuptools import find_packages, setup


setup_kwargs = dict()
setup_requirements = []
# prevent pytest-runner from being installed on every invocation
if {"pytest", "test", "ptr"}.intersection(argv):
    setup_requirements.append("pytest-runner")

extras = {
    "test": ["pytest"],
}
extras["all"] = sorted({req for reqs in extras.values() for req in reqs})

try:
    with open("README.rst") as handle:
        setup_kwargs["long_description"] = handle.read()
except IOError:
    setup_kwargs["long_description"] = ""

if __name__ == "__main__":
    setup(
        name="ecmodels",
        version="0.1.0",
        package_dir={"": "src"},
        packages=find_packages("src"),
        setup_requires=setup_requirements,
        install_requires=[
            "cobra>=0.19",
            "depinfo>=1.5",
            "numpy>=1.19",
            "pandas>=1.0",
            "scipy>=1.6",
        ],
        tests_require=["pytest"],
        extras_require=extras,
        description="ecmodels adds enzyme capacity constraints to "
        "constraint-based metabolic models",
        license="MIT",
        keywords=(
            "metabolism biology constraint-based modeling enzyme constraints "
            "GECKO sMOMENT cobra"
        ),
        classifiers=[
            "Development Status :: 4 - Beta",
            "Intended Audience :: Science/Research",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: Implementation :: CPython",
            "Topic :: Scientific/Engineering",
            "Topic :: Scientific/Engineering :: Bio-Informatics",
        ],
        python_requires=">=3.6",
        include_package_data=True,
        **setup_kwargs
    )
