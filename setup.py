#!/usr/bin/env python3

import setuptools
import frac_version

with open("README.md", "r") as fd:
    long_description = fd.read()

setuptools.setup(
    name="pyfrac",
    version=frac_version.version,
    author="The PyFrac Developers",
    description="Exact fractions over bounded machine integers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests"]),
    py_modules=["frac_version"],
    python_requires=">=3.6, <4",
    extras_require={
        "test" : ["pytest"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries",
    ],
)
