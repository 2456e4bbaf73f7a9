#!/usr/bin/env python
# -*- coding: utf-8 -*-

from os import path

from setuptools import find_packages, setup

from wottd.__version__ import __version__

install_requires = [
    "jsonschema>=4.0,<5.0",
]

test_requires = [
    "pytest>=6.2.5",
    "pytest-cov>=2.5.1",
    "tox>=3.0,<4.0",
    "faker>=13.14.0",
    "coverage>=5.0",
    "coloredlogs",
]

this_dir = path.abspath(path.dirname(__file__))

with open(path.join(this_dir, "README.md")) as fh:
    long_description = fh.read()

setup(
    name="wottd",
    version=__version__,
    description="Builder and validator for W3C WoT Thing Description documents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="wot iot thing description td w3c validation",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require={
        "tests": test_requires,
    },
)
