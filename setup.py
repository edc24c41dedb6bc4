#!/usr/bin/env python
# -*- coding: utf-8 -*-

from os import path

from setuptools import find_packages, setup

from thingpy.__version__ import __version__

install_requires = [
    "tornado>=6.1,<7.0",
    "jsonschema>=3.2,<5.0",
    "rx>=3.0,<4.0",
]

test_requires = [
    "pytest>=6.2.5",
    "pytest-cov>=2.5.1",
    "mock>=4.0",
    "faker>=13.14.0",
    "coverage>=5.0",
]

this_dir = path.abspath(path.dirname(__file__))

with open(path.join(this_dir, "README.md")) as fh:
    long_description = fh.read()

setup(
    name="thingpy",
    version=__version__,
    description="Python model of a Web Thing: properties, actions, events and subscriber notifications",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="wot iot webthing thing-description",
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
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        "tests": test_requires,
    },
)
