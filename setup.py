#!/usr/bin/env python3
# Copyright (C) 2019 Intel Corporation
# SPDX-License-Identifier: BSD-3-Clause

from setuptools import setup

setup(
    name="esparser",
    version="1.0.0",
    description="Parser for Endless Sky data files",
    packages=["esparser", "esparser._detail", "esparser.walkers"],
    package_data={"esparser": ["schema/*.schema"]},
    include_package_data=True,
    entry_points={
        "console_scripts": ["esparser=esparser.__main__:main"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development",
        "Topic :: Games/Entertainment",
    ],
    python_requires=">=3.11",
    install_requires=[
        "pathspec==0.12.1",
        "jsonschema==4.21.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
