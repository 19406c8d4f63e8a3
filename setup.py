#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="distcheck",
    version="0.1.0",
    description="Monte Carlo cross-checks for multivariate distribution implementations",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",

    # finds distcheck/ and its subpackages, but not tests
    packages=find_packages(exclude=["tests*", "docs*"]),

    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "scipy>=1.7",
    ],
    extras_require={
        "dev": [
            "pytest",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],

    include_package_data=False,
)
