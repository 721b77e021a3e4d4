#!/usr/bin/env python3

"""Setup script for the XYZ molecular coordinate parser package."""

from setuptools import setup, find_packages

setup(
    name="xyzmol",
    version="0.1.0",
    description="Strict parser for XYZ molecular coordinate files",
    author="Adam",
    author_email="adam@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "xyz-inspect=xyzmol.presentation.cli.inspect_xyz:main",
            "xyz-validate=xyzmol.presentation.cli.validate_xyz:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
