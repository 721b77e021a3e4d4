"""Command-line interface modules."""

from .inspect_xyz import main as inspect_xyz_main
from .validate_xyz import main as validate_xyz_main

__all__ = [
    "inspect_xyz_main",
    "validate_xyz_main",
]
