"""Command-line interfaces and other presentation layer components."""

from .cli.inspect_xyz import main as inspect_xyz_main
from .cli.validate_xyz import main as validate_xyz_main

__all__ = [
    "inspect_xyz_main",
    "validate_xyz_main",
]
