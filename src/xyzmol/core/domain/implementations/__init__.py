"""Concrete parser implementations."""

from .xyz_parser import XYZParser, parse_coordinate, parse_xyz, parse_xyz_str

__all__ = ["XYZParser", "parse_coordinate", "parse_xyz", "parse_xyz_str"]
