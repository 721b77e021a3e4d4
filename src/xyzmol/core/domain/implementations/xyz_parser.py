#!/usr/bin/env python3
# src/xyzmol/core/domain/implementations/xyz_parser.py

"""
Strict parser for the XYZ molecular coordinate format.

Layout of a file:

    line 1        number of atoms N (integer, >= 0)
    line 2        free-form comment, may be empty
    line 3..N+2   ELEMENT X Y Z [extra columns ignored]

Trailing blank lines after the last atom are allowed. Any other deviation
raises a ParseError subclass naming the offending line.
"""

import logging
import math
import re
from typing import BinaryIO, List, TextIO, Union

from ..interfaces.structure_parser import StructureParser
from ..models.atom import Atom
from ..models.molecule import Molecule
from ..errors import (
    AtomCountMismatchError,
    EmptyFileError,
    InvalidAtomCountError,
    InvalidAtomLineError,
    InvalidCoordinateError,
    MissingCommentLineError,
)

logger = logging.getLogger(__name__)

ATOM_LINE_OFFSET = 3  # first atom is on line 3 (1-indexed)
MIN_ATOM_FIELDS = 4

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_NUMERIC_LEADING_CHARS = frozenset("0123456789+-.")
_SPECIAL_FLOAT_TOKENS = frozenset(["nan", "inf", "-inf", "+inf"])

# Unicode White_Space; unlike str.isspace this excludes \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
    "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"
)
_WHITESPACE_RUN_RE = re.compile(f"[{WHITESPACE}]+")

COUNT_MIN = -(2**63)
COUNT_MAX = 2**63 - 1


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""
    return text.strip(WHITESPACE)


def split_fields(text: str) -> List[str]:
    """Split on runs of whitespace, ignoring leading and trailing whitespace."""
    text = trim(text)
    return _WHITESPACE_RUN_RE.split(text) if text else []


def split_lines(content: str) -> List[str]:
    """
    Split buffered input into lines.

    A line ends at "\\n" with an optional preceding "\\r"; a terminator at the
    very end does not start another line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_coordinate(token: str, line_number: int) -> float:
    """
    Parse one coordinate token, rejecting NaN and infinity.

    Args:
        token: Text of the coordinate column
        line_number: 1-indexed line the token came from

    Returns:
        Finite coordinate value

    Raises:
        InvalidCoordinateError: If the token is not a finite decimal number
    """
    if token.lower() in _SPECIAL_FLOAT_TOKENS:
        raise InvalidCoordinateError(
            line_number,
            f"'{token}' is not a valid coordinate (NaN/Inf not allowed)",
        )

    if not _FLOAT_RE.fullmatch(token):
        raise InvalidCoordinateError(line_number, f"'{token}' is not a valid number")
    value = float(token)

    # overflowing literals such as 1e999 come back as inf
    if math.isnan(value) or math.isinf(value):
        raise InvalidCoordinateError(
            line_number, f"'{token}' resulted in NaN or Infinity"
        )

    return value


class XYZParser(StructureParser):
    """Parser turning XYZ text into a validated Molecule."""

    encoding = "utf-8"

    def parse(self, stream: Union[BinaryIO, TextIO]) -> Molecule:
        """
        Parse an XYZ document from a readable stream.

        Args:
            stream: Binary (decoded as UTF-8) or text stream

        Returns:
            Molecule with exactly as many atoms as the header declares

        Raises:
            ParseError: On the first malformed part of the input
        """
        content = stream.read()
        if isinstance(content, bytes):
            try:
                content = content.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise InvalidAtomCountError(str(e)) from e
        return self._parse_lines(split_lines(content))

    def parse_str(self, content: str) -> Molecule:
        """Parse an XYZ document held in a string."""
        return self._parse_lines(split_lines(content))

    def _parse_lines(self, lines: List[str]) -> Molecule:
        if not lines or all(not trim(line) for line in lines):
            raise EmptyFileError()

        expected_count = self._parse_atom_count(lines[0])
        logger.debug(f"Declared atom count: {expected_count}")

        if len(lines) < 2:
            raise MissingCommentLineError()
        comment = lines[1]

        atom_lines = lines[2:]
        atoms = []
        for i in range(expected_count):
            if i >= len(atom_lines):
                raise AtomCountMismatchError(expected=expected_count, actual=i)
            atoms.append(self._parse_atom_line(atom_lines[i], i + ATOM_LINE_OFFSET))

        extra = sum(1 for line in atom_lines[expected_count:] if trim(line))
        if extra:
            raise AtomCountMismatchError(
                expected=expected_count, actual=expected_count + extra
            )

        logger.debug(f"Parsed {len(atoms)} atoms")
        return Molecule(atoms=tuple(atoms), comment=comment)

    @staticmethod
    def _parse_atom_count(line: str) -> int:
        """Parse the header line holding the number of atoms."""
        text = trim(line)
        if not text:
            raise EmptyFileError()

        if "." in text:
            raise InvalidAtomCountError(f"'{text}' is not an integer")

        if not _INTEGER_RE.fullmatch(text):
            raise InvalidAtomCountError(f"'{text}' is not a valid integer")
        count = int(text)

        if not COUNT_MIN <= count <= COUNT_MAX:
            raise InvalidAtomCountError(f"'{text}' is not a valid integer")

        if count < 0:
            raise InvalidAtomCountError(f"'{count}' is negative")

        return count

    @staticmethod
    def _parse_atom_line(line: str, line_number: int) -> Atom:
        """Parse one ELEMENT X Y Z line."""
        text = trim(line)
        if not text:
            raise InvalidAtomLineError(line_number, "empty line in atom section")

        parts = split_fields(text)
        if len(parts) < MIN_ATOM_FIELDS:
            raise InvalidAtomLineError(
                line_number,
                f"expected at least {MIN_ATOM_FIELDS} fields, found {len(parts)}",
            )

        element = parts[0]
        if element[0] in _NUMERIC_LEADING_CHARS:
            raise InvalidAtomLineError(
                line_number, f"element symbol '{element}' appears to be a number"
            )

        x = parse_coordinate(parts[1], line_number)
        y = parse_coordinate(parts[2], line_number)
        z = parse_coordinate(parts[3], line_number)

        return Atom(element=element, x=x, y=y, z=z)


_default_parser = XYZParser()


def parse_xyz(stream: Union[BinaryIO, TextIO]) -> Molecule:
    """Parse an XYZ document from an open binary or text stream."""
    return _default_parser.parse(stream)


def parse_xyz_str(content: str) -> Molecule:
    """Parse an XYZ document from a string."""
    return _default_parser.parse_str(content)
