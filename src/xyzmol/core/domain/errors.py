#!/usr/bin/env python3
# src/xyzmol/core/domain/errors.py

"""
Errors raised while parsing XYZ input.

Every failure class of the format has its own exception type carrying the
structured fields (line number, counts) needed to locate the problem.
"""

from typing import Tuple


class ParseError(ValueError):
    """Base class for all XYZ parsing failures."""

    kind = "parse_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def _fields(self) -> Tuple:
        """Constructor arguments; also the basis of equality."""
        return (self.message,)

    def __reduce__(self):
        return (type(self), self._fields())

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class EmptyFileError(ParseError):
    """Input has no lines, or every line is blank."""

    kind = "empty_file"

    def __init__(self):
        super().__init__("empty file")

    def _fields(self) -> Tuple:
        return ()


class InvalidAtomCountError(ParseError):
    """The first line is not a non-negative integer."""

    kind = "invalid_atom_count"

    def __init__(self, detail: str):
        super().__init__(f"invalid atom count: {detail}")
        self.detail = detail

    def _fields(self) -> Tuple:
        return (self.detail,)


class MissingCommentLineError(ParseError):
    """Input ends before the comment line."""

    kind = "missing_comment_line"

    def __init__(self):
        super().__init__("missing comment line")

    def _fields(self) -> Tuple:
        return ()


class InvalidAtomLineError(ParseError):
    """An atom line is blank, too short, or starts with a numeric-looking element."""

    kind = "invalid_atom_line"

    def __init__(self, line_number: int, detail: str):
        super().__init__(f"invalid atom line at line {line_number}: {detail}")
        self.line_number = line_number
        self.detail = detail

    def _fields(self) -> Tuple:
        return (self.line_number, self.detail)


class InvalidCoordinateError(ParseError):
    """A coordinate is not a finite number."""

    kind = "invalid_coordinate"

    def __init__(self, line_number: int, detail: str):
        super().__init__(f"invalid coordinate at line {line_number}: {detail}")
        self.line_number = line_number
        self.detail = detail

    def _fields(self) -> Tuple:
        return (self.line_number, self.detail)


class AtomCountMismatchError(ParseError):
    """Number of atom lines differs from the declared count."""

    kind = "atom_count_mismatch"

    def __init__(self, expected: int, actual: int):
        super().__init__(
            f"atom count mismatch: expected {expected} atoms, found {actual}"
        )
        self.expected = expected
        self.actual = actual

    def _fields(self) -> Tuple:
        return (self.expected, self.actual)
