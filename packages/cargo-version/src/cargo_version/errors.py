# SPDX-License-Identifier: MIT
"""Errors raised while parsing versions and version requirements.

Every error is a subclass of :class:`InvalidVersionError`, which is itself a
``ValueError``. The message of each error reproduces the wording used by
Cargo so that diagnostics match what Rust users already know, e.g.::

    unexpected character 'a' while parsing major version number
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Position(Enum):
    """The field that was being parsed when an error occurred."""

    MAJOR = "major version number"
    MINOR = "minor version number"
    PATCH = "patch version number"
    PRE = "pre-release identifier"
    BUILD = "build metadata"

    def __str__(self) -> str:
        return self.value


def quoted(char: str) -> str:
    """Quote a character for display, rendering NUL as ``'\\0'``."""
    if char == "\0":
        return "'\\0'"
    return f"'{char}'"


class InvalidVersionError(ValueError):
    """Base class for all version and version requirement parse errors."""

    position: Optional[Position] = None
    char: Optional[str] = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnexpectedEndError(InvalidVersionError):
    """Input ended while a token was still required."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"unexpected end of input while parsing {position}")


class UnexpectedCharError(InvalidVersionError):
    """An invalid character was found while scanning a token."""

    def __init__(self, position: Position, char: str):
        self.position = position
        self.char = char
        super().__init__(f"unexpected character {quoted(char)} while parsing {position}")


class UnexpectedCharAfterError(InvalidVersionError):
    """An unexpected character immediately followed a completed token."""

    def __init__(self, position: Position, char: str):
        self.position = position
        self.char = char
        super().__init__(f"unexpected character {quoted(char)} after {position}")


class ExpectedCommaFoundError(InvalidVersionError):
    """Two comparators were not separated by a comma."""

    def __init__(self, position: Position, char: str):
        self.position = position
        self.char = char
        super().__init__(f"expected comma after {position}, found {quoted(char)}")


class LeadingZeroError(InvalidVersionError):
    """A numeric field or numeric pre-release segment has a leading zero."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"invalid leading zero in {position}")


class NumericOverflowError(InvalidVersionError):
    """A numeric field does not fit in an unsigned 64-bit integer."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"value of {position} exceeds maximum value")


class EmptySegmentError(InvalidVersionError):
    """A dot-separated identifier segment, or a whole pre/build section, is empty."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"empty identifier segment in {position}")


class IllegalCharacterError(InvalidVersionError):
    """A standalone pre-release or build identifier contains an illegal character."""

    def __init__(self, position: Position):
        self.position = position
        super().__init__(f"unexpected character in {position}")


class WildcardNotSoleComparatorError(InvalidVersionError):
    """A wildcard requirement was combined with other comparators."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"wildcard req ({char}) must be the only comparator in the version req"
        )


class UnexpectedAfterWildcardError(InvalidVersionError):
    """A numeric field followed a wildcard at a more significant position."""

    def __init__(self) -> None:
        super().__init__("unexpected character after wildcard in version req")


class ExcessiveComparatorsError(InvalidVersionError):
    """A version requirement has more comparators than allowed."""

    def __init__(self) -> None:
        super().__init__("excessive number of version comparators")
