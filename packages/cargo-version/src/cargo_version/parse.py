# SPDX-License-Identifier: MIT
"""Recursive-descent parser for versions and version requirements.

The parser walks the input once, left to right, with an index into the
original string. Each helper takes the text and a start index and returns
the parsed value together with the index of the first unconsumed character,
or raises an :class:`~cargo_version.errors.InvalidVersionError` naming the
field being parsed and the offending character.

Grammar::

    version      := numeric '.' numeric '.' numeric ['-' pre] ['+' build]
    pre | build  := segment ('.' segment)*         segment := [0-9A-Za-z-]+
    comparator   := [op] ' '* numeric
                    ['.' (wildcard | numeric ['.' (wildcard | numeric
                    ['-' pre] ['+' build])])]
    version_req  := wildcard | comparator (',' ' '* comparator)*
    op           := '=' | '>' | '>=' | '<' | '<=' | '~' | '^'
    wildcard     := '*' | 'x' | 'X'

Only the space character is treated as whitespace. It may appear before and
after operators, comparators and commas, but never inside a partial version.
"""

from __future__ import annotations

import string
from typing import Optional

from .errors import (
    EmptySegmentError,
    ExcessiveComparatorsError,
    ExpectedCommaFoundError,
    IllegalCharacterError,
    InvalidVersionError,
    LeadingZeroError,
    NumericOverflowError,
    Position,
    UnexpectedAfterWildcardError,
    UnexpectedCharAfterError,
    UnexpectedCharError,
    UnexpectedEndError,
    WildcardNotSoleComparatorError,
)
from .op import DEFAULT_OP, Op
from .semver import MAX_COMPARATORS, MAX_NUMBER, Comparator, Version, VersionReq

_DIGITS = frozenset(string.digits)
_NONDIGITS = frozenset(string.ascii_letters + "-")
_WILDCARDS = frozenset("*xX")

# Operators are matched longest first
_OPERATORS = (
    (">=", Op.GREATER_EQ),
    ("<=", Op.LESS_EQ),
    ("=", Op.EXACT),
    (">", Op.GREATER),
    ("<", Op.LESS),
    ("~", Op.TILDE),
    ("^", Op.CARET),
)


def parse_version(text: str) -> Version:
    """Parse a full ``major.minor.patch[-pre][+build]`` version.

    Raises:
        InvalidVersionError: If the text is not a valid version

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, pre='', build='')
        >>> parse_version("0.4.0-beta.1+0851523")
        Version(major=0, minor=4, patch=0, pre='beta.1', build='0851523')
    """
    major, index = _numeric_identifier(text, 0, Position.MAJOR)
    index = _dot(text, index, Position.MAJOR)

    minor, index = _numeric_identifier(text, index, Position.MINOR)
    index = _dot(text, index, Position.MINOR)

    patch, index = _numeric_identifier(text, index, Position.PATCH)

    pre = ""
    if text.startswith("-", index):
        pre, index = _identifier(text, index + 1, Position.PRE)
        if not pre:
            raise EmptySegmentError(Position.PRE)

    build = ""
    if text.startswith("+", index):
        build, index = _identifier(text, index + 1, Position.BUILD)
        if not build:
            raise EmptySegmentError(Position.BUILD)

    if index < len(text):
        if build:
            position = Position.BUILD
        elif pre:
            position = Position.PRE
        else:
            position = Position.PATCH
        raise UnexpectedCharAfterError(position, text[index])

    return Version(major, minor, patch, pre, build)


def parse_comparator(text: str) -> Comparator:
    """Parse a single comparator such as ``>=1.2`` or ``~ 0.3.1-rc.1``.

    Raises:
        InvalidVersionError: If the text is not a valid comparator, or has
            anything other than spaces after it
    """
    index = _skip_spaces(text, 0)
    comparator, position, index = _comparator(text, index)
    if index < len(text):
        raise UnexpectedCharAfterError(position, text[index])
    return comparator


def parse_version_req(text: str) -> VersionReq:
    """Parse a comma-separated list of comparators, or a lone wildcard.

    A lone ``*``, ``x`` or ``X`` yields :attr:`VersionReq.STAR`. A wildcard
    may not be combined with any other comparator.

    Raises:
        InvalidVersionError: If the text is not a valid version requirement

    Examples:
        >>> str(parse_version_req(">= 1.0.0, <2"))
        '>=1.0.0, <2'
        >>> parse_version_req(" * ") is VersionReq.STAR
        True
    """
    index = _skip_spaces(text, 0)

    wildcard = _wildcard(text, index)
    if wildcard is not None:
        char, index = wildcard
        index = _skip_spaces(text, index)
        if index == len(text):
            return VersionReq.STAR
        if text[index] == ",":
            raise WildcardNotSoleComparatorError(char)
        raise UnexpectedAfterWildcardError()

    return VersionReq(tuple(_version_req(text, index)))


def parse_prerelease(text: str) -> str:
    """Validate a standalone pre-release identifier such as ``alpha.1``.

    The empty string is accepted and means "no pre-release".

    Raises:
        InvalidVersionError: If the identifier is malformed
    """
    return _standalone_identifier(text, Position.PRE)


def parse_build_metadata(text: str) -> str:
    """Validate standalone build metadata such as ``build.0042``.

    The empty string is accepted and means "no build metadata".

    Raises:
        InvalidVersionError: If the metadata is malformed
    """
    return _standalone_identifier(text, Position.BUILD)


def _standalone_identifier(text: str, position: Position) -> str:
    identifier, index = _identifier(text, 0, position)
    if index < len(text):
        raise IllegalCharacterError(position)
    return identifier


def _skip_spaces(text: str, index: int) -> int:
    while index < len(text) and text[index] == " ":
        index += 1
    return index


def _numeric_identifier(text: str, index: int, position: Position) -> tuple[int, int]:
    start = index
    value = 0

    while index < len(text) and text[index] in _DIGITS:
        if value == 0 and index > start:
            raise LeadingZeroError(position)
        value = value * 10 + int(text[index])
        if value > MAX_NUMBER:
            raise NumericOverflowError(position)
        index += 1

    if index > start:
        return value, index
    if index < len(text):
        raise UnexpectedCharError(position, text[index])
    raise UnexpectedEndError(position)


def _wildcard(text: str, index: int) -> Optional[tuple[str, int]]:
    if index < len(text) and text[index] in _WILDCARDS:
        return text[index], index + 1
    return None


def _dot(text: str, index: int, position: Position) -> int:
    if index >= len(text):
        raise UnexpectedEndError(position)
    if text[index] != ".":
        raise UnexpectedCharAfterError(position, text[index])
    return index + 1


def _identifier(text: str, index: int, position: Position) -> tuple[str, int]:
    """Scan dot-separated ``[0-9A-Za-z-]+`` segments starting at ``index``.

    Returns an empty identifier, without consuming anything, when the very
    first character cannot start a segment and is not a dot.
    """
    start = index
    segment_start = index
    segment_has_nondigit = False

    while True:
        char = text[index] if index < len(text) else ""
        if char in _NONDIGITS:
            segment_has_nondigit = True
            index += 1
            continue
        if char in _DIGITS:
            index += 1
            continue

        segment_len = index - segment_start
        if segment_len == 0:
            if index == start and char != ".":
                return "", start
            raise EmptySegmentError(position)

        if (
            position is Position.PRE
            and segment_len > 1
            and not segment_has_nondigit
            and text[segment_start] == "0"
        ):
            raise LeadingZeroError(position)

        if char != ".":
            return text[start:index], index

        index += 1
        segment_start = index
        segment_has_nondigit = False


def _op(text: str, index: int) -> tuple[Op, int]:
    for symbol, op in _OPERATORS:
        if text.startswith(symbol, index):
            return op, index + len(symbol)
    return DEFAULT_OP, index


def _comparator(text: str, index: int) -> tuple[Comparator, Position, int]:
    """Parse one comparator and any spaces after it.

    Returns the comparator, the position of the last field parsed (used to
    report what a stray character followed) and the next index.
    """
    op, after_op = _op(text, index)
    default_op = after_op == index
    index = _skip_spaces(text, after_op)

    position = Position.MAJOR
    major, index = _numeric_identifier(text, index, position)
    has_wildcard = False

    minor: Optional[int] = None
    if text.startswith(".", index):
        index += 1
        position = Position.MINOR
        wildcard = _wildcard(text, index)
        if wildcard is not None:
            has_wildcard = True
            if default_op:
                op = Op.WILDCARD
            index = wildcard[1]
        else:
            minor, index = _numeric_identifier(text, index, position)

    patch: Optional[int] = None
    if text.startswith(".", index):
        index += 1
        position = Position.PATCH
        wildcard = _wildcard(text, index)
        if wildcard is not None:
            if default_op:
                op = Op.WILDCARD
            index = wildcard[1]
        elif has_wildcard:
            raise UnexpectedAfterWildcardError()
        else:
            patch, index = _numeric_identifier(text, index, position)

    pre = ""
    if patch is not None and text.startswith("-", index):
        position = Position.PRE
        pre, index = _identifier(text, index + 1, position)
        if not pre:
            raise EmptySegmentError(position)

    # Build metadata is syntactically allowed but irrelevant to matching
    if patch is not None and text.startswith("+", index):
        position = Position.BUILD
        build, index = _identifier(text, index + 1, position)
        if not build:
            raise EmptySegmentError(position)

    index = _skip_spaces(text, index)

    return Comparator(op, major, minor, patch, pre), position, index


def _version_req(text: str, index: int) -> list[Comparator]:
    comparators: list[Comparator] = []

    while True:
        try:
            comparator, position, index = _comparator(text, index)
        except InvalidVersionError as error:
            wildcard = _wildcard(text, index)
            if wildcard is not None:
                char, rest = wildcard
                rest = _skip_spaces(text, rest)
                if rest == len(text) or text[rest] == ",":
                    raise WildcardNotSoleComparatorError(char) from error
            raise

        comparators.append(comparator)

        if index == len(text):
            return comparators

        if text[index] != ",":
            raise ExpectedCommaFoundError(position, text[index])
        index = _skip_spaces(text, index + 1)

        if len(comparators) == MAX_COMPARATORS:
            raise ExcessiveComparatorsError()
