# SPDX-License-Identifier: MIT
"""Parsing, matching and ordering of versions in Cargo's flavor of SemVer.

This package implements Cargo's interpretation of Semantic Versioning:
``major.minor.patch`` versions with optional pre-release and build metadata,
and version requirements made of comma-separated comparators using ``=``,
``>``, ``>=``, ``<``, ``<=``, ``~``, ``^`` and the ``*``/``x``/``X``
wildcards.

Example:
    >>> from cargo_version import Version, VersionReq
    >>>
    >>> req = VersionReq.parse(">=1.2.3, <1.8.0")
    >>> req.matches(Version.parse("1.2.3-alpha.1"))
    False
    >>> req.matches(Version.parse("1.3.0"))
    True
    >>>
    >>> str(VersionReq.parse("1.x"))
    '1.*'
"""

import logging

__version__ = "0.1.0"

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
from .op import Op
from .order import compare_build, compare_prerelease
from .semver import MAX_COMPARATORS, Comparator, Version, VersionReq
from .parse import (
    parse_build_metadata,
    parse_comparator,
    parse_prerelease,
    parse_version,
    parse_version_req,
)
from .compare import compare_versions, max_satisfying, version_key

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Data model
    "Version",
    "Comparator",
    "VersionReq",
    "Op",
    "MAX_COMPARATORS",
    # Parsing
    "parse_version",
    "parse_version_req",
    "parse_comparator",
    "parse_prerelease",
    "parse_build_metadata",
    # Ordering
    "compare_versions",
    "compare_prerelease",
    "compare_build",
    "version_key",
    "max_satisfying",
    # Errors
    "Position",
    "InvalidVersionError",
    "UnexpectedEndError",
    "UnexpectedCharError",
    "UnexpectedCharAfterError",
    "ExpectedCommaFoundError",
    "LeadingZeroError",
    "NumericOverflowError",
    "EmptySegmentError",
    "IllegalCharacterError",
    "WildcardNotSoleComparatorError",
    "UnexpectedAfterWildcardError",
    "ExcessiveComparatorsError",
]
