# SPDX-License-Identifier: MIT
"""Version comparison following SemVer precedence.

major.minor.patch compare numerically, then pre-release identifiers via
:func:`~cargo_version.order.compare_prerelease`. Build metadata is ignored
unless explicitly requested as a final tie-break.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, Optional, Union

from .order import compare_build
from .semver import Version, VersionReq

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def compare_versions(
    version1: VersionLike,
    version2: VersionLike,
    *,
    include_build: bool = False,
) -> int:
    """Compare two versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)
        include_build: Break precedence ties by comparing build metadata

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+23", "1.0.0+42")
        0
        >>> compare_versions("1.0.0+23", "1.0.0+42", include_build=True)
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = v1.cmp_precedence(v2)
    if result or not include_build:
        return result
    return compare_build(v1.build, v2.build)


_PrecedenceKey = cmp_to_key(compare_versions)


def version_key(version: VersionLike) -> Any:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _PrecedenceKey(_coerce(version))


def max_satisfying(versions: Iterable[VersionLike], req: VersionReq) -> Optional[Version]:
    """Return the greatest version in ``versions`` that satisfies ``req``.

    Returns:
        The highest matching Version, or None if nothing matches
    """
    best: Optional[Version] = None
    for candidate in map(_coerce, versions):
        if req.matches(candidate) and (best is None or candidate > best):
            best = candidate
    return best
