# SPDX-License-Identifier: MIT
"""Evaluation of versions against comparators and version requirements.

Build metadata never takes part in matching. Pre-release versions are held
to a stricter rule: ``1.2.3-alpha.3`` only satisfies a requirement if at
least one comparator names ``1.2.3`` exactly and carries a pre-release of its
own. Without that opt-in, ``>=1.2.3, <1.8.0`` does not match
``1.2.3-alpha.1`` and ``*`` matches no pre-release at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from .op import Op
from .order import compare_prerelease

if TYPE_CHECKING:
    from .semver import Comparator, Version, VersionReq


def matches_req(req: VersionReq, version: Version) -> bool:
    """Return True if ``version`` satisfies every comparator of ``req``."""
    for comparator in req.comparators:
        if not _matches_impl(comparator, version):
            return False

    if not version.pre:
        return True

    return any(_pre_is_compatible(comparator, version) for comparator in req.comparators)


def matches_comparator(comparator: Comparator, version: Version) -> bool:
    """Return True if ``version`` satisfies a single comparator."""
    return _matches_impl(comparator, version) and (
        not version.pre or _pre_is_compatible(comparator, version)
    )


def _matches_exact(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return False
    if cmp.minor is not None and ver.minor != cmp.minor:
        return False
    if cmp.patch is not None and ver.patch != cmp.patch:
        return False
    return compare_prerelease(ver.pre, cmp.pre) == 0


def _matches_greater(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return ver.major > cmp.major

    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor > cmp.minor

    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch > cmp.patch

    return compare_prerelease(ver.pre, cmp.pre) > 0


def _matches_less(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return ver.major < cmp.major

    if cmp.minor is None:
        return False
    if ver.minor != cmp.minor:
        return ver.minor < cmp.minor

    if cmp.patch is None:
        return False
    if ver.patch != cmp.patch:
        return ver.patch < cmp.patch

    return compare_prerelease(ver.pre, cmp.pre) < 0


def _matches_greater_eq(cmp: Comparator, ver: Version) -> bool:
    return _matches_exact(cmp, ver) or _matches_greater(cmp, ver)


def _matches_less_eq(cmp: Comparator, ver: Version) -> bool:
    return _matches_exact(cmp, ver) or _matches_less(cmp, ver)


def _matches_tilde(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return False
    if cmp.minor is not None and ver.minor != cmp.minor:
        return False
    if cmp.patch is not None and ver.patch != cmp.patch:
        return ver.patch > cmp.patch

    return compare_prerelease(ver.pre, cmp.pre) >= 0


def _matches_caret(cmp: Comparator, ver: Version) -> bool:
    if ver.major != cmp.major:
        return False

    if cmp.minor is None:
        return True

    if cmp.patch is None:
        if cmp.major > 0:
            return ver.minor >= cmp.minor
        return ver.minor == cmp.minor

    if cmp.major > 0:
        if ver.minor != cmp.minor:
            return ver.minor > cmp.minor
        if ver.patch != cmp.patch:
            return ver.patch > cmp.patch
    elif cmp.minor > 0:
        if ver.minor != cmp.minor:
            return False
        if ver.patch != cmp.patch:
            return ver.patch > cmp.patch
    elif ver.minor != cmp.minor or ver.patch != cmp.patch:
        return False

    return compare_prerelease(ver.pre, cmp.pre) >= 0


def _pre_is_compatible(cmp: Comparator, ver: Version) -> bool:
    return (
        cmp.major == ver.major
        and cmp.minor == ver.minor
        and cmp.patch == ver.patch
        and bool(cmp.pre)
    )


_MATCHERS: dict[Op, Callable[[Comparator, Version], bool]] = {
    Op.EXACT: _matches_exact,
    Op.WILDCARD: _matches_exact,
    Op.GREATER: _matches_greater,
    Op.GREATER_EQ: _matches_greater_eq,
    Op.LESS: _matches_less,
    Op.LESS_EQ: _matches_less_eq,
    Op.TILDE: _matches_tilde,
    Op.CARET: _matches_caret,
}


def _matches_impl(cmp: Comparator, ver: Version) -> bool:
    return _MATCHERS[cmp.op](cmp, ver)
