# SPDX-License-Identifier: MIT
"""Version, comparator and version requirement value types.

All three are frozen dataclasses. They are built either by the parser or by
direct construction from already-validated fields::

    >>> Version.parse("1.2.3-alpha.1+build.5")
    Version(major=1, minor=2, patch=3, pre='alpha.1', build='build.5')
    >>> VersionReq.parse(">=1.2.3, <1.8").matches(Version(1, 5, 0))
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .display import format_comparator, format_version, format_version_req
from .errors import ExcessiveComparatorsError
from .matching import matches_comparator, matches_req
from .op import Op
from .order import compare_build, compare_prerelease

# Largest value of a major, minor or patch number (u64::MAX)
MAX_NUMBER = 2**64 - 1

# Largest number of comparators in a single version requirement
MAX_COMPARATORS = 32


@dataclass(frozen=True, slots=True)
class Version:
    """A SemVer version as defined by https://semver.org.

    Equality covers every field, build metadata included. Ordering follows
    SemVer precedence: major, minor and patch compare numerically, then a
    release ranks above any of its pre-releases, then pre-release identifiers
    compare field by field. Versions of equal precedence are ordered by
    build metadata, so the comparison operators agree with ``==``:
    ``1.2.3+23 < 1.2.3+42``. Use :meth:`cmp_precedence` to ignore build
    metadata.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        pre: Pre-release identifier (e.g. "alpha.1"), "" when absent
        build: Build metadata (e.g. "build.123"), "" when absent
    """

    major: int
    minor: int
    patch: int
    pre: str = ""
    build: str = ""

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse a version such as ``1.0.119`` or ``1.0.0-rc.1+build.5``.

        Raises:
            InvalidVersionError: For too few components (``1.0``), leading
                zeros (``1.01.0``), stray characters (``1.0.unknown``), empty
                pre-release or build sections (``1.0.0-``), identifiers with
                illegal characters (``1.0.0-alpha_123``) or numbers that
                overflow 64 bits.
        """
        from .parse import parse_version

        return parse_version(text)

    def __str__(self) -> str:
        return format_version(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.pre)

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def cmp_precedence(self, other: "Version") -> int:
        """Compare SemVer precedence with ``other``, returning -1, 0 or 1."""
        ours = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if ours != theirs:
            return -1 if ours < theirs else 1
        return compare_prerelease(self.pre, other.pre)

    def _cmp(self, other: "Version") -> int:
        return self.cmp_precedence(other) or compare_build(self.build, other.build)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmp(other) >= 0


@dataclass(frozen=True, slots=True)
class Comparator:
    """An operator and a partial version, such as ``>=1.2``.

    ``minor`` and ``patch`` are ``None`` when the position was left out or
    written as a wildcard; an unset position matches any value and is
    distinct from an explicit ``0``.

    Attributes:
        op: Comparison operator
        major: Major version number
        minor: Minor version number, or None
        patch: Patch version number, or None (only set when minor is set)
        pre: Pre-release identifier, "" when absent (only set when patch is set)
    """

    op: Op
    major: int
    minor: Optional[int] = None
    patch: Optional[int] = None
    pre: str = ""

    def __post_init__(self) -> None:
        if self.patch is not None and self.minor is None:
            raise ValueError("comparator patch requires a minor version number")
        if self.pre and self.patch is None:
            raise ValueError("comparator pre-release requires a patch version number")

    @classmethod
    def parse(cls, text: str) -> "Comparator":
        """Parse a single comparator such as ``~1.2`` or ``>= 2.0.0-rc.1``."""
        from .parse import parse_comparator

        return parse_comparator(text)

    def matches(self, version: Version) -> bool:
        """Evaluate whether ``version`` satisfies this comparator."""
        return matches_comparator(self, version)

    def __str__(self) -> str:
        return format_comparator(self)


@dataclass(frozen=True, slots=True)
class VersionReq:
    """The intersection of some version comparators, such as ``>=1.2.3, <1.8``.

    An empty requirement is :attr:`STAR`. It is equivalent to ``>=0.0.0``
    except that it never matches a pre-release: a requirement only matches a
    pre-release when one of its comparators names the same major, minor and
    patch and carries a pre-release of its own.

    Attributes:
        comparators: Comparators that must all be satisfied
    """

    comparators: tuple[Comparator, ...] = ()

    STAR: ClassVar["VersionReq"]

    def __post_init__(self) -> None:
        if not isinstance(self.comparators, tuple):
            object.__setattr__(self, "comparators", tuple(self.comparators))
        if len(self.comparators) > MAX_COMPARATORS:
            raise ExcessiveComparatorsError()

    @classmethod
    def parse(cls, text: str) -> "VersionReq":
        """Parse a requirement such as ``*``, ``1.2`` or ``>=1.0, <2.0``.

        Raises:
            InvalidVersionError: For stray characters (``>a.b``), unknown
                operators (``@1.0.0``), a dangling comma (``^1.0.0, ``),
                missing commas (``>=1.0 <2.0``) or unsupported wildcard
                syntax (``*.*``).
        """
        from .parse import parse_version_req

        return parse_version_req(text)

    def matches(self, version: Version) -> bool:
        """Evaluate whether ``version`` satisfies this requirement."""
        return matches_req(self, version)

    def __str__(self) -> str:
        return format_version_req(self)


VersionReq.STAR = VersionReq()
