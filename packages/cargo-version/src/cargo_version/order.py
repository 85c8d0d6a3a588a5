# SPDX-License-Identifier: MIT
"""Precedence of dot-separated pre-release and build identifiers.

Both functions return -1, 0 or 1 in the style of a ``cmp`` function.

Pre-release precedence:

- An empty pre-release (a release) ranks above any pre-release, so
  ``1.0.0-rc.1 < 1.0.0``.
- Identifiers made only of digits rank below identifiers containing a letter
  or hyphen: ``1.0.0-pre.1 < 1.0.0-pre.x``.
- Two numeric identifiers compare numerically: ``pre.8 < pre.12``.
- Two alphanumeric identifiers compare by code point rather than locale
  collation, as Cargo does: ``pre12 < pre8`` and ``Beta < alpha``.
- If every shared identifier is equal, more identifiers win.

Build metadata walks the same way, except that numeric identifiers may carry
leading zeros. They compare by value first and by raw length last, so
``1 < 01 < 2``.
"""

from __future__ import annotations


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _is_numeric(identifier: str) -> bool:
    return identifier.isascii() and identifier.isdigit()


def _compare_empty(a: str, b: str) -> int | None:
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    return None


def compare_prerelease(a: str, b: str) -> int:
    """Compare two pre-release strings by SemVer precedence.

    Examples:
        >>> compare_prerelease("alpha", "alpha.1")
        -1
        >>> compare_prerelease("beta.11", "beta.2")
        1
        >>> compare_prerelease("", "rc.1")
        1
    """
    result = _compare_empty(a, b)
    if result is not None:
        return result

    a_parts = a.split(".")
    b_parts = b.split(".")

    for index, a_part in enumerate(a_parts):
        if index >= len(b_parts):
            return 1
        b_part = b_parts[index]

        a_numeric = _is_numeric(a_part)
        b_numeric = _is_numeric(b_part)
        if a_numeric != b_numeric:
            return -1 if a_numeric else 1

        if a_numeric:
            # Leading zeros are rejected by the parser, so length orders magnitude
            result = _cmp(len(a_part), len(b_part))
            if result:
                return result

        result = _cmp(a_part, b_part)
        if result:
            return result

    return -1 if len(a_parts) < len(b_parts) else 0


def compare_build(a: str, b: str) -> int:
    """Compare two build metadata strings.

    Numeric identifiers compare by value, ignoring leading zeros, and then
    by raw length so that differently padded numbers are still ordered.

    Examples:
        >>> compare_build("build.9", "build.10")
        -1
        >>> compare_build("01", "1")
        1
    """
    result = _compare_empty(a, b)
    if result is not None:
        return result

    a_parts = a.split(".")
    b_parts = b.split(".")

    for index, a_part in enumerate(a_parts):
        if index >= len(b_parts):
            return 1
        b_part = b_parts[index]

        a_numeric = _is_numeric(a_part)
        b_numeric = _is_numeric(b_part)
        if a_numeric != b_numeric:
            return -1 if a_numeric else 1

        if a_numeric:
            a_trimmed = a_part.lstrip("0")
            b_trimmed = b_part.lstrip("0")

            result = (
                _cmp(len(a_trimmed), len(b_trimmed))
                or _cmp(a_trimmed, b_trimmed)
                or _cmp(len(a_part), len(b_part))
            )
            if result:
                return result

        result = _cmp(a_part, b_part)
        if result:
            return result

    return -1 if len(a_parts) < len(b_parts) else 0
