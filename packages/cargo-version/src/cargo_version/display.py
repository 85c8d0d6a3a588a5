# SPDX-License-Identifier: MIT
"""String rendering of versions, comparators and version requirements."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .op import Op

if TYPE_CHECKING:
    from .semver import Comparator, Version, VersionReq


def format_version(version: Version) -> str:
    output = f"{version.major}.{version.minor}.{version.patch}"
    if version.pre:
        output += f"-{version.pre}"
    if version.build:
        output += f"+{version.build}"
    return output


def format_comparator(comparator: Comparator) -> str:
    """Render a comparator, e.g. ``>=1.2``, ``~0.3.1-rc.1`` or ``1.*``.

    Wildcard comparators have no operator symbol and emit ``.*`` in place of
    the first position that was left unset.
    """
    output = f"{comparator.op.symbol}{comparator.major}"
    if comparator.minor is not None:
        output += f".{comparator.minor}"
        if comparator.patch is not None:
            output += f".{comparator.patch}"
            if comparator.pre:
                output += f"-{comparator.pre}"
        elif comparator.op is Op.WILDCARD:
            output += ".*"
    elif comparator.op is Op.WILDCARD:
        output += ".*"
    return output


def format_version_req(req: VersionReq) -> str:
    if not req.comparators:
        return "*"
    return ", ".join(format_comparator(comparator) for comparator in req.comparators)
