# SPDX-License-Identifier: MIT
"""Filter versions by a version requirement."""

from __future__ import annotations

import click

from cargo_version import InvalidVersionError, Version, VersionReq, max_satisfying

from ..main import echo_error, echo_info


@click.command()
@click.argument("requirement")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--max",
    "max_only",
    is_flag=True,
    help="Only print the greatest matching version.",
)
def match(requirement: str, versions: tuple[str, ...], max_only: bool) -> None:
    """Print each of VERSIONS that satisfies REQUIREMENT.

    Exits with status 1 if no version matches.

    \b
    Examples:
        cargo-version match "^1.2" 1.1.0 1.2.5 1.9.0 2.0.0
        cargo-version match "~0.3" 0.3.0 0.3.7 0.4.0 --max
    """
    try:
        parsed_req = VersionReq.parse(requirement)
    except InvalidVersionError as e:
        echo_error(f"Invalid requirement '{requirement}': {e}")
        raise SystemExit(1)

    parsed_versions: list[Version] = []
    for text in versions:
        try:
            parsed_versions.append(Version.parse(text))
        except InvalidVersionError as e:
            echo_error(f"Invalid version '{text}': {e}")
            raise SystemExit(1)

    if max_only:
        best = max_satisfying(parsed_versions, parsed_req)
        matched = [best] if best is not None else []
    else:
        matched = [version for version in parsed_versions if parsed_req.matches(version)]

    if not matched:
        echo_error(f"No version matches '{parsed_req}'")
        raise SystemExit(1)

    for version in matched:
        echo_info(str(version))
