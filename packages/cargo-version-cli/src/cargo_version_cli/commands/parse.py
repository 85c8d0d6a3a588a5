# SPDX-License-Identifier: MIT
"""Parse a version and print its components."""

from __future__ import annotations

import json

import click

from cargo_version import InvalidVersionError, Version

from ..main import echo_error, echo_info


def _fields(version: Version) -> dict[str, object]:
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "pre": version.pre,
        "build": version.build,
    }


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
def parse(version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        cargo-version parse 1.2.3
        cargo-version parse 1.0.0-rc.1+build.5 --json
    """
    try:
        parsed = Version.parse(version)
    except InvalidVersionError as e:
        echo_error(f"Invalid version '{version}': {e}")
        raise SystemExit(1)

    fields = _fields(parsed)
    if as_json:
        echo_info(json.dumps(fields))
        return

    for name, value in fields.items():
        echo_info(f"{name}: {value}")
