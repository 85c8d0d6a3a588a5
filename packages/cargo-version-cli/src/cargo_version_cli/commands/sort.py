# SPDX-License-Identifier: MIT
"""Sort versions by SemVer precedence."""

from __future__ import annotations

import click

from cargo_version import InvalidVersionError, Version, version_key

from ..main import echo_error, echo_info


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS sorted by precedence.

    Versions that differ only in build metadata keep their input order.

    \b
    Examples:
        cargo-version sort 1.0.0 1.0.0-rc.1 1.0.0-alpha 0.9.0
        cargo-version sort -r 0.1.0 0.10.0 0.2.0
    """
    parsed: list[Version] = []
    for text in versions:
        try:
            parsed.append(Version.parse(text))
        except InvalidVersionError as e:
            echo_error(f"Invalid version '{text}': {e}")
            raise SystemExit(1)

    for version in sorted(parsed, key=version_key, reverse=reverse):
        echo_info(str(version))
