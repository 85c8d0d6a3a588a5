# SPDX-License-Identifier: MIT
"""Validate a version requirement and print its canonical form."""

from __future__ import annotations

import click

from cargo_version import InvalidVersionError, VersionReq

from ..main import echo_error, echo_info


@click.command()
@click.argument("requirement")
@click.option(
    "--explain",
    is_flag=True,
    help="Print each comparator on its own line.",
)
def req(requirement: str, explain: bool) -> None:
    """Validate REQUIREMENT and print it in canonical form.

    \b
    Examples:
        cargo-version req "1.2"            # prints ^1.2
        cargo-version req ">= 1.0, < 2"    # prints >=1.0, <2
    """
    try:
        parsed = VersionReq.parse(requirement)
    except InvalidVersionError as e:
        echo_error(f"Invalid requirement '{requirement}': {e}")
        raise SystemExit(1)

    echo_info(str(parsed))
    if explain:
        if not parsed.comparators:
            echo_info("  any release version")
        for comparator in parsed.comparators:
            echo_info(f"  {comparator.op.name.lower()}: {comparator}")
