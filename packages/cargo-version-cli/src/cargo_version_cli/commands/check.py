# SPDX-License-Identifier: MIT
"""Validate the dependency requirements of a Cargo manifest."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from cargo_version import InvalidVersionError, Version

from ..config import ManifestError
from ..main import Context, echo_error, echo_info, echo_success, pass_context


def _parse_pin(pin: str) -> tuple[str, Version]:
    name, sep, version = pin.partition("=")
    if not sep or not name or not version:
        raise click.BadParameter(f"expected NAME=VERSION, got '{pin}'", param_hint="--against")
    try:
        return name, Version.parse(version)
    except InvalidVersionError as e:
        raise click.BadParameter(f"{pin}: {e}", param_hint="--against") from e


@click.command()
@click.option(
    "--manifest",
    "-m",
    type=click.Path(exists=True, path_type=Path),
    help="Path to Cargo.toml (defaults to the nearest one).",
)
@click.option(
    "--against",
    "-a",
    "pins",
    multiple=True,
    metavar="NAME=VERSION",
    help="Check that VERSION satisfies the requirement on dependency NAME.",
)
@pass_context
def check(ctx: Context, manifest: Optional[Path], pins: tuple[str, ...]) -> None:
    """Validate every dependency requirement in a Cargo manifest.

    Each versioned dependency is printed with its requirement in canonical
    form. With --against, the given versions are checked against the
    requirements of the named dependencies.

    \b
    Examples:
        cargo-version check
        cargo-version check -m path/to/Cargo.toml
        cargo-version check --against serde=1.0.197 --against rand=0.8.5
    """
    parsed_pins = [_parse_pin(pin) for pin in pins]

    try:
        loaded = ctx.load_manifest(manifest)
    except (ManifestError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    for dependency in loaded.dependencies:
        echo_info(f"{dependency.table}.{dependency.name} = \"{dependency.req}\"")

    failures = 0
    for name, version in parsed_pins:
        declared = loaded.get(name)
        if not declared:
            echo_error(f"{name} is not a versioned dependency")
            failures += 1
            continue
        for dependency in declared:
            if dependency.req.matches(version):
                echo_info(f"{name} {version} satisfies {dependency.table} \"{dependency.req}\"")
            else:
                echo_error(f"{name} {version} does not satisfy {dependency.table} \"{dependency.req}\"")
                failures += 1

    if failures:
        raise SystemExit(1)

    label = loaded.name or (loaded.path.name if loaded.path else "manifest")
    echo_success(f"{label}: {len(loaded.dependencies)} requirement(s) OK")
