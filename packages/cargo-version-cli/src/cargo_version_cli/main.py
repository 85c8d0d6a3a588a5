# SPDX-License-Identifier: MIT
"""CLI entry point for the cargo-version command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from cargo_version import InvalidVersionError

from .config import Manifest, ManifestError, find_manifest

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.manifest: Optional[Manifest] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_manifest(self, path: Optional[Path] = None) -> Manifest:
        """Load the Cargo manifest, caching the result.

        Without an explicit path the nearest Cargo.toml above the project
        directory is used.
        """
        if self.manifest is None:
            if path is None:
                path = find_manifest(self.project_dir)
            self.manifest = Manifest.from_path(path)
        return self.manifest


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="cargo-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Cargo-flavored SemVer versions and version requirements.

    \b
    Examples:
        cargo-version parse 1.2.3-rc.1
        cargo-version req ">= 1.2, < 2"
        cargo-version match "^1.2" 1.1.0 1.2.5 2.0.0
        cargo-version sort 1.0.0 1.0.0-rc.1 0.9.0
        cargo-version check --manifest Cargo.toml
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        logger.debug("Verbose logging enabled")


# Import and register commands
from .commands import check, match, parse, req, sort

cli.add_command(parse.parse)
cli.add_command(req.req)
cli.add_command(match.match)
cli.add_command(sort.sort)
cli.add_command(check.check)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (InvalidVersionError, ManifestError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
