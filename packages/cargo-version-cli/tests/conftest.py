# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def crate_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary crate directory with a Cargo.toml."""
    project_dir = tmp_path / "demo_crate"
    project_dir.mkdir()

    manifest = project_dir / "Cargo.toml"
    manifest.write_text(
        """[package]
name = "demo"
version = "0.3.1-rc.2"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
rand = "0.8.5"
log = "~0.4.17"
local-helper = { path = "../helper" }

[dev-dependencies]
proptest = ">= 1.2, < 2"

[build-dependencies]
cc = "1.*"

[target.'cfg(unix)'.dependencies]
libc = "=0.2.150"
"""
    )

    (project_dir / "src").mkdir()
    (project_dir / "src" / "lib.rs").write_text("pub fn demo() {}\n")

    yield project_dir


@pytest.fixture
def broken_crate_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a crate whose manifest has an invalid requirement."""
    project_dir = tmp_path / "broken_crate"
    project_dir.mkdir()

    (project_dir / "Cargo.toml").write_text(
        """[package]
name = "broken"
version = "1.0.0"

[dependencies]
serde = "1.0 || 2.0"
"""
    )

    yield project_dir
