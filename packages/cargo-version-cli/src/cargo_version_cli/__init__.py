# SPDX-License-Identifier: MIT
"""Command-line interface for Cargo-flavored SemVer versions and requirements."""

__version__ = "0.1.0"
