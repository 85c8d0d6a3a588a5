# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, match, parse, req, sort

__all__ = ["check", "match", "parse", "req", "sort"]
