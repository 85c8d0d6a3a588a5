# SPDX-License-Identifier: MIT
"""Dependency requirements loaded from a Cargo.toml manifest."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from cargo_version import InvalidVersionError, Version, VersionReq

logger = logging.getLogger(__name__)

MANIFEST_NAME = "Cargo.toml"

DEPENDENCY_TABLES = ("dependencies", "dev-dependencies", "build-dependencies")


class ManifestError(Exception):
    """Raised when a Cargo manifest cannot be loaded or is invalid."""

    pass


@dataclass(frozen=True)
class Dependency:
    """A dependency declared in a Cargo manifest.

    Attributes:
        name: Dependency name as written in the manifest
        req: Parsed version requirement
        kind: Table the dependency was declared in
        target: cfg expression for target-specific dependencies, if any
    """

    name: str
    req: VersionReq
    kind: str = "dependencies"
    target: Optional[str] = None

    @property
    def table(self) -> str:
        """Dotted path of the manifest table declaring this dependency."""
        if self.target:
            return f"target.{self.target}.{self.kind}"
        return self.kind


@dataclass
class Manifest:
    """Package metadata and dependency requirements from a Cargo manifest.

    Attributes:
        path: Path of the manifest file, if loaded from disk
        name: Package name ("" for virtual workspace manifests)
        version: Package version, if declared
        dependencies: Dependencies that carry a version requirement
    """

    path: Optional[Path] = None
    name: str = ""
    version: Optional[Version] = None
    dependencies: list[Dependency] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: str | Path) -> "Manifest":
        """Load a manifest from a Cargo.toml file.

        Args:
            path: Path to Cargo.toml, or to the directory containing it

        Returns:
            Manifest instance

        Raises:
            ManifestError: If the file is invalid
            FileNotFoundError: If the manifest doesn't exist
        """
        manifest_path = Path(path)
        if manifest_path.is_dir():
            manifest_path = manifest_path / MANIFEST_NAME

        if not manifest_path.exists():
            raise FileNotFoundError(f"{MANIFEST_NAME} not found at {manifest_path}")

        logger.debug("Loading manifest %s", manifest_path)
        try:
            with open(manifest_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ManifestError(f"Invalid TOML syntax in {manifest_path}: {e}") from e

        return cls.from_dict(data, manifest_path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Optional[Path] = None) -> "Manifest":
        """Create a Manifest from a parsed Cargo.toml dictionary.

        Raises:
            ManifestError: If a table has the wrong type, or the package
                version or a requirement is invalid
        """
        package = _table(data.get("package", {}), "package")
        name = package.get("name", "")

        version = None
        raw_version = package.get("version")
        # `version.workspace = true` inherits from the workspace; nothing to parse
        if isinstance(raw_version, str):
            try:
                version = Version.parse(raw_version)
            except InvalidVersionError as e:
                raise ManifestError(f"package.version: {e}") from e

        dependencies = _collect_dependencies(data)
        for target, target_table in _table(data.get("target", {}), "target").items():
            target_table = _table(target_table, f"target.{target}")
            dependencies.extend(_collect_dependencies(target_table, target))

        logger.debug("Found %d versioned dependencies in %s", len(dependencies), path)
        return cls(path=path, name=name, version=version, dependencies=dependencies)

    def get(self, name: str) -> list[Dependency]:
        """Return every declaration of the named dependency."""
        return [dep for dep in self.dependencies if dep.name == name]


def _table(value: Any, dotted: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ManifestError(f"{dotted}: expected a table, found {type(value).__name__}")
    return value


def _collect_dependencies(table: dict[str, Any], target: Optional[str] = None) -> list[Dependency]:
    dependencies: list[Dependency] = []

    for kind in DEPENDENCY_TABLES:
        dependency_path = f"target.{target}.{kind}" if target else kind
        for dep_name, spec in _table(table.get(kind, {}), dependency_path).items():
            if isinstance(spec, str):
                raw_req = spec
            elif isinstance(spec, dict) and isinstance(spec.get("version"), str):
                raw_req = spec["version"]
            else:
                # path, git and workspace-inherited dependencies have no requirement
                logger.debug("Skipping %s.%s without a version requirement", kind, dep_name)
                continue

            try:
                req = VersionReq.parse(raw_req)
            except InvalidVersionError as e:
                raise ManifestError(f"{dependency_path}.{dep_name}: {e}") from e

            dependencies.append(Dependency(name=dep_name, req=req, kind=kind, target=target))

    return dependencies


def find_manifest(start_dir: Optional[str | Path] = None) -> Path:
    """Find the nearest Cargo.toml by walking up from ``start_dir``.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the Cargo.toml file

    Raises:
        ManifestError: If no manifest is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        candidate = current / MANIFEST_NAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            break
        current = current.parent

    raise ManifestError(f"Could not find {MANIFEST_NAME} in {start_dir or Path.cwd()} or its parents")
