"""Package discovery: targets and their source files, from SwiftPM or the directory layout."""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from swift_format_plugin import diagnostics

log = logging.getLogger(__name__)

SWIFT_SUFFIX = ".swift"
SOURCE_MODULE_TYPES = frozenset({"SwiftTarget", "ClangTarget"})
# Directories SwiftPM never treats as sources.
_SKIP_DIRS = frozenset({".build", ".git", ".swiftpm", "node_modules"})


@dataclass(frozen=True)
class Target:
    name: str
    directory: Path
    is_source_module: bool = True
    source_files: tuple[Path, ...] = ()

    def swift_files(self) -> list[Path]:
        return [p for p in self.source_files if p.suffix == SWIFT_SUFFIX]


@dataclass(frozen=True)
class PackageDescription:
    name: str
    directory: Path
    targets: tuple[Target, ...] = field(default_factory=tuple)

    def target_named(self, name: str) -> Target | None:
        for t in self.targets:
            if t.name == name:
                return t
        return None


@dataclass(frozen=True)
class XcodeProject:
    display_name: str
    directory: Path


def _run(cmd: Sequence[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        list(cmd),
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def parse_package_description(data: dict, package_root: Path) -> PackageDescription:
    """Build a PackageDescription from `swift package describe --type json` output."""
    root = Path(data.get("path") or package_root)
    targets: list[Target] = []
    for t in data.get("targets") or []:
        if not isinstance(t, dict) or "name" not in t:
            continue
        directory = root / t.get("path", "")
        sources = tuple(directory / s for s in t.get("sources") or [])
        targets.append(
            Target(
                name=t["name"],
                directory=directory,
                is_source_module=t.get("module_type") in SOURCE_MODULE_TYPES,
                source_files=sources,
            )
        )
    return PackageDescription(
        name=data.get("name") or root.name,
        directory=root,
        targets=tuple(targets),
    )


def describe_package(package_root: Path) -> PackageDescription:
    """Ask SwiftPM for the package layout. Raises RuntimeError if swift fails or prints bad JSON."""
    log.debug("Describing package at %s", package_root)
    r = _run(["swift", "package", "describe", "--type", "json"], cwd=package_root)
    if r.returncode != 0:
        msg = f"swift package describe failed (status {r.returncode}): {(r.stderr or '').strip()}"
        raise RuntimeError(msg)
    try:
        data = json.loads(r.stdout)
    except json.JSONDecodeError as e:
        msg = f"swift package describe printed invalid JSON: {e}"
        raise RuntimeError(msg) from e
    return parse_package_description(data, package_root)


def _swift_sources(directory: Path) -> tuple[Path, ...]:
    out: list[Path] = []
    for p in directory.rglob("*" + SWIFT_SUFFIX):
        rel = p.relative_to(directory)
        if any(part in _SKIP_DIRS for part in rel.parts):
            continue
        if p.is_file():
            out.append(p)
    return tuple(sorted(out))


def discover_package(package_root: Path) -> PackageDescription:
    """Conventional layout: Sources/<name>, Tests/<name> are source modules; Plugins/<name> are not."""
    root = Path(package_root)
    targets: list[Target] = []
    for group, is_source in (("Sources", True), ("Tests", True), ("Plugins", False)):
        d = root / group
        if not d.is_dir():
            continue
        for x in sorted(d.iterdir()):
            if not x.is_dir():
                continue
            targets.append(
                Target(
                    name=x.name,
                    directory=x,
                    is_source_module=is_source,
                    source_files=_swift_sources(x),
                )
            )
    return PackageDescription(name=root.name, directory=root, targets=tuple(targets))


def load_package(package_root: Path) -> PackageDescription:
    """describe_package, falling back to discover_package when swift is missing or fails."""
    try:
        return describe_package(package_root)
    except (OSError, RuntimeError) as e:
        diagnostics.warning(
            f"Could not describe package at {package_root} ({e}); using directory layout"
        )
        return discover_package(package_root)


def find_xcode_project(directory: Path) -> XcodeProject | None:
    """First *.xcodeproj bundle (sorted) directly under directory, or None."""
    d = Path(directory)
    if d.suffix == ".xcodeproj":
        if not d.is_dir():
            return None
        return XcodeProject(display_name=d.stem, directory=d.parent)
    if not d.is_dir():
        return None
    bundles = sorted(p for p in d.iterdir() if p.suffix == ".xcodeproj" and p.is_dir())
    if not bundles:
        return None
    return XcodeProject(display_name=bundles[0].stem, directory=d)
