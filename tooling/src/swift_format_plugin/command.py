"""Interactive command: format source-module targets (or an Xcode project) in place."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from swift_format_plugin import diagnostics
from swift_format_plugin.configuration import resolve_configuration
from swift_format_plugin.package import PackageDescription, Target, XcodeProject
from swift_format_plugin.process import (
    SWIFT_FORMAT,
    XCRUN,
    run_formatter,
    swift_format_executable,
)
from swift_format_plugin.settings import resolve_settings


def format_arguments(
    config_path: str,
    paths: Sequence[str],
    *,
    recursive: bool = False,
    parallel: bool = True,
) -> list[str]:
    """swift-format format --in-place [--parallel] --configuration <config> [--recursive] <paths...>."""
    args = [SWIFT_FORMAT, "format", "--in-place"]
    if parallel:
        args.append("--parallel")
    args.extend(["--configuration", config_path])
    if recursive:
        args.append("--recursive")
    args.extend(paths)
    return args


def extract_target_names(arguments: Sequence[str]) -> tuple[list[str], list[str]]:
    """Pull --target NAME pairs out of arguments. Returns (target names, remaining arguments)."""
    names: list[str] = []
    rest: list[str] = []
    i = 0
    while i < len(arguments):
        if arguments[i] == "--target" and i + 1 < len(arguments):
            names.append(arguments[i + 1])
            i += 2
            continue
        rest.append(arguments[i])
        i += 1
    return names, rest


def format_target(target: Target, config_path: str, *, parallel: bool = True) -> bool:
    """Format one target's Swift files in place. Returns False (after an error diagnostic) on failure."""
    swift_files = [str(p) for p in target.swift_files()]
    result = run_formatter(
        swift_format_executable(),
        format_arguments(config_path, swift_files, parallel=parallel),
    )
    if not result.succeeded:
        diagnostics.error(
            f'swift-format format failed for target "{target.name}" ({result.describe()}).'
        )
        return False
    diagnostics.remark(f'Formatted Swift source files in target "{target.name}".')
    return True


def perform_command(
    package: PackageDescription,
    work_dir: Path,
    arguments: Sequence[str] = (),
    settings: dict[str, Any] | None = None,
) -> int:
    """Format every source-module target with Swift files. Returns 0, or 1 if any target failed."""
    opts = resolve_settings(settings)
    target_names, _ = extract_target_names(arguments)
    for name in target_names:
        if package.target_named(name) is None:
            diagnostics.error(f'Unknown target "{name}".')
            return 1

    config_path = resolve_configuration(
        package.directory,
        work_dir,
        config_file_name=opts["config_file_name"],
        fallback_config_name=opts["fallback_config_name"],
    )

    ok = True
    for target in package.targets:
        if target_names and target.name not in target_names:
            continue
        if target.name in opts["exclude_targets"]:
            diagnostics.remark(
                f'Skipping target "{target.name}" because it is excluded by settings.'
            )
            continue
        if not target.is_source_module:
            diagnostics.remark(
                f'Skipping target "{target.name}" because it is not a source module.'
            )
            continue
        if not target.swift_files():
            diagnostics.remark(
                f'Skipping target "{target.name}" because it has no Swift source files.'
            )
            continue
        if not format_target(target, config_path, parallel=opts["parallel"]):
            ok = False
    return 0 if ok else 1


def perform_xcode_command(
    project: XcodeProject,
    work_dir: Path,
    settings: dict[str, Any] | None = None,
) -> int:
    """Format the whole Xcode project directory recursively through xcrun. Returns 0/1."""
    opts = resolve_settings(settings)
    config_path = resolve_configuration(
        project.directory,
        work_dir,
        config_file_name=opts["config_file_name"],
        fallback_config_name=opts["fallback_config_name"],
    )
    result = run_formatter(
        XCRUN,
        format_arguments(
            config_path,
            [str(project.directory)],
            recursive=True,
            parallel=opts["parallel"],
        ),
    )
    if not result.succeeded:
        diagnostics.error(
            "swift-format format failed for project "
            f'"{project.display_name}" ({result.describe()}).'
        )
        return 1
    diagnostics.remark(f'Formatted Swift source files in project "{project.display_name}".')
    return 0
