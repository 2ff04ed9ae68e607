"""Build-time pre-step: lint each source-module target (or a whole Xcode project) with swift-format.

Mirrors a SwiftPM build-tool plugin: create_* builds the prebuild commands,
run_build_commands executes them and reports each outcome as a diagnostic.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
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


@dataclass(frozen=True)
class BuildCommand:
    display_name: str
    executable: str
    arguments: tuple[str, ...]
    output_files_directory: Path


def lint_arguments(
    config_path: str,
    paths: Sequence[str],
    *,
    recursive: bool = False,
    extra_flags: Sequence[str] = (),
) -> list[str]:
    """swift-format lint --configuration <config> [flags] [--recursive] <paths...>."""
    args = [SWIFT_FORMAT, "lint", "--configuration", config_path, *extra_flags]
    if recursive:
        args.append("--recursive")
    args.extend(paths)
    return args


def _resolve(project_root: Path, work_dir: Path, settings: dict[str, Any]) -> str:
    return resolve_configuration(
        project_root,
        work_dir,
        config_file_name=settings["config_file_name"],
        fallback_config_name=settings["fallback_config_name"],
    )


def create_build_commands(
    package: PackageDescription,
    target: Target,
    work_dir: Path,
    settings: dict[str, Any] | None = None,
) -> list[BuildCommand]:
    """One lint command for target, or [] if it is not a source module or has no Swift files."""
    if not target.is_source_module:
        return []
    source_files = target.swift_files()
    if not source_files:
        return []
    opts = resolve_settings(settings)
    config_path = _resolve(package.directory, work_dir, opts)
    return [
        BuildCommand(
            display_name=f"swift-format lint ({target.name})",
            executable=swift_format_executable(),
            arguments=tuple(
                lint_arguments(
                    config_path,
                    [str(p) for p in source_files],
                    extra_flags=opts["lint_flags"],
                )
            ),
            output_files_directory=work_dir,
        )
    ]


def create_xcode_build_commands(
    project: XcodeProject,
    target_name: str,
    work_dir: Path,
    settings: dict[str, Any] | None = None,
) -> list[BuildCommand]:
    """Lint the whole Xcode project directory recursively through xcrun."""
    opts = resolve_settings(settings)
    config_path = _resolve(project.directory, work_dir, opts)
    return [
        BuildCommand(
            display_name=f"swift-format lint ({target_name})",
            executable=XCRUN,
            arguments=tuple(
                lint_arguments(
                    config_path,
                    [str(project.directory)],
                    recursive=True,
                    extra_flags=opts["lint_flags"],
                )
            ),
            output_files_directory=work_dir,
        )
    ]


def run_build_commands(commands: Sequence[BuildCommand]) -> int:
    """Run each command in order. A failing command is reported and the rest still run. Returns 0/1."""
    failed = 0
    for cmd in commands:
        result = run_formatter(cmd.executable, cmd.arguments)
        if not result.succeeded:
            failed += 1
            diagnostics.error(
                f'swift-format lint failed for "{cmd.display_name}" ({result.describe()}).'
            )
            continue
        diagnostics.remark(f'Linted "{cmd.display_name}".')
    return 1 if failed else 0


def run_build_tool(
    package: PackageDescription,
    work_dir: Path,
    target_names: Sequence[str] | None = None,
    settings: dict[str, Any] | None = None,
) -> int:
    """Lint the package's targets (all, or only target_names). Returns 0/1."""
    opts = resolve_settings(settings)
    for name in target_names or ():
        if package.target_named(name) is None:
            diagnostics.error(f'Unknown target "{name}".')
            return 1
    commands: list[BuildCommand] = []
    for target in package.targets:
        if target_names and target.name not in target_names:
            continue
        if target.name in opts["exclude_targets"]:
            diagnostics.remark(
                f'Skipping target "{target.name}" because it is excluded by settings.'
            )
            continue
        commands.extend(create_build_commands(package, target, work_dir, opts))
    if not commands:
        diagnostics.remark("No Swift source files to lint.")
        return 0
    return run_build_commands(commands)


def run_xcode_build_tool(
    project: XcodeProject,
    work_dir: Path,
    target_name: str | None = None,
    settings: dict[str, Any] | None = None,
) -> int:
    """Lint the whole Xcode project; target_name (default: project name) labels the command. Returns 0/1."""
    commands = create_xcode_build_commands(
        project, target_name or project.display_name, work_dir, settings
    )
    return run_build_commands(commands)
