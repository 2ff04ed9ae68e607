"""Tests for swift_format_plugin.build_tool (lint pre-step)."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

from swift_format_plugin.build_tool import (
    BuildCommand,
    create_build_commands,
    create_xcode_build_commands,
    lint_arguments,
    run_build_commands,
    run_build_tool,
)
from swift_format_plugin.package import XcodeProject, discover_package
from swift_format_plugin.process import swift_format_executable


class TestLintArguments:
    def test_ordering(self) -> None:
        assert lint_arguments("/cfg.json", ["/a.swift", "/b.swift"]) == [
            "swift-format",
            "lint",
            "--configuration",
            "/cfg.json",
            "/a.swift",
            "/b.swift",
        ]

    def test_recursive_and_extra_flags(self) -> None:
        assert lint_arguments("/cfg", ["/proj"], recursive=True, extra_flags=["--strict"]) == [
            "swift-format",
            "lint",
            "--configuration",
            "/cfg",
            "--strict",
            "--recursive",
            "/proj",
        ]


class TestCreateBuildCommands:
    def test_source_target(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        (cmd,) = create_build_commands(pkg, pkg.target_named("App"), work_dir)
        assert cmd.display_name == "swift-format lint (App)"
        assert cmd.executable == swift_format_executable()
        assert cmd.output_files_directory == work_dir
        fallback = str(work_dir / "swift-format-fallback.json")
        assert list(cmd.arguments) == [
            "swift-format",
            "lint",
            "--configuration",
            fallback,
            str(swift_package / "Sources" / "App" / "Models" / "User.swift"),
            str(swift_package / "Sources" / "App" / "main.swift"),
        ]

    def test_project_config_used(self, swift_package: Path, work_dir: Path) -> None:
        (swift_package / ".swift-format").write_text("{}")
        pkg = discover_package(swift_package)
        (cmd,) = create_build_commands(pkg, pkg.target_named("AppTests"), work_dir)
        assert cmd.arguments[3] == str(swift_package / ".swift-format")

    def test_empty_for_non_source_module(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        assert create_build_commands(pkg, pkg.target_named("Gen"), work_dir) == []

    def test_empty_without_swift_files(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        assert create_build_commands(pkg, pkg.target_named("CLib"), work_dir) == []
        assert not work_dir.exists()

    def test_lint_flags_from_settings(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        (cmd,) = create_build_commands(
            pkg, pkg.target_named("App"), work_dir, {"lint_flags": ["--strict"]}
        )
        assert cmd.arguments[4] == "--strict"


class TestCreateXcodeBuildCommands:
    def test_recursive_over_project_dir(self, tmp_path: Path, work_dir: Path) -> None:
        project = XcodeProject(display_name="MyApp", directory=tmp_path)
        (cmd,) = create_xcode_build_commands(project, "MyAppTarget", work_dir)
        assert cmd.display_name == "swift-format lint (MyAppTarget)"
        assert cmd.executable == "/usr/bin/xcrun"
        assert list(cmd.arguments[-2:]) == ["--recursive", str(tmp_path)]
        assert cmd.arguments[:3] == ("swift-format", "lint", "--configuration")


class TestRunBuildCommands:
    def _cmd(self, name: str) -> BuildCommand:
        return BuildCommand(
            display_name=name,
            executable="/usr/bin/env",
            arguments=("swift-format", "lint"),
            output_files_directory=Path("/tmp"),
        )

    def test_continues_after_failure(self, caplog) -> None:
        caplog.set_level(logging.INFO, logger="swift_format_plugin")
        with patch(
            "swift_format_plugin.process._run",
            side_effect=[MagicMock(returncode=1), MagicMock(returncode=0)],
        ) as m_run:
            rc = run_build_commands([self._cmd("a"), self._cmd("b")])
        assert rc == 1
        assert m_run.call_count == 2
        assert 'swift-format lint failed for "a" (status 1).' in caplog.text
        assert 'Linted "b".' in caplog.text

    def test_all_succeed(self) -> None:
        with patch("swift_format_plugin.process._run", return_value=MagicMock(returncode=0)):
            assert run_build_commands([self._cmd("a")]) == 0


class TestRunBuildTool:
    def test_lints_each_source_target(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        with patch(
            "swift_format_plugin.process._run", return_value=MagicMock(returncode=0)
        ) as m_run:
            rc = run_build_tool(pkg, work_dir)
        assert rc == 0
        # App and AppTests; CLib has no Swift files, Gen is a plugin
        assert m_run.call_count == 2

    def test_target_filter(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        with patch(
            "swift_format_plugin.process._run", return_value=MagicMock(returncode=0)
        ) as m_run:
            run_build_tool(pkg, work_dir, target_names=["AppTests"])
        (cmd,) = m_run.call_args[0]
        assert cmd[-1].endswith("AppTests.swift")

    def test_unknown_target(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        with patch("swift_format_plugin.process._run") as m_run:
            rc = run_build_tool(pkg, work_dir, target_names=["Nope"])
        assert rc == 1
        m_run.assert_not_called()

    def test_excluded_targets(self, swift_package: Path, work_dir: Path) -> None:
        pkg = discover_package(swift_package)
        with patch(
            "swift_format_plugin.process._run", return_value=MagicMock(returncode=0)
        ) as m_run:
            run_build_tool(pkg, work_dir, settings={"exclude_targets": ["AppTests"]})
        assert m_run.call_count == 1
