"""Pytest fixtures for swift-format plugin tooling tests."""

from pathlib import Path

import pytest

from swift_format_plugin import diagnostics


@pytest.fixture(autouse=True)
def _reset_diagnostics():
    diagnostics.reset()
    yield
    diagnostics.reset()


@pytest.fixture
def swift_package(tmp_path: Path) -> Path:
    """Conventional SwiftPM layout: Sources/App (2 files), Sources/CLib (C only), Tests/AppTests, Plugins/Gen."""
    root = tmp_path / "pkg"
    (root / "Sources" / "App" / "Models").mkdir(parents=True)
    (root / "Sources" / "App" / "main.swift").write_text("print(1)\n")
    (root / "Sources" / "App" / "Models" / "User.swift").write_text("struct User {}\n")
    (root / "Sources" / "CLib").mkdir(parents=True)
    (root / "Sources" / "CLib" / "lib.c").write_text("int f(void) { return 0; }\n")
    (root / "Tests" / "AppTests").mkdir(parents=True)
    (root / "Tests" / "AppTests" / "AppTests.swift").write_text("import XCTest\n")
    (root / "Plugins" / "Gen").mkdir(parents=True)
    (root / "Plugins" / "Gen" / "plugin.swift").write_text("import PackagePlugin\n")
    (root / "Package.swift").write_text("// swift-tools-version: 6.0\n")
    return root


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    return tmp_path / "work"
