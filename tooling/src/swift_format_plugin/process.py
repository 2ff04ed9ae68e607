"""Locate and invoke the swift-format executable."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

SWIFT_FORMAT = "swift-format"
XCRUN = "/usr/bin/xcrun"
ENV = "/usr/bin/env"


@dataclass(frozen=True)
class FormatterResult:
    """Exit status of one swift-format run. Negative returncode means killed by signal."""

    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def describe(self) -> str:
        if self.returncode < 0:
            return f"signal {-self.returncode}"
        return f"status {self.returncode}"


def swift_format_executable(platform: str | None = None) -> str:
    """Executable used to launch swift-format.

    On macOS this is xcrun (resolves from the active Xcode toolchain).
    On Linux / Windows swift-format is expected on PATH, launched through env.
    """
    if (platform or sys.platform) == "darwin":
        return XCRUN
    return ENV


def _run(cmd: Sequence[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
    # Output streams straight through so swift-format findings reach the user.
    return subprocess.run(list(cmd), cwd=cwd, check=False)


def run_formatter(
    executable: str,
    arguments: Sequence[str],
    cwd: Path | None = None,
) -> FormatterResult:
    """Run executable with arguments, block until it exits. OSError on spawn failure propagates."""
    r = _run([executable, *arguments], cwd=cwd)
    return FormatterResult(returncode=r.returncode)
