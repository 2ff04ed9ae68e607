"""Shared CLI arguments (--package-path, --work-dir, --xcode-project, --target) and logging setup."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --package-path, --work-dir)."""
    return Path(s).resolve()


def add_root_arguments(ap: argparse.ArgumentParser) -> None:
    """--package-path, --work-dir, --verbose (shared by every subcommand)."""
    ap.add_argument(
        "--package-path",
        type=path_resolver,
        default=None,
        help="Swift package root (default: cwd)",
    )
    ap.add_argument(
        "--work-dir",
        type=path_resolver,
        default=None,
        help="Scratch dir for the fallback configuration (default: <root>/.build/plugins/swift-format)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")


def add_common_arguments(ap: argparse.ArgumentParser) -> None:
    """Root arguments plus --xcode-project and --target (lint and format)."""
    add_root_arguments(ap)
    ap.add_argument(
        "--xcode-project",
        type=path_resolver,
        default=None,
        help="Directory holding an .xcodeproj (or the .xcodeproj itself)",
    )
    ap.add_argument(
        "--target",
        action="append",
        default=[],
        help="Only this target (repeatable)",
    )


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
