"""`swift-format-plugin lint` — build-time pre-step for a package or Xcode project."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from swift_format_plugin import diagnostics
from swift_format_plugin.build_tool import run_build_tool, run_xcode_build_tool
from swift_format_plugin.cli.parse_common import add_common_arguments, configure_logging
from swift_format_plugin.configuration import ConfigurationError
from swift_format_plugin.package import find_xcode_project, load_package
from swift_format_plugin.settings import default_work_dir, load_settings


def run_lint(args: argparse.Namespace) -> int:
    if args.xcode_project is not None:
        project = find_xcode_project(args.xcode_project)
        if project is None:
            print(f"❌ No .xcodeproj found in {args.xcode_project}", file=sys.stderr)
            return 1
        settings = load_settings(project.directory)
        work_dir = args.work_dir or default_work_dir(project.directory)
        target = args.target[0] if args.target else None
        return run_xcode_build_tool(project, work_dir, target, settings)

    root = args.package_path or Path.cwd()
    settings = load_settings(root)
    work_dir = args.work_dir or default_work_dir(root)
    package = load_package(root)
    return run_build_tool(package, work_dir, args.target or None, settings)


def run_lint_argv(argv: list[str] | None = None) -> None:
    """Parse argv and lint (exit 0 when swift-format reported success for every command)."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'swift-format-plugin lint'
    ap = argparse.ArgumentParser(
        prog="swift-format-plugin lint",
        description="Lint Swift sources with swift-format",
    )
    add_common_arguments(ap)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)
    diagnostics.reset()
    try:
        rc = run_lint(args)
    except (OSError, ConfigurationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc or (1 if diagnostics.error_count() else 0))
