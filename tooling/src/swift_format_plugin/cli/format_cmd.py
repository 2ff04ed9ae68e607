"""`swift-format-plugin format` — format a package's targets or an Xcode project in place."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from swift_format_plugin import diagnostics
from swift_format_plugin.cli.parse_common import add_common_arguments, configure_logging
from swift_format_plugin.command import perform_command, perform_xcode_command
from swift_format_plugin.configuration import ConfigurationError
from swift_format_plugin.package import find_xcode_project, load_package
from swift_format_plugin.settings import default_work_dir, load_settings


def run_format(args: argparse.Namespace) -> int:
    if args.xcode_project is not None:
        project = find_xcode_project(args.xcode_project)
        if project is None:
            print(f"❌ No .xcodeproj found in {args.xcode_project}", file=sys.stderr)
            return 1
        if args.target:
            diagnostics.warning(
                "--target is ignored with --xcode-project; formatting the whole project."
            )
        settings = load_settings(project.directory)
        return perform_xcode_command(
            project, args.work_dir or default_work_dir(project.directory), settings
        )

    root = args.package_path or Path.cwd()
    settings = load_settings(root)
    package = load_package(root)
    target_args: list[str] = []
    for name in args.target:
        target_args += ["--target", name]
    return perform_command(
        package, args.work_dir or default_work_dir(root), target_args, settings
    )


def run_format_argv(argv: list[str] | None = None) -> None:
    """Parse argv and format in place (exit 1 if any target failed)."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'swift-format-plugin format'
    ap = argparse.ArgumentParser(
        prog="swift-format-plugin format",
        description="Format Swift sources in place with swift-format",
    )
    add_common_arguments(ap)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)
    diagnostics.reset()
    try:
        rc = run_format(args)
    except (OSError, ConfigurationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc or (1 if diagnostics.error_count() else 0))
