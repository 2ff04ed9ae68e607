"""`swift-format-plugin config` — path | show | dump-default."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from swift_format_plugin.cli.parse_common import add_root_arguments, configure_logging
from swift_format_plugin.configuration import (
    FALLBACK_CONFIG_JSON,
    ConfigurationError,
    load_configuration,
    resolve_configuration,
)
from swift_format_plugin.settings import default_work_dir, load_settings


def run_config(args: argparse.Namespace) -> int:
    if args.subcommand == "dump-default":
        print(FALLBACK_CONFIG_JSON)
        return 0

    root = args.package_path or Path.cwd()
    settings = load_settings(root)
    config_path = resolve_configuration(
        root,
        args.work_dir or default_work_dir(root),
        config_file_name=settings["config_file_name"],
        fallback_config_name=settings["fallback_config_name"],
    )
    if args.subcommand == "path":
        print(config_path)
    else:
        print(json.dumps(load_configuration(Path(config_path)), indent=2, sort_keys=True))
    return 0


def run_config_argv(argv: list[str] | None = None) -> None:
    """Parse argv and print the configuration path, its contents, or the bundled default."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []  # skip 'swift-format-plugin config'
    ap = argparse.ArgumentParser(
        prog="swift-format-plugin config",
        description="Inspect the configuration swift-format will use",
    )
    ap.add_argument("subcommand", choices=["path", "show", "dump-default"])
    add_root_arguments(ap)
    args = ap.parse_args(argv)
    configure_logging(args.verbose)
    try:
        rc = run_config(args)
    except (OSError, ConfigurationError) as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(rc)
