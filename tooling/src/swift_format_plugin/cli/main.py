"""Main CLI entry point for swift-format plugin tooling."""

import sys

from swift_format_plugin.cli import config_cmd, format_cmd, lint_cmd


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: swift-format-plugin <command> [args...]", file=sys.stderr)
        print("Commands:", file=sys.stderr)
        print(
            "  lint    - Lint each source-module target (or an Xcode project) with swift-format",
            file=sys.stderr,
        )
        print(
            "  format  - Format Swift sources in place (package targets or an Xcode project)",
            file=sys.stderr,
        )
        print(
            "  config  - path, show, dump-default: inspect the configuration swift-format will use",
            file=sys.stderr,
        )
        sys.exit(1)

    command = sys.argv[1]

    if command == "lint":
        lint_cmd.run_lint_argv()
    elif command == "format":
        format_cmd.run_format_argv()
    elif command == "config":
        config_cmd.run_config_argv()
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
