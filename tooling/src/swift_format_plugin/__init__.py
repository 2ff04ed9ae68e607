"""swift-format plugin tooling: lint and format Swift packages and Xcode projects with swift-format."""

from swift_format_plugin.build_tool import (
    BuildCommand,
    create_build_commands,
    create_xcode_build_commands,
    lint_arguments,
    run_build_commands,
    run_build_tool,
    run_xcode_build_tool,
)
from swift_format_plugin.command import (
    format_arguments,
    format_target,
    perform_command,
    perform_xcode_command,
)
from swift_format_plugin.configuration import (
    CONFIG_FILE_NAME,
    FALLBACK_CONFIG_JSON,
    FALLBACK_CONFIG_NAME,
    ConfigurationError,
    load_configuration,
    resolve_configuration,
)
from swift_format_plugin.package import (
    PackageDescription,
    Target,
    XcodeProject,
    describe_package,
    discover_package,
    find_xcode_project,
    load_package,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "FALLBACK_CONFIG_JSON",
    "FALLBACK_CONFIG_NAME",
    "BuildCommand",
    "ConfigurationError",
    "PackageDescription",
    "Target",
    "XcodeProject",
    "create_build_commands",
    "create_xcode_build_commands",
    "describe_package",
    "discover_package",
    "find_xcode_project",
    "format_arguments",
    "format_target",
    "lint_arguments",
    "load_configuration",
    "load_package",
    "perform_command",
    "perform_xcode_command",
    "resolve_configuration",
    "run_build_commands",
    "run_build_tool",
    "run_xcode_build_tool",
]
