"""Plugin settings from an optional .swift-format-plugin.yaml in the project root.

Settings YAML format:
- config_file_name: project configuration file name (default .swift-format)
- fallback_config_name: file name for the bundled fallback in the work dir
- exclude_targets: target names never linted or formatted
- lint_flags: extra flags for swift-format lint (e.g. [--strict])
- parallel: pass --parallel to swift-format format (default true)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from swift_format_plugin.configuration import (
    CONFIG_FILE_NAME,
    FALLBACK_CONFIG_NAME,
    ConfigurationError,
)

SETTINGS_FILE_NAME = ".swift-format-plugin.yaml"
WORK_DIR_ENV = "SWIFT_FORMAT_PLUGIN_WORK_DIR"

DEFAULT_SETTINGS: dict[str, Any] = {
    "config_file_name": CONFIG_FILE_NAME,
    "fallback_config_name": FALLBACK_CONFIG_NAME,
    "exclude_targets": [],
    "lint_flags": [],
    "parallel": True,
}

_LIST_KEYS = ("exclude_targets", "lint_flags")


def resolve_settings(overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Return settings dict with defaults filled. Unknown keys are ignored."""
    out = {k: (list(v) if isinstance(v, list) else v) for k, v in DEFAULT_SETTINGS.items()}
    if not overrides:
        return out
    for key, value in overrides.items():
        if key not in out:
            continue
        if key in _LIST_KEYS:
            if not isinstance(value, list):
                msg = f"{key} must be a list, got {type(value).__name__}"
                raise ConfigurationError(msg)
            out[key] = [str(v) for v in value]
        elif key == "parallel":
            if not isinstance(value, bool):
                msg = f"parallel must be true or false, got {value!r}"
                raise ConfigurationError(msg)
            out[key] = value
        else:
            out[key] = str(value)
    return out


def load_settings(project_root: Path) -> dict[str, Any]:
    """Load project_root/.swift-format-plugin.yaml if present, else the defaults."""
    path = Path(project_root) / SETTINGS_FILE_NAME
    if not path.is_file():
        return resolve_settings(None)
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        msg = f"Could not parse {path}: {e}"
        raise ConfigurationError(msg) from e
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping"
        raise ConfigurationError(msg)
    return resolve_settings(data)


def default_work_dir(project_root: Path) -> Path:
    """Scratch directory for the fallback configuration: env override or .build/plugins/swift-format."""
    env = os.environ.get(WORK_DIR_ENV)
    if env:
        return Path(env).resolve()
    return Path(project_root) / ".build" / "plugins" / "swift-format"
