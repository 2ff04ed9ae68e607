"""Tests for swift_format_plugin.settings."""

from pathlib import Path

import pytest

from swift_format_plugin.configuration import ConfigurationError
from swift_format_plugin.settings import (
    DEFAULT_SETTINGS,
    WORK_DIR_ENV,
    default_work_dir,
    load_settings,
    resolve_settings,
)


class TestResolveSettings:
    def test_defaults(self) -> None:
        assert resolve_settings(None) == DEFAULT_SETTINGS

    def test_defaults_not_shared(self) -> None:
        s = resolve_settings(None)
        s["exclude_targets"].append("X")
        assert DEFAULT_SETTINGS["exclude_targets"] == []

    def test_overrides_and_ignores_unknown(self) -> None:
        s = resolve_settings({"lint_flags": ["--strict"], "parallel": False, "bogus": 1})
        assert s["lint_flags"] == ["--strict"]
        assert s["parallel"] is False
        assert "bogus" not in s

    def test_list_keys_must_be_lists(self) -> None:
        with pytest.raises(ConfigurationError, match="exclude_targets"):
            resolve_settings({"exclude_targets": "App"})


class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_settings(tmp_path) == DEFAULT_SETTINGS

    def test_reads_yaml(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text(
            "config_file_name: style.json\nexclude_targets:\n  - Generated\n"
        )
        s = load_settings(tmp_path)
        assert s["config_file_name"] == "style.json"
        assert s["exclude_targets"] == ["Generated"]

    def test_empty_yaml(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text("")
        assert load_settings(tmp_path) == DEFAULT_SETTINGS

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text("a: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_settings(tmp_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_settings(tmp_path)


class TestDefaultWorkDir:
    def test_under_build_dir(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.delenv(WORK_DIR_ENV, raising=False)
        assert default_work_dir(tmp_path) == tmp_path / ".build" / "plugins" / "swift-format"

    def test_env_override(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv(WORK_DIR_ENV, str(tmp_path / "scratch"))
        assert default_work_dir(tmp_path / "elsewhere") == (tmp_path / "scratch").resolve()


class TestParallelSetting:
    def test_quoted_false_rejected(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text('parallel: "false"\n')
        with pytest.raises(ConfigurationError, match="parallel must be true or false"):
            load_settings(tmp_path)

    def test_yaml_boolean_accepted(self, tmp_path: Path) -> None:
        (tmp_path / ".swift-format-plugin.yaml").write_text("parallel: false\n")
        assert load_settings(tmp_path)["parallel"] is False
