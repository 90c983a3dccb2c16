"""Tests for the configuration loader."""
from __future__ import annotations

from pathlib import Path

import pytest

import config.loader as loader_module
from config.loader import (
    ConfigLoader,
    get_active_prompt_version,
    get_color_bands,
    get_config,
    get_label_bands,
    get_slop_max_deduction,
    get_slop_max_issues,
    get_slop_multiplier,
)
from utils.error_handler import ConfigError


class TestConfigLoader:
    def test_singleton(self) -> None:
        assert ConfigLoader() is get_config()

    def test_dot_notation(self) -> None:
        config = get_config()

        assert config.get("slop.max_deduction") == 5
        assert config.get("prompts.active_version") == "v1.0"

    def test_missing_key_default(self) -> None:
        assert get_config().get("nonexistent.key", default=100) == 100
        assert get_config().get("slop.max_deduction.deeper", default="x") == "x"

    def test_get_section(self) -> None:
        section = get_config().get_section("slop")

        assert section == {"max_deduction": 5, "multiplier": 0.6, "max_issues": 2}
        assert get_config().get_section("missing") == {}

    def test_accessors(self) -> None:
        assert get_slop_max_deduction() == 5
        assert get_slop_multiplier() == pytest.approx(0.6)
        assert get_slop_max_issues() == 2
        assert get_active_prompt_version() == "v1.0"
        assert [band["value"] for band in get_color_bands()] == ["green", "yellow", "orange", "red"]
        assert get_label_bands()[0] == {"min": 80, "value": "Excellent"}


class TestReload:
    @pytest.fixture(autouse=True)
    def restore_config(self):
        yield
        get_config().reload()

    def test_missing_file_uses_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(loader_module, "CONFIG_FILE", tmp_path / "absent.yaml")
        get_config().reload()

        assert get_slop_max_deduction() == 5
        assert get_slop_multiplier() == pytest.approx(0.6)
        assert get_label_bands() == loader_module.DEFAULT_LABEL_BANDS

    def test_override_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "validator_config.yaml"
        config_file.write_text("slop:\n  max_deduction: 3\n", encoding="utf-8")
        monkeypatch.setattr(loader_module, "CONFIG_FILE", config_file)
        get_config().reload()

        assert get_slop_max_deduction() == 3
        assert get_slop_multiplier() == pytest.approx(0.6)

    def test_malformed_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "validator_config.yaml"
        config_file.write_text("slop: [unclosed\n", encoding="utf-8")
        monkeypatch.setattr(loader_module, "CONFIG_FILE", config_file)

        with pytest.raises(ConfigError):
            get_config().reload()

    def test_non_mapping(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "validator_config.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")
        monkeypatch.setattr(loader_module, "CONFIG_FILE", config_file)

        with pytest.raises(ConfigError):
            get_config().reload()
