"""Tests for score colour and label bands."""
from __future__ import annotations

from pathlib import Path

import pytest

import config.loader as loader_module
from config.loader import get_config
from scoring.labels import score_color, score_label


class TestScoreColor:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (100, "green"),
            (85, "green"),
            (70, "green"),
            (69, "yellow"),
            (50, "yellow"),
            (49, "orange"),
            (30, "orange"),
            (29, "red"),
            (0, "red"),
        ],
    )
    def test_bands(self, score: int, expected: str) -> None:
        assert score_color(score) == expected

    def test_negative_falls_to_lowest_band(self) -> None:
        assert score_color(-1) == "red"


class TestScoreLabel:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (100, "Excellent"),
            (80, "Excellent"),
            (79, "Ready"),
            (70, "Ready"),
            (69, "Needs Work"),
            (50, "Needs Work"),
            (49, "Draft"),
            (30, "Draft"),
            (29, "Incomplete"),
            (0, "Incomplete"),
        ],
    )
    def test_bands(self, score: int, expected: str) -> None:
        assert score_label(score) == expected


class TestConfiguredBands:
    @pytest.fixture(autouse=True)
    def restore_config(self):
        yield
        get_config().reload()

    def test_empty_bands_fall_back_to_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "validator_config.yaml"
        config_file.write_text("labels:\n  colors: []\n  names: []\n", encoding="utf-8")
        monkeypatch.setattr(loader_module, "CONFIG_FILE", config_file)
        get_config().reload()

        assert score_color(75) == "green"
        assert score_label(10) == "Incomplete"

    def test_custom_bands(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "validator_config.yaml"
        config_file.write_text(
            "labels:\n  names:\n    - {min: 90, value: Approved}\n    - {min: 0, value: Revise}\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(loader_module, "CONFIG_FILE", config_file)
        get_config().reload()

        assert score_label(95) == "Approved"
        assert score_label(89) == "Revise"
