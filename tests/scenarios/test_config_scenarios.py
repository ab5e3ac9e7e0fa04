"""Scenario-based tests for configuration loading and the report script."""

import json
import sys
from pathlib import Path

import pytest

from charmastery.config import (
    ContentTypeConfig,
    default_config,
    load_config,
    parse_code_point,
)
from charmastery.learning import MasteryLevel
from charmastery.services import MasteryViewService
from charmastery.ui import (
    format_accuracy,
    format_attempts,
    format_character_row,
    format_mastery_summary,
    get_mastery_emoji,
)
from charmastery.utils import ConfigurationError, InvalidRangeError, InvalidThresholdError

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

import mastery_report  # noqa: E402


class TestConfigLoadingScenarios:
    """Test scenarios for reading the YAML configuration."""

    def test_scenario_missing_config_file(self, tmp_path):
        """
        Scenario: The configuration file does not exist

        Given: A path with no file behind it
        When: The configuration is loaded
        Then: FileNotFoundError should be raised
        """
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file_uses_defaults(self, write_config):
        config = load_config(write_config(""))

        assert config == default_config()
        assert config.mastery.min_attempts == 5
        assert config.mastery.mastered_accuracy == 80
        assert config.mastery.learning_accuracy == 50
        assert config.ranking.top_count == 5
        assert config.content_type == ContentTypeConfig()

    def test_shipped_config_matches_defaults(self):
        config = load_config(str(Path(__file__).parent.parent.parent / "config.yaml"))

        assert config == default_config()

    def test_scenario_custom_thresholds(self, write_config):
        """
        Scenario: A course adopts a stricter mastery policy

        Given: A config with 10 minimum attempts and a 90% mastery cutoff
        When: A view is built with that config
        Then: 9 of 10 correct should be mastered
        And: 8 of 10 correct should only be learning
        """
        config = load_config(write_config(
            "mastery:\n"
            "  min_attempts: 10\n"
            "  mastered_accuracy: 90\n"
        ))

        view = MasteryViewService(config).build_view({
            "あ": {"correct": 9, "incorrect": 1},
            "い": {"correct": 8, "incorrect": 2},
        })

        assert [r.character for r in view.grouped_by_mastery[MasteryLevel.MASTERED]] == ["あ"]
        assert [r.character for r in view.grouped_by_mastery[MasteryLevel.LEARNING]] == ["い"]

    def test_unicode_ranges_from_yaml(self, write_config):
        config = load_config(write_config(
            "content_type:\n"
            "  kana_ranges:\n"
            "    - ['U+3040', '0x309F']\n"
            "  kanji_ranges:\n"
            "    - [0x4E00, 40959]\n"
        ))

        assert config.content_type.kana_ranges == [(0x3040, 0x309F)]
        assert config.content_type.kanji_ranges == [(0x4E00, 0x9FFF)]

    @pytest.mark.parametrize("section", ["mastery", "content_type", "ranking", "logging"])
    def test_empty_section_uses_defaults(self, write_config, section):
        config = load_config(write_config(f"{section}:\n"))

        assert config == default_config()

    def test_service_without_config_uses_environment(self, monkeypatch):
        monkeypatch.setenv("CHARMASTERY_LOG_LEVEL", "WARNING")

        service = MasteryViewService()

        assert service.config.logging.level == "WARNING"
        assert service.config == default_config()

    def test_log_level_from_environment(self, write_config, monkeypatch):
        monkeypatch.setenv("CHARMASTERY_LOG_LEVEL", "DEBUG")

        config = load_config(write_config("logging:\n  level: WARNING\n"))

        assert config.logging.level == "DEBUG"


class TestConfigValidationScenarios:
    """Test scenarios for rejecting inconsistent configuration."""

    @pytest.mark.parametrize(
        "text",
        [
            "mastery:\n  min_attempts: -1\n",
            "mastery:\n  mastered_accuracy: 120\n",
            "mastery:\n  mastered_accuracy: 40\n  learning_accuracy: 60\n",
            "ranking:\n  top_count: 0\n",
            "ranking:\n  min_attempts_for_difficult: -3\n",
        ],
    )
    def test_invalid_thresholds(self, write_config, text):
        with pytest.raises(InvalidThresholdError):
            load_config(write_config(text))

    @pytest.mark.parametrize(
        "text",
        [
            "content_type:\n  kana_ranges:\n    - ['U+30FF', 'U+3040']\n",
            "content_type:\n  kana_ranges:\n    - ['U+3040']\n",
            "content_type:\n  kanji_ranges: 'U+4E00'\n",
            "content_type:\n  kanji_ranges:\n    - ['kanji', 'U+9FFF']\n",
        ],
    )
    def test_invalid_ranges(self, write_config, text):
        with pytest.raises(InvalidRangeError):
            load_config(write_config(text))

    def test_unknown_log_level(self, write_config):
        with pytest.raises(ConfigurationError):
            load_config(write_config("logging:\n  level: LOUD\n"))

    def test_numeric_log_level_is_rejected(self, write_config):
        with pytest.raises(ConfigurationError):
            load_config(write_config("logging:\n  level: 20\n"))

    def test_threshold_errors_are_configuration_errors(self):
        assert issubclass(InvalidThresholdError, ConfigurationError)
        assert issubclass(InvalidRangeError, ConfigurationError)

    @pytest.mark.parametrize(
        "value, expected",
        [(0x3040, 0x3040), ("U+3040", 0x3040), ("u+30ff", 0x30FF), ("0x4E00", 0x4E00), ("9FFF", 0x9FFF)],
    )
    def test_parse_code_point(self, value, expected):
        assert parse_code_point(value) == expected

    def test_parse_code_point_rejects_booleans(self):
        with pytest.raises(InvalidRangeError):
            parse_code_point(True)


class TestReportScenarios:
    """Test scenarios for the plain-text mastery report."""

    def test_formatters(self, make_record):
        record = make_record("食", 2, 8)

        assert format_accuracy(89.6) == "90%"
        assert format_attempts(1) == "1 tries"
        assert format_attempts(10) == "10 tries"
        assert format_character_row(1, record) == "1. 食  20%  (10 tries)"
        assert get_mastery_emoji("mastered") == "🏆"
        assert get_mastery_emoji("unknown") == "⬜"

    def test_summary_line(self, view_service, scenario_counts):
        summary = view_service.build_view(scenario_counts).summary()

        assert format_mastery_summary(summary) == "🏆 1 | 📖 1 | 🌱 1 | 62% overall"

    def test_summary_line_without_characters(self, view_service):
        summary = view_service.build_view({}).summary()

        assert format_mastery_summary(summary) == "No characters practiced yet"

    def test_scenario_report_for_kanji(self, tmp_path, scenario_counts, capsys):
        """
        Scenario: A learner prints a kanji-only report

        Given: A JSON export with あ, 食 and 犬
        When: The report script runs with --filter kanji
        Then: It should exit successfully
        And: Only kanji should appear in the rankings
        """
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps(scenario_counts, ensure_ascii=False), encoding="utf-8")

        exit_code = mastery_report.main([str(stats), "--filter", "kanji"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Character Mastery (Kanji)" in output
        assert "1. 食  20%  (10 tries)" in output
        assert "No mastered characters yet" in output
        assert "あ" not in output

    def test_report_missing_stats_file(self, tmp_path):
        assert mastery_report.main([str(tmp_path / "missing.json")]) == 1

    def test_report_rejects_non_object_json(self, tmp_path):
        stats = tmp_path / "stats.json"
        stats.write_text("[1, 2, 3]", encoding="utf-8")

        assert mastery_report.main([str(stats)]) == 1

    @pytest.mark.parametrize(
        "counts",
        [
            {"あ": 5},
            {"あ": {"correct": "9", "incorrect": 1}},
            {"あ": {"correct": 9, "incorrect": -1}},
            {"あ": {"correct": True, "incorrect": 0}},
            {"あ": {"correct": 9.5, "incorrect": 0}},
        ],
    )
    def test_scenario_report_rejects_malformed_counters(self, tmp_path, counts, caplog):
        """
        Scenario: A statistics export with a malformed entry

        Given: A JSON object whose counters are not non-negative integers
        When: The report script runs
        Then: It should log an error and exit with status 1
        """
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps(counts), encoding="utf-8")

        assert mastery_report.main([str(stats)]) == 1
        assert "non-negative integer" in caplog.text

    def test_report_invalid_config(self, tmp_path, write_config, scenario_counts):
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps(scenario_counts), encoding="utf-8")
        config_path = write_config("ranking:\n  top_count: 0\n")

        assert mastery_report.main([str(stats), "--config", config_path]) == 1

    def test_report_top_option(self, tmp_path, mixed_counts, capsys):
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps(mixed_counts), encoding="utf-8")

        exit_code = mastery_report.main([str(stats), "--top", "1"])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "1. き  10%  (10 tries)" in output
        assert "1. あ  100%  (10 tries)" in output
        assert "2. " not in output

    def test_report_rejects_zero_top(self, tmp_path, scenario_counts):
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps(scenario_counts), encoding="utf-8")

        assert mastery_report.main([str(stats), "--top", "0"]) == 1
