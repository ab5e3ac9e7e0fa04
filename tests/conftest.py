"""Pytest configuration and shared fixtures for charmastery tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# ============================================================================
# Raw Statistics Fixtures
# ============================================================================


@pytest.fixture
def scenario_counts():
    """Raw counters for one kana, one kanji and one low-sample kanji."""
    return {
        "あ": {"correct": 9, "incorrect": 1},
        "食": {"correct": 2, "incorrect": 8},
        "犬": {"correct": 4, "incorrect": 0},
    }


@pytest.fixture
def mixed_counts():
    """Raw counters spanning every content type and mastery level."""
    return {
        "あ": {"correct": 10, "incorrect": 0},   # kana, mastered, 100%
        "カ": {"correct": 6, "incorrect": 4},    # kana, learning, 60%
        "き": {"correct": 1, "incorrect": 9},    # kana, needs-practice, 10%
        "日": {"correct": 17, "incorrect": 3},   # kanji, mastered, 85%
        "水": {"correct": 3, "incorrect": 7},    # kanji, needs-practice, 30%
        "月": {"correct": 1, "incorrect": 1},    # kanji, learning (low sample)
        "食べる": {"correct": 8, "incorrect": 2},  # vocabulary, mastered, 80%
        "学校": {"correct": 2, "incorrect": 3},   # vocabulary, needs-practice, 40%
    }


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def transformer():
    """Create a transformer with default thresholds."""
    from charmastery.services import CharacterStatsTransformer

    return CharacterStatsTransformer()


@pytest.fixture
def view_service():
    """Create a mastery view service with default thresholds."""
    from charmastery.services import MasteryViewService

    return MasteryViewService()


@pytest.fixture
def make_record():
    """Factory for mastery records built through the transformer."""
    from charmastery.services import CharacterStatsTransformer

    transformer = CharacterStatsTransformer()

    def _make_record(character: str, correct: int, incorrect: int):
        return transformer.build_record(character, correct, incorrect)

    return _make_record


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def write_config(tmp_path):
    """Fixture that writes a YAML config file and returns its path."""

    def _write_config(text: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Keep environment overrides from leaking into tests."""
    monkeypatch.delenv("CHARMASTERY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CHARMASTERY_CONFIG", raising=False)
