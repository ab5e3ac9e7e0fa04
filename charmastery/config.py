"""Configuration loader for charmastery."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Tuple

import yaml
from dotenv import load_dotenv

from .constants import (
    DIFFICULT_MIN_ATTEMPTS,
    ENV_LOG_LEVEL,
    KANA_RANGES,
    KANJI_RANGES,
    MASTERY_ACCURACY_LEARNING,
    MASTERY_ACCURACY_MASTERED,
    MASTERY_MIN_ATTEMPTS,
    MAX_CODE_POINT,
    TOP_CHARACTERS_COUNT,
)
from .utils.errors import ConfigurationError, InvalidRangeError, InvalidThresholdError

logger = logging.getLogger(__name__)

CodePointRange = Tuple[int, int]


@dataclass
class MasteryConfig:
    """Mastery classification configuration."""

    min_attempts: int = MASTERY_MIN_ATTEMPTS
    mastered_accuracy: float = MASTERY_ACCURACY_MASTERED
    learning_accuracy: float = MASTERY_ACCURACY_LEARNING


@dataclass
class ContentTypeConfig:
    """Unicode ranges used to detect kana and kanji."""

    kana_ranges: List[CodePointRange] = field(default_factory=lambda: list(KANA_RANGES))
    kanji_ranges: List[CodePointRange] = field(default_factory=lambda: list(KANJI_RANGES))


@dataclass
class RankingConfig:
    """Top-N ranking configuration."""

    top_count: int = TOP_CHARACTERS_COUNT
    min_attempts_for_difficult: int = DIFFICULT_MIN_ATTEMPTS


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"


@dataclass
class Config:
    """Main configuration container."""

    mastery: MasteryConfig = field(default_factory=MasteryConfig)
    content_type: ContentTypeConfig = field(default_factory=ContentTypeConfig)
    ranking: RankingConfig = field(default_factory=RankingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_code_point(value: Any) -> int:
    """Parse a code point written as an int, "U+3040" or "0x3040".

    Args:
        value: Raw value from the YAML file

    Returns:
        Integer code point
    """
    if isinstance(value, bool):
        raise InvalidRangeError(f"Invalid code point: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip().upper()
        if text.startswith("U+"):
            text = text[2:]
        elif text.startswith("0X"):
            text = text[2:]
        try:
            return int(text, 16)
        except ValueError:
            pass
    raise InvalidRangeError(f"Invalid code point: {value!r}")


def _parse_ranges(raw_ranges: Any, default: List[CodePointRange]) -> List[CodePointRange]:
    """Parse a YAML list of [start, end] pairs into code point ranges."""
    if raw_ranges is None:
        return list(default)
    if not isinstance(raw_ranges, list):
        raise InvalidRangeError(f"Ranges must be a list, got {type(raw_ranges).__name__}")

    ranges = []
    for item in raw_ranges:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise InvalidRangeError(f"Range must be a [start, end] pair: {item!r}")
        ranges.append((parse_code_point(item[0]), parse_code_point(item[1])))
    return ranges


def validate_config(config: Config) -> Config:
    """Check thresholds and ranges for consistency.

    Args:
        config: Configuration to validate

    Returns:
        The same configuration, if valid

    Raises:
        InvalidThresholdError: If a threshold is out of bounds
        InvalidRangeError: If a Unicode range is malformed
    """
    mastery = config.mastery
    if mastery.min_attempts < 0:
        raise InvalidThresholdError(
            f"min_attempts must be non-negative, got {mastery.min_attempts}"
        )
    for name in ("mastered_accuracy", "learning_accuracy"):
        value = getattr(mastery, name)
        if not 0 <= value <= 100:
            raise InvalidThresholdError(f"{name} must be within 0-100, got {value}")
    if mastery.learning_accuracy > mastery.mastered_accuracy:
        raise InvalidThresholdError(
            "learning_accuracy must not exceed mastered_accuracy "
            f"({mastery.learning_accuracy} > {mastery.mastered_accuracy})"
        )

    ranking = config.ranking
    if ranking.top_count < 1:
        raise InvalidThresholdError(f"top_count must be positive, got {ranking.top_count}")
    if ranking.min_attempts_for_difficult < 0:
        raise InvalidThresholdError(
            "min_attempts_for_difficult must be non-negative, "
            f"got {ranking.min_attempts_for_difficult}"
        )

    for start, end in config.content_type.kana_ranges + config.content_type.kanji_ranges:
        if not 0 <= start <= end <= MAX_CODE_POINT:
            raise InvalidRangeError(f"Invalid code point range: U+{start:04X}..U+{end:04X}")

    if not isinstance(logging.getLevelName(str(config.logging.level).upper()), int):
        raise ConfigurationError(f"Unknown log level: {config.logging.level}")

    return config


def default_config() -> Config:
    """Get the built-in configuration without reading any file."""
    return validate_config(
        Config(logging=LoggingConfig(level=os.getenv(ENV_LOG_LEVEL, "") or "INFO"))
    )


def load_config(config_path: str = "config.yaml") -> Config:
    """Load configuration from YAML file and environment variables."""
    # Load environment variables
    load_dotenv()

    # Read YAML config
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    mastery_data = data.get("mastery") or {}
    content_type_data = data.get("content_type") or {}
    ranking_data = data.get("ranking") or {}
    logging_data = data.get("logging") or {}

    config = Config(
        mastery=MasteryConfig(
            min_attempts=mastery_data.get("min_attempts", MASTERY_MIN_ATTEMPTS),
            mastered_accuracy=float(
                mastery_data.get("mastered_accuracy", MASTERY_ACCURACY_MASTERED)
            ),
            learning_accuracy=float(
                mastery_data.get("learning_accuracy", MASTERY_ACCURACY_LEARNING)
            ),
        ),
        content_type=ContentTypeConfig(
            kana_ranges=_parse_ranges(
                content_type_data.get("kana_ranges"), list(KANA_RANGES)
            ),
            kanji_ranges=_parse_ranges(
                content_type_data.get("kanji_ranges"), list(KANJI_RANGES)
            ),
        ),
        ranking=RankingConfig(
            top_count=ranking_data.get("top_count", TOP_CHARACTERS_COUNT),
            min_attempts_for_difficult=ranking_data.get(
                "min_attempts_for_difficult", DIFFICULT_MIN_ATTEMPTS
            ),
        ),
        # Log level from environment wins over the file
        logging=LoggingConfig(
            level=str(os.getenv(ENV_LOG_LEVEL, "") or logging_data.get("level", "INFO")),
        ),
    )

    logger.info(f"Loaded configuration from {config_file}")
    return validate_config(config)
