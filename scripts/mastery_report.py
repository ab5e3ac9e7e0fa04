#!/usr/bin/env python3
"""Print a character mastery report from a JSON export of practice counters.

Usage:
  python scripts/mastery_report.py data/sample_character_stats.json --filter kana
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

from charmastery.config import default_config, load_config, validate_config
from charmastery.constants import (
    ENV_CONFIG_PATH,
    ERROR_CONFIG,
    ERROR_INPUT_INVALID,
    ERROR_INPUT_NOT_FOUND,
)
from charmastery.services import MasteryViewService
from charmastery.stats import ContentFilter
from charmastery.ui import format_character_row, format_mastery_summary
from charmastery.utils import ConfigurationError

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("stats", type=Path, help="JSON file of {character: {correct, incorrect}}")
    parser.add_argument(
        "--filter",
        default=ContentFilter.ALL.value,
        choices=[f.value for f in ContentFilter],
        help="Content type to show (default: all)",
    )
    parser.add_argument(
        "--config",
        default=os.getenv(ENV_CONFIG_PATH, ""),
        help="YAML configuration file (default: built-in thresholds)",
    )
    parser.add_argument("--top", type=int, default=None, help="Characters per ranking")
    return parser.parse_args(argv)


def load_counts(path: Path) -> dict:
    """Read raw practice counters from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(ERROR_INPUT_INVALID)
    for stats in data.values():
        if not isinstance(stats, dict):
            raise ValueError(ERROR_INPUT_INVALID)
        for key in ("correct", "incorrect"):
            value = stats.get(key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(ERROR_INPUT_INVALID)
    return data


def main(argv=None) -> int:
    """Main entry point."""
    load_dotenv(project_root / ".env")
    args = parse_args(argv)

    try:
        config = load_config(args.config) if args.config else default_config()
    except (FileNotFoundError, ConfigurationError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(ERROR_CONFIG.format(error=e))
        return 1

    # Configure logging
    logging.basicConfig(
        level=config.logging.level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    try:
        raw = load_counts(args.stats)
    except FileNotFoundError:
        logger.error(ERROR_INPUT_NOT_FOUND.format(path=args.stats))
        return 1
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Could not read {args.stats}: {e}")
        return 1

    if args.top is not None:
        config.ranking.top_count = args.top
        try:
            validate_config(config)
        except ConfigurationError as e:
            logger.error(ERROR_CONFIG.format(error=e))
            return 1

    view = MasteryViewService(config).build_view(raw, ContentFilter(args.filter))

    print(f"Character Mastery ({view.content_filter.label})")
    print(format_mastery_summary(view.summary()))
    if not view.has_characters:
        return 0

    print("\nNeeds Practice")
    for i, record in enumerate(view.top_difficult, start=1):
        print(format_character_row(i, record))
    if not view.top_difficult:
        print("  Keep practicing to see difficult characters")

    print("\nTop Mastered")
    for i, record in enumerate(view.top_mastered, start=1):
        print(format_character_row(i, record))
    if not view.top_mastered:
        print("  No mastered characters yet")

    return 0


if __name__ == "__main__":
    sys.exit(main())
