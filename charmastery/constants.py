"""Constants for charmastery."""

# Mastery level thresholds
MASTERY_MIN_ATTEMPTS = 5
MASTERY_ACCURACY_MASTERED = 80.0
MASTERY_ACCURACY_LEARNING = 50.0

# Ranking settings
TOP_CHARACTERS_COUNT = 5
DIFFICULT_MIN_ATTEMPTS = 5

# Mastery level string constants
MASTERY_MASTERED = "mastered"
MASTERY_LEARNING = "learning"
MASTERY_NEEDS_PRACTICE = "needs-practice"

# Mastery label mapping
MASTERY_LABELS = {
    MASTERY_MASTERED: "Mastered",
    MASTERY_LEARNING: "Learning",
    MASTERY_NEEDS_PRACTICE: "Needs Practice",
}

# Mastery emoji mapping
MASTERY_EMOJI = {
    MASTERY_MASTERED: "🏆",
    MASTERY_LEARNING: "📖",
    MASTERY_NEEDS_PRACTICE: "🌱",
}

# Content type string constants
CONTENT_ALL = "all"
CONTENT_KANA = "kana"
CONTENT_KANJI = "kanji"
CONTENT_VOCABULARY = "vocabulary"

# Content filter tab labels
CONTENT_FILTER_LABELS = {
    CONTENT_ALL: "All",
    CONTENT_KANA: "Kana",
    CONTENT_KANJI: "Kanji",
    CONTENT_VOCABULARY: "Vocabulary",
}

# Unicode ranges (inclusive code points)
HIRAGANA_RANGE = (0x3040, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)
CJK_UNIFIED_IDEOGRAPHS_RANGE = (0x4E00, 0x9FFF)
MAX_CODE_POINT = 0x10FFFF

KANA_RANGES = (HIRAGANA_RANGE, KATAKANA_RANGE)
KANJI_RANGES = (CJK_UNIFIED_IDEOGRAPHS_RANGE,)

# Environment variables
ENV_CONFIG_PATH = "CHARMASTERY_CONFIG"
ENV_LOG_LEVEL = "CHARMASTERY_LOG_LEVEL"

# Error messages
ERROR_INPUT_NOT_FOUND = "Could not find the statistics file: {path}"
ERROR_INPUT_INVALID = (
    "Statistics file must contain a JSON object mapping each character to "
    "non-negative integer \"correct\" and \"incorrect\" counts."
)
ERROR_CONFIG = "Invalid configuration: {error}"
