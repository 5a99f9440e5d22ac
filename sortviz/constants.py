"""Named constants for algorithm keys, listing languages, playback speeds and data kinds."""

from __future__ import annotations

ALGORITHM_BUBBLE = "bubble"
ALGORITHM_INSERTION = "insertion"
ALGORITHM_SELECTION = "selection"
ALGORITHM_MERGE = "merge"
ALGORITHM_QUICK = "quick"

DEFAULT_ALGORITHM = ALGORITHM_BUBBLE

LANGUAGE_JAVASCRIPT = "javascript"
LANGUAGE_PYTHON = "python"
LANGUAGE_JAVA = "java"
LANGUAGE_CPP = "cpp"

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    LANGUAGE_JAVASCRIPT,
    LANGUAGE_PYTHON,
    LANGUAGE_JAVA,
    LANGUAGE_CPP,
)

# Step.source_line always refers to this listing.
CANONICAL_LANGUAGE = LANGUAGE_PYTHON

MIN_SPEED = 1
MAX_SPEED = 5
DEFAULT_SPEED = 3

SPEED_DELAYS_MS: dict[int, int] = {
    1: 1000,
    2: 500,
    3: 250,
    4: 100,
    5: 50,
}

DATA_RANDOM = "random"
DATA_REVERSED = "reversed"
DATA_NEARLY_SORTED = "nearly"

DATA_KINDS: tuple[str, ...] = (DATA_RANDOM, DATA_REVERSED, DATA_NEARLY_SORTED)

VALUE_MIN = 1
VALUE_MAX = 100
DEFAULT_ARRAY_SIZE = 20
NEARLY_SORTED_SWAP_RATIO = 0.1
