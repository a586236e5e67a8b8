"""Quiz-related constants shared across the core and server layers."""

from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

QUESTIONS_FILE: Path = _DATA_DIR / "questions.json"
AFFILIATE_LINKS_FILE: Path = _DATA_DIR / "affiliate_links.json"

# Difficulty tier -> (lower class level, higher class level)
DIFFICULTY_CLASS_MAP: dict[str, tuple[int, int]] = {
    "beginner": (1, 2),
    "intermediate": (2, 3),
    "advanced": (3, 4),
    "japanese": (4, 5),
}

MIN_CLASS_LEVEL: int = 1
MAX_CLASS_LEVEL: int = 5

QUESTIONS_PER_CLASS_LEVEL: int = 5
DEFAULT_RESULT_TOTAL: int = 2 * QUESTIONS_PER_CLASS_LEVEL

# Fractions of the total score needed for each result tier.
CONGRATS_THRESHOLD: float = 0.8
CLOSE_THRESHOLD: float = 0.5

AFFILIATE_LINKS_PER_RESULT: int = 3

# Abandoned sessions (closed tabs, quit links whose beacon never arrived)
SESSION_IDLE_TIMEOUT_SECONDS: float = 30 * 60
MAX_ACTIVE_SESSIONS: int = 1000
