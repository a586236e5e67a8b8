"""Service for loading the trivia question catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from trivia_app.constants.quiz_constants import MAX_CLASS_LEVEL, MIN_CLASS_LEVEL, QUESTIONS_FILE
from trivia_app.core.errors import ResourceUnavailableError
from trivia_app.core.models import Question

logger = logging.getLogger(__name__)


def read_json_resource(path: Path) -> Any:
    """Read and decode a JSON resource, raising ResourceUnavailableError on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ResourceUnavailableError(f"Unable to read {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResourceUnavailableError(f"{path} is not valid JSON: {exc}") from exc


class QuestionRepository:
    """Read-only, in-memory view of the question catalog."""

    def __init__(self, source_path: Path = QUESTIONS_FILE) -> None:
        self._source_path = Path(source_path)
        self._questions: list[Question] | None = None

    @classmethod
    def from_questions(cls, questions: list[Question]) -> "QuestionRepository":
        """Build a repository around an already loaded catalog."""
        repository = cls()
        repository._questions = list(questions)
        return repository

    @property
    def source_path(self) -> Path:
        return self._source_path

    def load_questions(self) -> list[Question]:
        """Return the catalog, loading it on first use.

        A missing or malformed resource yields an empty list; the failure is
        logged rather than raised.
        """
        if self._questions is None:
            self._questions = self._load()
        return list(self._questions)

    def reload(self) -> list[Question]:
        self._questions = None
        return self.load_questions()

    def get_question_count(self) -> int:
        return len(self.load_questions())

    def _load(self) -> list[Question]:
        try:
            payload = read_json_resource(self._source_path)
        except ResourceUnavailableError as exc:
            logger.error("Question catalog unavailable: %s", exc)
            return []
        if not isinstance(payload, list):
            logger.error("Question catalog %s must contain a JSON list", self._source_path)
            return []

        questions: list[Question] = []
        for position, record in enumerate(payload):
            try:
                questions.append(parse_question(record))
            except ValueError as exc:
                logger.warning("Skipping question #%d in %s: %s", position, self._source_path, exc)
        logger.info("Loaded %d questions from %s", len(questions), self._source_path)
        return questions


def parse_question(record: object) -> Question:
    """Validate a raw catalog record and convert it into a Question."""
    if not isinstance(record, dict):
        raise ValueError("record must be an object")

    class_level = record.get("class_level")
    if isinstance(class_level, bool) or not isinstance(class_level, int):
        raise ValueError("class_level must be an integer")
    if not MIN_CLASS_LEVEL <= class_level <= MAX_CLASS_LEVEL:
        raise ValueError(f"class_level must be between {MIN_CLASS_LEVEL} and {MAX_CLASS_LEVEL}")

    language_code = _require_text(record, "language_code")
    text = _require_text(record, "text")

    raw_options = record.get("options")
    if not isinstance(raw_options, list) or not raw_options:
        raise ValueError("options must be a non-empty list")
    if any(not isinstance(option, str) or not option.strip() for option in raw_options):
        raise ValueError("option text cannot be empty")
    options = tuple(raw_options)
    if len(set(options)) != len(options):
        raise ValueError("options must be unique")

    correct_answer = _require_text(record, "correctAnswer")
    if correct_answer not in options:
        raise ValueError("correctAnswer must be one of the options")

    explanation = record.get("explanation", "")
    if not isinstance(explanation, str):
        raise ValueError("explanation must be a string")

    return Question(
        class_level=class_level,
        language_code=language_code,
        text=text,
        options=options,
        correct_answer=correct_answer,
        explanation=explanation,
    )


def _require_text(record: dict, key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{key} must be a non-empty string")
    return value
