from __future__ import annotations

import json
import logging
import random

from trivia_app.constants.quiz_constants import QUESTIONS_FILE
from trivia_app.core.models import AffiliateLink
from trivia_app.core.services.affiliate_repository import AffiliateRepository
from trivia_app.core.services.question_repository import QuestionRepository


def _record(**overrides):
    record = {
        "class_level": 1,
        "language_code": "en",
        "text": "What is the capital of Japan?",
        "options": ["Tokyo", "Osaka"],
        "correctAnswer": "Tokyo",
        "explanation": "Since 1868.",
    }
    record.update(overrides)
    return record


def test_bundled_catalog_loads():
    questions = QuestionRepository(QUESTIONS_FILE).load_questions()
    assert questions
    assert all(q.correct_answer in q.options for q in questions)


def test_missing_file_degrades_to_empty(tmp_path, caplog):
    repository = QuestionRepository(tmp_path / "missing.json")
    with caplog.at_level(logging.ERROR):
        assert repository.load_questions() == []
    assert "unavailable" in caplog.text


def test_malformed_json_degrades_to_empty(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text("{not json", encoding="utf-8")
    assert QuestionRepository(path).load_questions() == []


def test_non_list_payload_degrades_to_empty(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps({"questions": []}), encoding="utf-8")
    assert QuestionRepository(path).load_questions() == []


def test_invalid_records_are_skipped(tmp_path):
    path = tmp_path / "questions.json"
    records = [
        _record(),
        _record(correctAnswer="Kyoto"),
        _record(options=["Tokyo", "Tokyo"]),
        _record(class_level=9),
        _record(class_level="1"),
        _record(text=""),
        "not an object",
    ]
    path.write_text(json.dumps(records), encoding="utf-8")

    questions = QuestionRepository(path).load_questions()
    assert len(questions) == 1
    question = questions[0]
    assert question.options == ("Tokyo", "Osaka")
    assert question.correct_answer == "Tokyo"
    assert question.explanation == "Since 1868."


def test_catalog_is_cached_until_reload(tmp_path):
    path = tmp_path / "questions.json"
    path.write_text(json.dumps([_record()]), encoding="utf-8")
    repository = QuestionRepository(path)
    assert repository.get_question_count() == 1

    path.write_text(json.dumps([_record(), _record(text="Another")]), encoding="utf-8")
    assert repository.get_question_count() == 1
    assert len(repository.reload()) == 2


def test_affiliate_links_pick_random_subset(tmp_path):
    path = tmp_path / "links.json"
    links = [
        {"url": f"https://example.com/{n}", "image": f"/img/{n}.jpg", "title": f"Spot {n}", "description": "Nice"}
        for n in range(5)
    ]
    links.append({"url": "https://example.com/broken"})
    path.write_text(json.dumps(links), encoding="utf-8")

    repository = AffiliateRepository(path, rng=random.Random(5))
    assert len(repository.load_links()) == 5
    picked = repository.pick_links(3)
    assert len(picked) == 3
    assert len(set(picked)) == 3
    assert all(isinstance(link, AffiliateLink) for link in picked)
    assert repository.pick_links(0) == []


def test_affiliate_links_missing_file_is_empty(tmp_path):
    assert AffiliateRepository(tmp_path / "missing.json").pick_links() == []
