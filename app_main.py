"""Application entry point for the Japan Trivia Quiz web server."""

from __future__ import annotations

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.core.quiz_manager import QuizManager
from trivia_app.server.api_server import run_api_server
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, load the catalog, and serve the quiz pages."""
    logger = configure_logging()
    logger.info("Starting Japan Trivia Quiz…")

    quiz_manager = QuizManager()
    question_count = quiz_manager.get_question_count()
    if question_count == 0:
        logger.warning("Question catalog is empty; every quiz will report no questions.")
    else:
        logger.info("Question catalog holds %d questions", question_count)

    run_api_server(quiz_manager=quiz_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)


if __name__ == "__main__":
    main()
