"""FastAPI server exposing the quiz pages and the JSON API they call."""

from __future__ import annotations

import logging
from threading import Thread

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel
import uvicorn

from trivia_app.constants.about import APP_NAME, APP_VERSION
from trivia_app.constants.locale_constants import (
    LANGUAGE_COOKIE,
    LANGUAGE_COOKIE_MAX_AGE,
    SESSION_COOKIE,
)
from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT, UVICORN_LOG_LEVEL
from trivia_app.constants.quiz_constants import AFFILIATE_LINKS_PER_RESULT, DEFAULT_RESULT_TOTAL
from trivia_app.core.errors import EmptyQuestionSetError, InvalidDifficultyError, InvalidTransitionError
from trivia_app.core.locale_strings import is_supported_language, resolve_language
from trivia_app.core.markdown_renderer import renderer
from trivia_app.core.models import AffiliateLink, DifficultyTier
from trivia_app.core.quiz_manager import QuizManager, UnknownSessionError
from trivia_app.server import pages

logger = logging.getLogger(__name__)


class LanguagePayload(BaseModel):
    """Payload schema for storing the language preference."""

    language: str


class StartPayload(BaseModel):
    """Payload schema for starting a quiz."""

    difficulty: str
    language: str | None = None


class SelectPayload(BaseModel):
    """Payload schema for the option the user picked."""

    option: str


class QuitPayload(BaseModel):
    """Payload schema for leaving the quiz page."""

    quiz_id: str | None = None


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _ensure_session_id(request: Request, response: Response, manager: QuizManager) -> str:
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id:
        return session_id
    session_id = manager.new_session_id()
    response.set_cookie(key=SESSION_COOKIE, value=session_id, samesite="lax", httponly=True)
    return session_id


def _require_language(lang: str) -> str:
    if not is_supported_language(lang):
        raise HTTPException(status_code=404, detail=f"Unsupported language: {lang}")
    return lang


def _require_difficulty(difficulty: str) -> DifficultyTier:
    try:
        return DifficultyTier(difficulty)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(InvalidDifficultyError(difficulty))) from exc


def _parse_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _normalize_result(score: str | None, total: str | None) -> tuple[int, int]:
    """Coerce result query parameters into a consistent (score, total) pair."""
    parsed_total = _parse_int(total, DEFAULT_RESULT_TOTAL)
    if parsed_total <= 0:
        parsed_total = DEFAULT_RESULT_TOTAL
    parsed_score = max(0, min(_parse_int(score, 0), parsed_total))
    return parsed_score, parsed_total


def _session_payload(snapshot: dict[str, object]) -> dict[str, object]:
    if snapshot["state"] == "empty":
        return snapshot
    snapshot["question_html"] = renderer.render_fragment(snapshot["question_text"])
    snapshot["explanation_html"] = (
        renderer.render_inline(snapshot["explanation"]) if snapshot["is_answer_checked"] else None
    )
    return snapshot


def _link_payload(link: AffiliateLink) -> dict[str, str]:
    return {"url": link.url, "image": link.image, "title": link.title, "description": link.description}


def _drive_session(action):
    """Run a session transition, translating core errors into HTTP errors."""
    try:
        return action()
    except UnknownSessionError as exc:
        raise HTTPException(status_code=404, detail=exc.args[0]) from exc
    except (InvalidTransitionError, EmptyQuestionSetError) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def create_api_app(quiz_manager: QuizManager | None = None) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager or QuizManager())

    # --- JSON API ---

    @app.post("/api/language")
    def set_language(payload: LanguagePayload, response: Response) -> dict[str, object]:
        if not is_supported_language(payload.language):
            raise HTTPException(status_code=422, detail=f"Unsupported language: {payload.language}")
        response.set_cookie(
            key=LANGUAGE_COOKIE,
            value=payload.language,
            max_age=LANGUAGE_COOKIE_MAX_AGE,
            samesite="lax",
        )
        return {"language": payload.language, "home_url": f"/{payload.language}/home"}

    @app.get("/api/questions/count")
    def get_question_count(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, int]:
        return {"count": manager.get_question_count()}

    @app.post("/api/quiz/start")
    def start_quiz(
        payload: StartPayload,
        request: Request,
        response: Response,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        if payload.language is not None and not is_supported_language(payload.language):
            raise HTTPException(status_code=422, detail=f"Unsupported language: {payload.language}")
        language = payload.language or resolve_language(request.cookies.get(LANGUAGE_COOKIE))
        session_id = _ensure_session_id(request, response, manager)
        try:
            snapshot = manager.start_quiz(session_id, payload.difficulty, language)
        except InvalidDifficultyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _session_payload(snapshot)

    @app.get("/api/quiz/state")
    def get_quiz_state(request: Request, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE)
        snapshot = _drive_session(lambda: manager.get_snapshot(session_id))
        return _session_payload(snapshot)

    @app.post("/api/quiz/select")
    def select_answer(
        payload: SelectPayload,
        request: Request,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE)
        snapshot = _drive_session(lambda: manager.select_answer(session_id, payload.option))
        return _session_payload(snapshot)

    @app.post("/api/quiz/check")
    def check_answer(request: Request, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE)
        snapshot = _drive_session(lambda: manager.check_answer(session_id))
        return _session_payload(snapshot)

    @app.post("/api/quiz/next")
    def next_question(request: Request, manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        session_id = request.cookies.get(SESSION_COOKIE)
        snapshot, outcome = _drive_session(lambda: manager.next_question(session_id))
        if outcome is None:
            return _session_payload(snapshot)
        lang = snapshot["language"] or resolve_language(request.cookies.get(LANGUAGE_COOKIE))
        return {
            "state": "completed",
            "score": outcome.score,
            "total": outcome.total,
            "result_url": f"/{lang}/result?score={outcome.score}&total={outcome.total}",
        }

    @app.post("/api/quiz/quit")
    def quit_quiz(
        request: Request,
        payload: QuitPayload | None = None,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, bool]:
        session_id = request.cookies.get(SESSION_COOKIE)
        quiz_id = payload.quiz_id if payload is not None else None
        return {"discarded": manager.discard_session(session_id, quiz_id)}

    @app.get("/api/result")
    def get_result(
        score: str | None = None,
        total: str | None = None,
        lang: str | None = None,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        parsed_score, parsed_total = _normalize_result(score, total)
        language = resolve_language(lang)
        message = manager.result_for(parsed_score, parsed_total, language)
        return {
            "score": parsed_score,
            "total": parsed_total,
            "tier": message.tier.value,
            "title": message.title,
            "body": message.body,
        }

    @app.get("/api/affiliate-links")
    def get_affiliate_links(
        count: int = AFFILIATE_LINKS_PER_RESULT,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> list[dict[str, str]]:
        return [_link_payload(link) for link in manager.pick_affiliate_links(count)]

    # --- HTML pages ---

    @app.get("/", response_class=HTMLResponse)
    def serve_language_page() -> str:
        return pages.render_language_page()

    @app.get("/home")
    def redirect_home(request: Request) -> RedirectResponse:
        lang = resolve_language(request.cookies.get(LANGUAGE_COOKIE))
        return RedirectResponse(url=f"/{lang}/home", status_code=307)

    @app.get("/{lang}/home", response_class=HTMLResponse)
    def serve_home_page(lang: str) -> str:
        return pages.render_home_page(_require_language(lang))

    @app.get("/{lang}/difficulty", response_class=HTMLResponse)
    def serve_difficulty_page(lang: str) -> str:
        return pages.render_difficulty_page(_require_language(lang))

    @app.get("/{lang}/quiz/{difficulty}", response_class=HTMLResponse)
    def serve_quiz_page(lang: str, difficulty: str) -> str:
        return pages.render_quiz_page(_require_language(lang), _require_difficulty(difficulty))

    @app.get("/{lang}/result", response_class=HTMLResponse)
    def serve_result_page(
        lang: str,
        score: str | None = None,
        total: str | None = None,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> str:
        lang = _require_language(lang)
        parsed_score, parsed_total = _normalize_result(score, total)
        message = manager.result_for(parsed_score, parsed_total, lang)
        links = manager.pick_affiliate_links()
        return pages.render_result_page(lang, parsed_score, parsed_total, message, links)

    return app


def _build_server(quiz_manager: QuizManager | None, host: str, port: int) -> uvicorn.Server:
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level=UVICORN_LOG_LEVEL)
    logger.info("Serving %s on http://%s:%d/", APP_NAME, host, port)
    return uvicorn.Server(config)


def run_api_server(
    quiz_manager: QuizManager | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the application with uvicorn until interrupted."""
    _build_server(quiz_manager, host, port).run()


def start_api_server(
    quiz_manager: QuizManager | None = None,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    server = _build_server(quiz_manager, host, port)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="TriviaApiServer", daemon=True)
    thread.start()
    return thread
