"""Service for the affiliate recommendations shown on the result page."""

from __future__ import annotations

import logging
from pathlib import Path
import random

from trivia_app.constants.quiz_constants import AFFILIATE_LINKS_FILE, AFFILIATE_LINKS_PER_RESULT
from trivia_app.core.errors import ResourceUnavailableError
from trivia_app.core.models import AffiliateLink
from trivia_app.core.services.question_repository import read_json_resource
from trivia_app.core.services.question_selector import fisher_yates_shuffle

logger = logging.getLogger(__name__)

_LINK_FIELDS = ("url", "image", "title", "description")


class AffiliateRepository:
    """Loads affiliate link cards once and hands out random picks."""

    def __init__(self, source_path: Path = AFFILIATE_LINKS_FILE, rng: random.Random | None = None) -> None:
        self._source_path = Path(source_path)
        self._links: list[AffiliateLink] | None = None
        self._rng = rng or random.Random()

    def load_links(self) -> list[AffiliateLink]:
        if self._links is None:
            self._links = self._load()
        return list(self._links)

    def pick_links(self, count: int = AFFILIATE_LINKS_PER_RESULT) -> list[AffiliateLink]:
        """Return up to ``count`` links in random order."""
        if count <= 0:
            return []
        return fisher_yates_shuffle(self.load_links(), self._rng)[:count]

    def _load(self) -> list[AffiliateLink]:
        try:
            payload = read_json_resource(self._source_path)
        except ResourceUnavailableError as exc:
            logger.error("Affiliate links unavailable: %s", exc)
            return []
        if not isinstance(payload, list):
            logger.error("Affiliate links file %s must contain a JSON list", self._source_path)
            return []

        links: list[AffiliateLink] = []
        for record in payload:
            if not isinstance(record, dict) or any(not isinstance(record.get(key), str) for key in _LINK_FIELDS):
                logger.warning("Skipping malformed affiliate link: %r", record)
                continue
            links.append(AffiliateLink(**{key: record[key] for key in _LINK_FIELDS}))
        return links
