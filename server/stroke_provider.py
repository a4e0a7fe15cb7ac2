"""Stroke order diagrams from the animCJK repository."""

import logging

import requests

from core.interfaces import StrokeDiagramProvider
from core.config import STROKE_BASE_URL, STROKE_REQUEST_TIMEOUT_SECONDS
from core.utils import first_code_point, is_kana

logger = logging.getLogger(__name__)


class AnimCJKStrokeProvider(StrokeDiagramProvider):
    """Fetches pre-animated SVG diagrams, one file per code point."""

    def __init__(self, base_url: str = STROKE_BASE_URL,
                 timeout: float = STROKE_REQUEST_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()

    def candidate_urls(self, char: str) -> list[str]:
        """Kana are looked up in the kana folder first, everything else in the kanji folder."""
        code_point = first_code_point(char)
        if code_point is None:
            return []
        file_name = f"{code_point}.svg"
        kana_url = f"{self.base_url}/svgsJaKana/{file_name}"
        kanji_url = f"{self.base_url}/svgsJa/{file_name}"
        if is_kana(code_point):
            return [kana_url, kanji_url]
        return [kanji_url, kana_url]

    def get_diagram(self, char: str) -> str | None:
        for url in self.candidate_urls(char):
            try:
                response = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                logger.warning(f"Stroke diagram request failed for {url}: {e}")
                continue
            if response.status_code != 200:
                continue
            if '<svg' not in response.text:
                logger.warning(f"Stroke diagram at {url} is not an SVG")
                continue
            return response.text
        logger.info(f"No stroke diagram found for {char!r}")
        return None
