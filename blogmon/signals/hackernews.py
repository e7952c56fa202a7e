"""
Hacker News community signal.

Looks posts up by URL through the Algolia-backed HN search API.
API Documentation: https://hn.algolia.com/api
"""

from typing import Optional

import requests
import structlog

from blogmon.config import config
from blogmon.errors import SignalLookupError
from blogmon.signals.base import CommunitySignal, CommunitySignalProvider

logger = structlog.get_logger(__name__)


class HackerNewsSignalProvider(CommunitySignalProvider):
    """
    Finds a post's Hacker News submission and returns its points and comments.

    The search is restricted to the url attribute. When a URL was submitted
    several times, the hit with the most points wins.
    """

    def __init__(self, timeout: Optional[float] = None, search_url: Optional[str] = None):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.search_url = search_url or config.HN_SEARCH_URL

    @property
    def name(self) -> str:
        return "hackernews"

    def search_by_url(self, url: str) -> Optional[CommunitySignal]:
        """
        Search HN for submissions of `url`.

        Returns:
            CommunitySignal for the best hit, or None if HN has no submission.

        Raises:
            SignalLookupError: On network errors, non-200 status or bad JSON.
        """
        payload = self._search(url)
        hits = payload.get("hits") or []
        if not hits:
            logger.debug("hn_not_found", url=url)
            return None

        best = None
        for hit in hits:
            if not isinstance(hit, dict):
                continue
            if best is None or _as_int(hit.get("points")) > _as_int(best.get("points")):
                best = hit

        if best is None:
            return None

        return self._normalize_hit(best)

    def _search(self, url: str) -> dict:
        """
        Run the search request.

        Raises:
            SignalLookupError: If the request fails or the body is not a JSON object.
        """
        try:
            response = requests.get(
                self.search_url,
                params={"query": url, "restrictSearchableAttributes": "url"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise SignalLookupError(f"failed to query HN API: {e}") from e

        if response.status_code != 200:
            raise SignalLookupError(f"HN API returned {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise SignalLookupError(f"failed to decode HN response: {e}") from e

        if not isinstance(payload, dict):
            raise SignalLookupError("failed to decode HN response: expected a JSON object")

        return payload

    def _normalize_hit(self, hit: dict) -> CommunitySignal:
        """
        Convert a raw Algolia hit to a CommunitySignal.

        Hit structure:
        {
            "objectID": "12345",
            "title": "Example Title",
            "url": "https://example.com/post",
            "points": 100,          # null for some old items
            "num_comments": 50
        }
        """
        return CommunitySignal(
            points=_as_int(hit.get("points")),
            comments=_as_int(hit.get("num_comments")),
            url=hit.get("url") or "",
            object_id=str(hit.get("objectID") or ""),
            title=hit.get("title") or "",
        )


def _as_int(value) -> int:
    """Coerce a JSON count (possibly null or a string) to int, defaulting to 0."""
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0
