"""
Trend analysis: which topics are hot right now.

For each topic over the documents of one analysis pass:

    recency_boost = 1 + (window - days_since_latest) / window   if the latest
                    mention is inside the window, else 1
    score         = (recent_count * 2 + total_count) * recency_boost

Timestamps are compared as naive UTC (see as_naive_utc).

A topic mentioned today gets a boost close to 2.0, decaying linearly to 1.0
at the window edge. "Recent" means published strictly after now - window.
"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from blogmon.config import config
from blogmon.models.document import DocumentId, as_naive_utc, utc_now
from blogmon.models.records import Trend

SECONDS_PER_DAY: float = 24 * 60 * 60

# Weight of an in-window document relative to any document
RECENT_WEIGHT: float = 2.0


class TrendAnalyzer:
    """
    Collects (topics, timestamp) per document, then ranks topics.

    Usage:
        analyzer = TrendAnalyzer()
        for doc in documents:
            analyzer.add_document(doc.id, extract_topics(doc.full_text), doc.timestamp())
        trends = analyzer.get_trends(window_days=30, limit=10)
    """

    def __init__(self):
        self._entries: dict[DocumentId, tuple[tuple[str, ...], datetime]] = {}

    def add_document(
        self,
        document_id: DocumentId,
        topics: Sequence[str],
        timestamp: Optional[datetime] = None,
    ) -> None:
        """
        Record a document's topics. Re-adding an id replaces its entry.

        Args:
            document_id: Document id.
            topics: Topic labels (duplicates are ignored).
            timestamp: Publication time, naive UTC or aware; None means now.
        """
        unique = tuple(dict.fromkeys(topics))
        timestamp = as_naive_utc(timestamp) if timestamp is not None else utc_now()
        self._entries[document_id] = (unique, timestamp)

    def __len__(self) -> int:
        return len(self._entries)

    def get_trends(
        self,
        window_days: Optional[int] = None,
        limit: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> list[Trend]:
        """
        Rank topics by recency-weighted frequency.

        Args:
            window_days: Analysis window. Defaults to TREND_WINDOW_DAYS.
            limit: Maximum trends returned. Defaults to TREND_LIMIT.
            now: Current time (for testing). Defaults to utc_now().

        Returns:
            Trends sorted by score descending; ties keep first-seen topic order.

        Raises:
            ValueError: If window_days is not positive.
        """
        window_days = config.TREND_WINDOW_DAYS if window_days is None else window_days
        limit = config.TREND_LIMIT if limit is None else limit
        if window_days <= 0:
            raise ValueError(f"window_days must be positive, got {window_days}")
        if limit <= 0:
            return []

        now = as_naive_utc(now) if now is not None else utc_now()
        cutoff = now - timedelta(days=window_days)

        counts: dict[str, int] = {}
        recent: dict[str, list[DocumentId]] = {}
        latest: dict[str, datetime] = {}

        for document_id, (topics, timestamp) in self._entries.items():
            for topic in topics:
                counts[topic] = counts.get(topic, 0) + 1
                recent.setdefault(topic, [])
                if timestamp > cutoff:
                    recent[topic].append(document_id)
                if topic not in latest or timestamp > latest[topic]:
                    latest[topic] = timestamp

        trends = []
        for topic, count in counts.items():
            recent_documents = recent[topic]
            boost = recency_boost(latest[topic], window_days, now)
            score = (len(recent_documents) * RECENT_WEIGHT + count) * boost
            trends.append(Trend(
                topic=topic,
                count=count,
                score=score,
                recent_documents=recent_documents,
            ))

        trends.sort(key=lambda trend: trend.score, reverse=True)
        return trends[:limit]


def recency_boost(latest: datetime, window_days: int, now: datetime) -> float:
    """
    Boost for a topic whose latest mention is at `latest`.

    1.0 outside the window, up to 2.0 for a mention right now. Mentions
    dated in the future count as "now".
    """
    latest, now = as_naive_utc(latest), as_naive_utc(now)
    days_since = max(0.0, (now - latest).total_seconds() / SECONDS_PER_DAY)
    if days_since >= window_days:
        return 1.0
    return 1.0 + (window_days - days_since) / window_days
