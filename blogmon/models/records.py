"""
Result records produced by the engine.

ScoreRecord, Link and Trend are what callers receive; where they are stored
is up to the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from blogmon.models.document import DocumentId


@dataclass(frozen=True)
class ScoreRecord:
    """
    Scores for one document.

    Frozen: a re-score produces a new record replacing the old one, so the
    four values always change together.

    Attributes:
        document_id: Scored document.
        community: Community score (0-100).
        relevance: Relevance score (0-100).
        novelty: Novelty score (0-100).
        final: Weighted sum of the three (unbounded if weights sum > 1).
        scored_at: When the record was computed.
    """

    document_id: DocumentId
    community: float
    relevance: float
    novelty: float
    final: float
    scored_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "document_id": self.document_id,
            "community": self.community,
            "relevance": self.relevance,
            "novelty": self.novelty,
            "final": self.final,
            "scored_at": self.scored_at.isoformat(),
        }


@dataclass
class Link:
    """
    An undirected, weighted relation between two documents.

    The pair is stored in a canonical order so (a, b) and (b, a) are the same
    link. Identity is the pair plus the relationship label.
    """

    document_a: DocumentId
    document_b: DocumentId
    relationship: str
    strength: float

    def __post_init__(self) -> None:
        if str(self.document_a) > str(self.document_b):
            self.document_a, self.document_b = self.document_b, self.document_a

    @property
    def key(self) -> tuple:
        return (self.document_a, self.document_b, self.relationship)

    def involves(self, document_id: DocumentId) -> bool:
        return document_id in (self.document_a, self.document_b)

    def other(self, document_id: DocumentId) -> Optional[DocumentId]:
        """The document at the other end of this link, or None if not involved."""
        if document_id == self.document_a:
            return self.document_b
        if document_id == self.document_b:
            return self.document_a
        return None


@dataclass
class Trend:
    """
    A ranked topic.

    Attributes:
        topic: Topic label.
        count: Documents carrying the topic in the analysed batch.
        score: Recency-weighted trend score.
        recent_documents: Ids of documents inside the analysis window.
    """

    topic: str
    count: int
    score: float
    recent_documents: list = field(default_factory=list)

    @property
    def recent_count(self) -> int:
        return len(self.recent_documents)
