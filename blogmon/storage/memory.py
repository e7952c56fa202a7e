"""
In-memory storage for tests and development.

Implements both DocumentSource and ResultStore. Data is lost when the
process ends.
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from blogmon.errors import DocumentNotFoundError
from blogmon.models.document import Document, DocumentId, as_naive_utc
from blogmon.models.records import Link, ScoreRecord
from blogmon.storage.base import DocumentSource, ResultStore, UpsertResult
from blogmon.topics.graph import LinkSet


class MemoryStorage(DocumentSource, ResultStore):
    """
    Documents, scores, topics and links held in dictionaries.
    """

    def __init__(self, documents: Sequence[Document] = ()):
        self._documents: Dict[DocumentId, Document] = {}
        self._insights: Dict[DocumentId, List[str]] = {}
        self._scores: Dict[DocumentId, ScoreRecord] = {}
        self._topics: Dict[DocumentId, List[str]] = {}
        self._links = LinkSet()
        self.add_documents(documents)

    @property
    def name(self) -> str:
        return "memory"

    # -- documents -----------------------------------------------------------

    def add_documents(self, documents: Sequence[Document]) -> UpsertResult:
        """Store documents with idempotent behavior."""
        result = UpsertResult()
        for document in documents:
            if document.id in self._documents:
                result.updated += 1
            else:
                result.inserted += 1
            self._documents[document.id] = document
        return result

    def add_insights(self, document_id: DocumentId, insights: Sequence[str]) -> None:
        self._insights.setdefault(document_id, []).extend(insights)

    def list_documents(self, limit: Optional[int] = None) -> List[Document]:
        """Documents sorted by publication date, undated ones last."""
        documents = sorted(
            self._documents.values(),
            key=lambda doc: as_naive_utc(doc.published_at) or datetime.min,
            reverse=True,
        )
        return documents[:limit] if limit is not None else documents

    def get_document(self, document_id: DocumentId) -> Document:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def update_content(self, document_id: DocumentId, content: str, word_count: int) -> None:
        document = self.get_document(document_id)
        data = document.to_dict()
        data.update(content=content, word_count=word_count)
        self._documents[document_id] = Document.from_dict(data)

    def get_insights(self, document_id: DocumentId) -> List[str]:
        return list(self._insights.get(document_id, []))

    # -- results -------------------------------------------------------------

    def upsert_score(self, record: ScoreRecord) -> bool:
        inserted = record.document_id not in self._scores
        self._scores[record.document_id] = record
        return inserted

    def get_score(self, document_id: DocumentId) -> Optional[ScoreRecord]:
        return self._scores.get(document_id)

    def top_scores(self, limit: int = 10) -> List[ScoreRecord]:
        """Score records by final score, highest first."""
        records = sorted(self._scores.values(), key=lambda r: r.final, reverse=True)
        return records[:limit]

    def set_topics(self, document_id: DocumentId, topics: Sequence[str]) -> None:
        self._topics[document_id] = list(dict.fromkeys(topics))

    def get_topics(self, document_id: DocumentId) -> List[str]:
        return list(self._topics.get(document_id, []))

    def upsert_links(self, links: Sequence[Link]) -> UpsertResult:
        result = UpsertResult()
        for link in links:
            if self._links.upsert(link.document_a, link.document_b, link.relationship, link.strength):
                result.inserted += 1
            else:
                result.updated += 1
        return result

    def list_links(self, document_id: Optional[DocumentId] = None) -> List[Link]:
        if document_id is not None:
            return self._links.for_document(document_id)
        return sorted(self._links, key=lambda link: link.strength, reverse=True)

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._documents.clear()
        self._insights.clear()
        self._scores.clear()
        self._topics.clear()
        self._links = LinkSet()

    def count(self) -> int:
        """Return number of stored documents (for testing)."""
        return len(self._documents)
