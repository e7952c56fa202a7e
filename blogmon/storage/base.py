"""
Base storage abstractions for Blogmon.

The engine does not care where posts and results live. It reads documents
through a DocumentSource and writes results through a ResultStore; backends
(SQLite, an API, memory) implement these interfaces.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from blogmon.models.document import Document, DocumentId
from blogmon.models.records import Link, ScoreRecord


@dataclass
class UpsertResult:
    """
    Result of an upsert operation.

    Attributes:
        inserted: Number of new records created.
        updated: Number of existing records updated.
        failed: Number of records that failed to save.
        errors: List of error messages for failed records.
    """
    inserted: int = 0
    updated: int = 0
    failed: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def total_processed(self) -> int:
        """Total number of successfully processed records."""
        return self.inserted + self.updated

    def __str__(self) -> str:
        return f"UpsertResult(inserted={self.inserted}, updated={self.updated}, failed={self.failed})"


class DocumentSource(ABC):
    """
    Where the engine reads posts from.

    Implementations must return documents most recent first and must not
    hand out partially written documents.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this source. Used for logging.
        """
        pass

    @abstractmethod
    def list_documents(self, limit: Optional[int] = None) -> List[Document]:
        """
        List documents, most recent first.

        Args:
            limit: Maximum number of documents (None for all).
        """
        pass

    @abstractmethod
    def get_document(self, document_id: DocumentId) -> Document:
        """
        Fetch one document.

        Raises:
            DocumentNotFoundError: If the id is unknown.
        """
        pass

    def update_content(self, document_id: DocumentId, content: str, word_count: int) -> None:
        """
        Write back cleaned text and its word count.

        Used by the enrichment pipeline, not by scoring. Default
        implementation does nothing.
        """
        return None

    def get_insights(self, document_id: DocumentId) -> List[str]:
        """
        Auxiliary texts (extracted takeaways) attached to a document.

        Default implementation returns an empty list.
        """
        return []

    def __str__(self) -> str:
        return f"DocumentSource({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class ResultStore(ABC):
    """
    Where the engine writes scores, topics and links.

    All writes must be idempotent: repeating a batch updates records rather
    than duplicating them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def upsert_score(self, record: ScoreRecord) -> bool:
        """
        Store a score record, replacing any previous one for the document.

        Returns:
            True if inserted, False if an existing record was replaced.
        """
        pass

    @abstractmethod
    def get_score(self, document_id: DocumentId) -> Optional[ScoreRecord]:
        pass

    @abstractmethod
    def set_topics(self, document_id: DocumentId, topics: Sequence[str]) -> None:
        """Replace the topic set of a document."""
        pass

    @abstractmethod
    def get_topics(self, document_id: DocumentId) -> List[str]:
        pass

    @abstractmethod
    def upsert_links(self, links: Sequence[Link]) -> UpsertResult:
        """
        Insert or update links keyed by (pair, relationship).
        """
        pass

    @abstractmethod
    def list_links(self, document_id: Optional[DocumentId] = None) -> List[Link]:
        """
        List links, strongest first.

        Args:
            document_id: Only links touching this document (None for all).
        """
        pass

    def unscored_ids(self, document_ids: Sequence[DocumentId], limit: Optional[int] = None) -> List[DocumentId]:
        """
        Ids among `document_ids` that have no score record yet, in the given order.
        """
        unscored = [doc_id for doc_id in document_ids if self.get_score(doc_id) is None]
        return unscored[:limit] if limit is not None else unscored

    def __str__(self) -> str:
        return f"ResultStore({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
