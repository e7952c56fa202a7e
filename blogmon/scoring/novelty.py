"""
Novelty scoring with a TF-IDF vector-space model.

A NoveltyCorpus answers "how similar is this text to anything seen so far".
Its lifecycle is explicit: create it, feed every document with add_document(),
then query with score(). Document frequencies and the document count are read
during scoring, so the corpus must be fully built before the first score()
call. Nothing here is shared between corpora; tests build isolated instances.

IDF(term) = ln((N + 1) / (df(term) + 1)); terms never added to the corpus get
IDF 0. A term present in every document therefore also has IDF 0 and does not
contribute to similarity.
"""

import math
from typing import Hashable, Iterable, Optional

import structlog

from blogmon.scoring.tokenizer import tokenize, term_frequencies

logger = structlog.get_logger(__name__)

# Returned when there is nothing to compare against, or nothing to compare
MAX_NOVELTY: float = 100.0


class NoveltyCorpus:
    """
    Term-frequency vectors plus a document-frequency table.

    Invariant: document_frequency(term) equals the number of stored vectors
    that contain `term`.

    Re-adding an existing id replaces its vector and corrects the
    document-frequency table, so the invariant holds for repeated feeds.
    """

    def __init__(self):
        self._documents: dict[Hashable, dict[str, float]] = {}
        self._document_freq: dict[str, int] = {}

    @classmethod
    def from_texts(cls, texts: Iterable[tuple[Hashable, str]]) -> "NoveltyCorpus":
        """Build a corpus from (id, text) pairs."""
        corpus = cls()
        for doc_id, text in texts:
            corpus.add_document(doc_id, text)
        return corpus

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: Hashable) -> bool:
        return doc_id in self._documents

    def document_frequency(self, term: str) -> int:
        return self._document_freq.get(term, 0)

    def vector(self, doc_id: Hashable) -> dict[str, float]:
        """Copy of the stored term-frequency vector for `doc_id` (empty if unknown)."""
        return dict(self._documents.get(doc_id, {}))

    def add_document(self, doc_id: Hashable, text: str) -> bool:
        """
        Add a document to the corpus.

        Text with no tokens is ignored.

        Returns:
            True if the document was stored.
        """
        tf = term_frequencies(tokenize(text))
        if not tf:
            logger.debug("corpus_document_skipped", document_id=doc_id, reason="no tokens")
            return False

        previous = self._documents.pop(doc_id, None)
        if previous is not None:
            for term in previous:
                self._decrement(term)

        # Once per distinct term, not once per occurrence
        for term in tf:
            self._document_freq[term] = self._document_freq.get(term, 0) + 1

        self._documents[doc_id] = tf
        return True

    def _decrement(self, term: str) -> None:
        remaining = self._document_freq.get(term, 0) - 1
        if remaining > 0:
            self._document_freq[term] = remaining
        else:
            self._document_freq.pop(term, None)

    def idf(self, term: str) -> float:
        df = self._document_freq.get(term, 0)
        if df == 0:
            return 0.0
        return math.log((self.document_count + 1) / (df + 1))

    def cosine_similarity(self, tf1: dict[str, float], tf2: dict[str, float]) -> float:
        """
        Cosine similarity of two TF vectors after weighting both by corpus IDF.

        Returns 0 when either weighted vector has zero magnitude.
        """
        dot_product = 0.0
        norm1 = 0.0
        norm2 = 0.0

        for term, tf in tf1.items():
            idf = self.idf(term)
            v1 = tf * idf
            norm1 += v1 * v1
            other = tf2.get(term)
            if other is not None:
                dot_product += v1 * (other * idf)

        for term, tf in tf2.items():
            v2 = tf * self.idf(term)
            norm2 += v2 * v2

        if norm1 == 0 or norm2 == 0:
            return 0.0

        return dot_product / (math.sqrt(norm1) * math.sqrt(norm2))

    def most_similar(
        self,
        text: str,
        exclude_id: Optional[Hashable] = None,
    ) -> tuple[Optional[Hashable], float]:
        """
        Find the stored document closest to `text`.

        Args:
            text: Candidate text.
            exclude_id: Stored document to leave out of the comparison.

        Returns:
            (document id, similarity); (None, 0.0) if nothing is comparable.
        """
        candidate = term_frequencies(tokenize(text))
        if not candidate:
            return None, 0.0

        best_id = None
        best_similarity = 0.0
        for doc_id, doc_tf in self._documents.items():
            if exclude_id is not None and doc_id == exclude_id:
                continue
            similarity = self.cosine_similarity(candidate, doc_tf)
            if similarity > best_similarity:
                best_id, best_similarity = doc_id, similarity

        return best_id, best_similarity

    def score(self, text: str, exclude_id: Optional[Hashable] = None) -> float:
        """
        Novelty of `text` against the corpus, in [0, 100].

        100 when the corpus is empty or the text has no tokens. Otherwise
        (1 - max cosine similarity) * 100. A text whose TF vector is already
        stored scores 0 against itself unless its id is passed as `exclude_id`.

        Args:
            text: Candidate text.
            exclude_id: Stored document to leave out of the comparison
                (document frequencies still include it).
        """
        if self.document_count == 0:
            return MAX_NOVELTY

        if not tokenize(text):
            return MAX_NOVELTY

        _, max_similarity = self.most_similar(text, exclude_id=exclude_id)
        max_similarity = min(max_similarity, 1.0)
        return (1.0 - max_similarity) * 100.0

    def __repr__(self) -> str:
        return f"<NoveltyCorpus documents={self.document_count} terms={len(self._document_freq)}>"
