"""
Topic graph: links between posts that share topics.

Two posts are linked when the Jaccard similarity of their topic sets reaches
a threshold (default 0.3). Every run compares all pairs of the documents it is
given, O(n^2); there is no incremental update.
"""

from typing import Iterator, Mapping, Optional, Sequence

import structlog

from blogmon.config import config
from blogmon.models.document import DocumentId
from blogmon.models.records import Link

logger = structlog.get_logger(__name__)

# Prefix of every link relationship label
RELATIONSHIP_PREFIX: str = "shared_topics:"

# At most this many shared topics are named in a relationship label
MAX_RELATIONSHIP_TOPICS: int = 3

# Label used when no shared topic is available
GENERAL_RELATIONSHIP: str = "general"


def compute_topic_similarity(topics_a: Sequence[str], topics_b: Sequence[str]) -> float:
    """
    Jaccard similarity of two topic collections: |A ∩ B| / |A ∪ B|.

    Duplicates are ignored. Returns 0 if either side is empty.

    Example:
        >>> compute_topic_similarity(["a", "b", "c"], ["a", "d"])
        0.25
    """
    set_a = set(topics_a)
    set_b = set(topics_b)
    if not set_a or not set_b:
        return 0.0

    union = set_a | set_b
    return len(set_a & set_b) / len(union)


def find_shared_topics(topics_a: Sequence[str], topics_b: Sequence[str]) -> list[str]:
    """Topics present in both, in the order they appear in `topics_a`."""
    set_b = set(topics_b)
    shared = []
    for topic in topics_a:
        if topic in set_b and topic not in shared:
            shared.append(topic)
    return shared


def build_relationship(shared_topics: Sequence[str]) -> str:
    """
    Human-readable relationship label: "shared_topics:" plus up to three topics.

    Example:
        >>> build_relationship(["golang", "concurrency"])
        'shared_topics:golang,concurrency'
    """
    if not shared_topics:
        return RELATIONSHIP_PREFIX + GENERAL_RELATIONSHIP
    return RELATIONSHIP_PREFIX + ",".join(shared_topics[:MAX_RELATIONSHIP_TOPICS])


class LinkSet:
    """
    Links keyed by (pair, relationship).

    Upserting a link whose identity already exists overwrites its strength
    instead of adding a duplicate. Iteration follows first-insertion order.
    """

    def __init__(self, links: Sequence[Link] = ()):
        self._links: dict[tuple, Link] = {}
        for link in links:
            self.upsert(link.document_a, link.document_b, link.relationship, link.strength)

    def upsert(
        self,
        document_a: DocumentId,
        document_b: DocumentId,
        relationship: str,
        strength: float,
    ) -> bool:
        """
        Insert or update a link.

        Returns:
            True if a new link was inserted, False if an existing one was updated.
        """
        link = Link(document_a, document_b, relationship, strength)
        existing = self._links.get(link.key)
        if existing is not None:
            existing.strength = strength
            return False
        self._links[link.key] = link
        return True

    def get(
        self,
        document_a: DocumentId,
        document_b: DocumentId,
        relationship: str,
    ) -> Optional[Link]:
        return self._links.get(Link(document_a, document_b, relationship, 0.0).key)

    def for_document(self, document_id: DocumentId) -> list[Link]:
        """Links touching a document, strongest first."""
        links = [link for link in self._links.values() if link.involves(document_id)]
        return sorted(links, key=lambda link: link.strength, reverse=True)

    def __iter__(self) -> Iterator[Link]:
        return iter(list(self._links.values()))

    def __len__(self) -> int:
        return len(self._links)

    def __repr__(self) -> str:
        return f"<LinkSet links={len(self._links)}>"


def build_links(
    document_topics: Mapping[DocumentId, Sequence[str]],
    min_similarity: Optional[float] = None,
    links: Optional[LinkSet] = None,
) -> LinkSet:
    """
    Link every pair of documents whose topic similarity reaches the threshold.

    Pairs are taken in the mapping's order; the earlier document of a pair
    decides the order of topics in the relationship label. Documents without
    topics are never linked. The mapping must be fully populated before the
    call and is not modified.

    Args:
        document_topics: Document id -> topics (ordered, as extracted).
        min_similarity: Jaccard threshold (inclusive). Defaults to LINK_MIN_SIMILARITY.
        links: Existing LinkSet to upsert into (a new one if omitted).

    Returns:
        The LinkSet holding the links.
    """
    if min_similarity is None:
        min_similarity = config.LINK_MIN_SIMILARITY
    links = links if links is not None else LinkSet()

    items = [(doc_id, topics) for doc_id, topics in document_topics.items() if topics]
    compared = 0
    linked = 0

    for i in range(len(items)):
        id_a, topics_a = items[i]
        for j in range(i + 1, len(items)):
            id_b, topics_b = items[j]
            compared += 1

            similarity = compute_topic_similarity(topics_a, topics_b)
            if similarity < min_similarity:
                continue

            relationship = build_relationship(find_shared_topics(topics_a, topics_b))
            links.upsert(id_a, id_b, relationship, similarity)
            linked += 1

    logger.debug(
        "links_built",
        documents=len(document_topics),
        pairs_compared=compared,
        pairs_linked=linked,
        min_similarity=min_similarity,
    )
    return links
