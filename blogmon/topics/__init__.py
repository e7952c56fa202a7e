"""
Topics module.

Lexicon-based topic tagging, the topic similarity graph and trend ranking.
"""

from blogmon.topics.lexicon import (
    TOPIC_LEXICON,
    get_all_topics,
    get_topic_keywords,
)
from blogmon.topics.extractor import (
    extract_topics,
    extract_topics_with_keywords,
    extract_topics_from_insights,
    extract_keywords,
)
from blogmon.topics.graph import (
    compute_topic_similarity,
    find_shared_topics,
    build_relationship,
    build_links,
    LinkSet,
)
from blogmon.topics.trends import TrendAnalyzer, recency_boost

__all__ = [
    # Lexicon
    "TOPIC_LEXICON",
    "get_all_topics",
    "get_topic_keywords",
    # Extraction
    "extract_topics",
    "extract_topics_with_keywords",
    "extract_topics_from_insights",
    "extract_keywords",
    # Graph
    "compute_topic_similarity",
    "find_shared_topics",
    "build_relationship",
    "build_links",
    "LinkSet",
    # Trends
    "TrendAnalyzer",
    "recency_boost",
]
