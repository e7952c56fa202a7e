"""
Topic extraction and display keywords.

Pure functions over the static lexicon in blogmon.topics.lexicon: they do
not modify their input and hold no state.
"""

import re
from typing import Iterable, Sequence

from blogmon.topics.lexicon import TOPIC_LEXICON

# Words skipped by extract_keywords (display only, never used for scoring)
STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to",
    "for", "of", "with", "by", "from", "is", "are", "was", "were", "be",
    "been", "being", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "must", "this", "that", "these", "those",
    "i", "you", "he", "she", "it", "we", "they", "what", "which", "who",
    "when", "where", "why", "how", "all", "each", "every", "both", "few",
    "more", "most", "other", "some", "such", "no", "not", "only", "same", "so",
    "than", "too", "very", "just", "also",
})

_WORD_RE = re.compile(r"[a-z]+")


def extract_topics(
    text: str,
    lexicon: Sequence[tuple[str, Sequence[str]]] = TOPIC_LEXICON,
) -> list[str]:
    """
    Tag text with every lexicon topic whose keywords occur in it.

    Matching rules:
    - Case-insensitive
    - Substring, not whole word ("go" matches "google")
    - A topic matches if ANY of its keywords is found
    - Each topic is tested independently; a text may get several topics or none

    Args:
        text: Free text.
        lexicon: (topic, keywords) pairs. Defaults to TOPIC_LEXICON.

    Returns:
        Matching topic labels without duplicates, in lexicon order.

    Example:
        >>> extract_topics("Tuning PostgreSQL latency")
        ['databases', 'performance']
    """
    if not text:
        return []

    content = text.lower()
    found = []

    for topic, keywords in lexicon:
        if topic in found:
            continue
        if any(keyword in content for keyword in keywords):
            found.append(topic)

    return found


def extract_topics_with_keywords(
    text: str,
    lexicon: Sequence[tuple[str, Sequence[str]]] = TOPIC_LEXICON,
) -> dict[str, list[str]]:
    """
    Extract topics together with the keywords that matched.

    Useful for debugging and understanding why a topic was assigned.

    Example:
        >>> extract_topics_with_keywords("goroutines and redis")
        {'golang': ['go', 'goroutine', 'goroutines'], 'databases': ['redis']}
    """
    if not text:
        return {}

    content = text.lower()
    matches: dict[str, list[str]] = {}

    for topic, keywords in lexicon:
        matched = [keyword for keyword in keywords if keyword in content]
        if matched:
            matches[topic] = matched

    return matches


def extract_topics_from_insights(insights: Iterable[str]) -> list[str]:
    """Extract topics from auxiliary insight strings (e.g. extracted takeaways)."""
    return extract_topics(" ".join(insight for insight in insights if insight))


def extract_keywords(text: str, min_len: int = 4) -> list[str]:
    """
    Significant words of a text, for display.

    Lower-cases the text, takes runs of letters, drops stop words and words
    shorter than `min_len`, and keeps the first occurrence of each word.

    Example:
        >>> extract_keywords("The borrow checker and the borrow rules", 4)
        ['borrow', 'checker', 'rules']
    """
    if not text:
        return []

    seen = set()
    keywords = []

    for word in _WORD_RE.findall(text.lower()):
        if len(word) >= min_len and word not in STOP_WORDS and word not in seen:
            seen.add(word)
            keywords.append(word)

    return keywords
