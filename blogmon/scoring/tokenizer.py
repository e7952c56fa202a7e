"""
Tokenizer for the novelty model.

Text is lower-cased and split into maximal runs of ASCII letters and digits;
every other character is a separator. Runs of 1-2 characters are dropped.
There is no stemming and no stop-word removal here (stop words are only
filtered by the display keyword extractor in blogmon.topics.extractor).
"""

import re
from collections import Counter
from typing import Iterable

# Maximal runs of ASCII letters and digits (applied to lower-cased text)
_TOKEN_RE = re.compile(r"[a-z0-9]+")

# Tokens must be longer than this many characters
MIN_TOKEN_EXCLUSIVE_LENGTH: int = 2


def tokenize(text: str) -> list[str]:
    """
    Split text into index terms.

    Args:
        text: Raw text (any case). None is treated as empty.

    Returns:
        Ordered list of terms (may be empty).

    Example:
        >>> tokenize("Go's GC: 1.21 is faster!")
        ['faster']
    """
    if not text:
        return []
    return [
        token
        for token in _TOKEN_RE.findall(text.lower())
        if len(token) > MIN_TOKEN_EXCLUSIVE_LENGTH
    ]


def term_frequencies(tokens: Iterable[str]) -> dict[str, float]:
    """
    Term frequency vector: occurrences of each term divided by the token count.

    Returns an empty dict for an empty token stream.
    """
    counts = Counter(tokens)
    total = sum(counts.values())
    if total == 0:
        return {}
    return {term: count / total for term, count in counts.items()}
