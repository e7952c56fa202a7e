"""
Relevance scoring against the user's interest profile.

Keyword density: for each interest, count every substring occurrence of the
topic label and its keywords in the lower-cased "title content" text, divide
by the whitespace word count and scale by 1000. Densities are averaged with
the interest weights and scaled by 10, capped at 100.

Matching is by substring, like topic extraction: "go" also counts inside
"google". Occurrences are non-overlapping per keyword, but a keyword and the
topic label can both count the same span ("golang" and "go").
"""

from typing import Sequence

from blogmon.models.interest import Interest

# Returned when there is no usable interest profile
NEUTRAL_RELEVANCE: float = 50.0

# Upper bound of the relevance score
MAX_RELEVANCE: float = 100.0

# Density is expressed per this many words
DENSITY_SCALE: float = 1000.0

# Weighted average density -> score multiplier
SCORE_SCALE: float = 10.0


def count_matches(text: str, keywords: Sequence[str]) -> int:
    """Total non-overlapping occurrences of each keyword in `text`."""
    return sum(text.count(keyword) for keyword in keywords if keyword)


class RelevanceScorer:
    """
    Scores text against a fixed interest profile.

    The profile is copied on construction and never mutated.
    """

    def __init__(self, interests: Sequence[Interest] = ()):
        self._interests = tuple(interests)

    @property
    def interests(self) -> tuple[Interest, ...]:
        return self._interests

    def score(self, title: str, content: str) -> float:
        """
        Relevance of a post, in [0, 100].

        Returns:
            NEUTRAL_RELEVANCE (50.0) with no interests or when all weights are 0,
            0.0 when the text has no words, otherwise the capped weighted density.
        """
        if not self._interests:
            return NEUTRAL_RELEVANCE

        text = f"{title or ''} {content or ''}".lower()
        word_count = len(text.split())
        if word_count == 0:
            return 0.0

        total_score = 0.0
        total_weight = 0.0

        for interest in self._interests:
            matches = count_matches(text, interest.all_keywords())
            if matches > 0:
                density = matches / word_count * DENSITY_SCALE
                total_score += density * interest.weight
            total_weight += interest.weight

        if total_weight == 0:
            return NEUTRAL_RELEVANCE

        score = (total_score / total_weight) * SCORE_SCALE
        return max(0.0, min(score, MAX_RELEVANCE))

    def breakdown(self, title: str, content: str) -> dict[str, int]:
        """
        Match counts per interest topic, for display and debugging.

        Example:
            >>> RelevanceScorer([Interest("rust")]).breakdown("Rust", "rust is fun")
            {'rust': 2}
        """
        text = f"{title or ''} {content or ''}".lower()
        return {
            interest.topic: count_matches(text, interest.all_keywords())
            for interest in self._interests
        }
