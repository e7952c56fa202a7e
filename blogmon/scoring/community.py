"""
Community score from external popularity signals.

A pure function over already-retrieved counts; fetching the counts is the job
of a CommunitySignalProvider (see blogmon.signals).

Formula:
    raw   = 2 * points + 3 * comments + 1 * secondary
    score = ln(1 + raw) * 10, capped at 100

The log keeps viral outliers from dominating: 10 points -> ~30,
100 points + 50 comments -> ~58, the cap is reached around raw = 22,000.
"""

import math
from typing import Optional

from blogmon.signals.base import CommunitySignal

# Signal weights
POINTS_WEIGHT: int = 2
COMMENTS_WEIGHT: int = 3
SECONDARY_WEIGHT: int = 1

# ln(1 + raw) multiplier
LOG_SCALE: float = 10.0

# Upper bound of the community score
MAX_COMMUNITY: float = 100.0


def calculate_community_score(points: int, comments: int, secondary: int = 0) -> float:
    """
    Compute the community score.

    Negative counts are treated as 0.

    Args:
        points: Upvotes/points on the primary platform.
        comments: Comment count on the primary platform.
        secondary: Score on a secondary platform (0 if unused).

    Returns:
        Community score in [0, 100]; exactly 0 when all inputs are 0.
    """
    points = max(0, points or 0)
    comments = max(0, comments or 0)
    secondary = max(0, secondary or 0)

    if points == 0 and comments == 0 and secondary == 0:
        return 0.0

    raw = points * POINTS_WEIGHT + comments * COMMENTS_WEIGHT + secondary * SECONDARY_WEIGHT
    score = math.log(1 + raw) * LOG_SCALE
    return min(score, MAX_COMMUNITY)


def score_signal(signal: Optional[CommunitySignal]) -> float:
    """Community score of a looked-up signal; 0 when nothing was found."""
    if signal is None:
        return 0.0
    return calculate_community_score(signal.points, signal.comments, signal.secondary)
