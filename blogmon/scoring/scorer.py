"""
Final score aggregation.

    final = community * w_community + relevance * w_relevance + novelty * w_novelty

Default weights are 0.3 / 0.4 / 0.3. They are not required to sum to 1, and
the final score is not clamped: with weights summing above 1 it can exceed
100. Negative weights are rejected when settings are loaded.
"""

from datetime import datetime
from typing import Optional

from blogmon.config.settings import ScoringWeights
from blogmon.models.document import DocumentId
from blogmon.models.records import ScoreRecord


def compute_final_score(
    community: float,
    relevance: float,
    novelty: float,
    weights: Optional[ScoringWeights] = None,
) -> float:
    """
    Weighted sum of the three sub-scores.

    Args:
        community: Community score (0-100).
        relevance: Relevance score (0-100).
        novelty: Novelty score (0-100).
        weights: Sub-score weights. Defaults to ScoringWeights().
    """
    weights = weights or ScoringWeights()
    return (
        community * weights.community
        + relevance * weights.relevance
        + novelty * weights.novelty
    )


def build_score_record(
    document_id: DocumentId,
    community: float,
    relevance: float,
    novelty: float,
    weights: Optional[ScoringWeights] = None,
    scored_at: Optional[datetime] = None,
) -> ScoreRecord:
    """
    Build a complete ScoreRecord, final score included.

    This is the only way the engine produces records, so a record never
    carries sub-scores and a final score from different computations.
    """
    return ScoreRecord(
        document_id=document_id,
        community=community,
        relevance=relevance,
        novelty=novelty,
        final=compute_final_score(community, relevance, novelty, weights),
        scored_at=scored_at or datetime.now(),
    )
