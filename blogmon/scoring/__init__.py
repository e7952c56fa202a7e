"""
Scoring module.

Novelty (TF-IDF corpus), relevance (interest keyword density), community
(log-compressed popularity) and their weighted combination.
"""

from blogmon.scoring.tokenizer import tokenize, term_frequencies
from blogmon.scoring.novelty import NoveltyCorpus, MAX_NOVELTY
from blogmon.scoring.relevance import RelevanceScorer, NEUTRAL_RELEVANCE
from blogmon.scoring.community import calculate_community_score, score_signal
from blogmon.scoring.scorer import compute_final_score, build_score_record

__all__ = [
    # Tokenization
    "tokenize",
    "term_frequencies",
    # Sub-scores
    "NoveltyCorpus",
    "MAX_NOVELTY",
    "RelevanceScorer",
    "NEUTRAL_RELEVANCE",
    "calculate_community_score",
    "score_signal",
    # Aggregation
    "compute_final_score",
    "build_score_record",
]
