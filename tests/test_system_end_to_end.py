"""
End-To-End Tests

Verifies the engine's documented behavior over small hand-checked batches:
novelty against a fresh corpus, relevance ordering, topic links and trend
ranking, plus a full pipeline pass with a failing community provider.

Test data and expected values are defined in tests/test_config.py.
Update that file to change test parameters without modifying this script.
"""

from datetime import timedelta
from unittest.mock import patch

import pytest
import requests

from blogmon.config.settings import EngineSettings
from blogmon.models.document import Document
from blogmon.models.interest import Interest
from blogmon.pipeline import run_pipeline
from blogmon.scoring.novelty import NoveltyCorpus
from blogmon.scoring.relevance import RelevanceScorer
from blogmon.signals.hackernews import HackerNewsSignalProvider
from blogmon.topics.extractor import extract_topics
from blogmon.topics.graph import build_links, compute_topic_similarity
from blogmon.topics.trends import TrendAnalyzer

from tests.test_config import EXPECTED


@pytest.mark.end_to_end
class TestNoveltyScenario:
    """A two-document corpus, scored against new and known text."""

    @pytest.fixture
    def corpus(self):
        corpus = NoveltyCorpus()
        corpus.add_document("D1", "golang concurrency patterns")
        corpus.add_document("D2", "rust ownership and borrowing")
        return corpus

    def test_new_subject_is_novel(self, corpus):
        """
        GIVEN: A corpus about Go and Rust
        WHEN: A post about pandas and numpy is scored
        THEN: Novelty is at the maximum
        """
        assert corpus.score("python pandas numpy") == pytest.approx(EXPECTED["scoring"]["max_novelty"])

    def test_repeat_of_known_post_is_not_novel(self, corpus):
        """
        GIVEN: A corpus containing D1
        WHEN: D1's own text is scored
        THEN: Novelty is (close to) zero
        """
        assert corpus.score("golang concurrency patterns") == pytest.approx(0.0, abs=1e-9)


@pytest.mark.end_to_end
class TestRelevanceScenario:
    """A golang/rust interest profile ranks posts by keyword density."""

    def test_go_post_beats_cooking_post(self):
        scorer = RelevanceScorer([
            Interest("golang", 1.0, ["go", "goroutine"]),
            Interest("rust", 0.8),
        ])
        go_post = scorer.score("", "golang and goroutines and go programming")
        cooking_post = scorer.score("", "how to make pasta and pizza")
        assert go_post > cooking_post


@pytest.mark.end_to_end
class TestTopicGraphScenario:
    """Topics extracted from prose feed link building."""

    def test_extract_then_link(self):
        texts = {
            "a": "This article discusses golang concurrency patterns and goroutines for distributed systems",
            "b": "Goroutines and concurrency in golang",
            "c": "how to make pasta and pizza",
        }
        topics = {doc_id: extract_topics(text) for doc_id, text in texts.items()}

        assert {"golang", "concurrency", "distributed-systems"} <= set(topics["a"])
        assert topics["c"] == []

        links = build_links(topics, min_similarity=0.3)
        assert [(link.document_a, link.document_b) for link in links] == [("a", "b")]
        link = next(iter(links))
        assert link.relationship.startswith(EXPECTED["graph"]["relationship_prefix"])
        assert link.strength == pytest.approx(compute_topic_similarity(topics["a"], topics["b"]))


@pytest.mark.end_to_end
class TestTrendScenario:
    """Recent topics outrank old ones."""

    def test_recent_golang_beats_old_rust(self, fixed_now):
        analyzer = TrendAnalyzer()
        for doc_id, days in ((1, 1), (2, 2), (3, 1.5)):
            analyzer.add_document(doc_id, ["golang"], fixed_now - timedelta(days=days))
        for doc_id in (4, 5):
            analyzer.add_document(doc_id, ["rust"], fixed_now - timedelta(days=31))

        trends = analyzer.get_trends(window_days=7, limit=5, now=fixed_now)

        assert trends[0].topic == "golang"
        assert trends[0].score > trends[1].score


@pytest.mark.end_to_end
@pytest.mark.signal_resilience
class TestFullPipelineScenario:
    """A full pass with Hacker News unreachable still scores every post."""

    @patch("blogmon.signals.hackernews.requests.get")
    def test_hn_down(self, mock_get, sample_documents, interests, fixed_now):
        mock_get.side_effect = requests.ConnectionError("network unreachable")

        result = run_pipeline(
            sample_documents,
            settings=EngineSettings(interests=interests, link_min_similarity=0.3, trend_window_days=30),
            signal_provider=HackerNewsSignalProvider(timeout=1),
            exclude_self=True,
            now=fixed_now,
        )

        assert result.errors == []
        assert result.documents_scored == len(sample_documents)
        assert result.community_lookups_failed == len(sample_documents)
        low, high = EXPECTED["scoring"]["score_range"]
        for record in result.scores:
            assert record.community == EXPECTED["scoring"]["empty_community"]
            assert low <= record.novelty <= high
        assert result.links
        assert result.trends[0].topic == "golang"

    def test_undated_documents_trend_as_recent(self, interests, fixed_now):
        documents = [
            Document(id=1, title="Golang tips", content="goroutines"),
            Document(id=2, title="More golang", content="channels", published_at=fixed_now - timedelta(days=60)),
        ]
        result = run_pipeline(
            documents,
            settings=EngineSettings(interests=interests, trend_window_days=30),
            skip_community=True,
            now=fixed_now,
        )
        golang = next(trend for trend in result.trends if trend.topic == "golang")
        assert golang.recent_documents == [1]
