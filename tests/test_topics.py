"""
Tests for topic extraction.

Validates the lexicon, substring topic matching and display keywords.
"""

import pytest

from blogmon.topics.lexicon import TOPIC_LEXICON, get_all_topics, get_topic_keywords
from blogmon.topics.extractor import (
    extract_topics,
    extract_topics_with_keywords,
    extract_topics_from_insights,
    extract_keywords,
)


# =============================================================================
# Test Lexicon
# =============================================================================

class TestLexicon:
    """Tests for the static topic lexicon."""

    def test_lexicon_has_fifteen_topics(self):
        assert len(TOPIC_LEXICON) == 15

    def test_topic_order(self):
        topics = get_all_topics()
        assert topics[0] == "golang"
        assert topics[-1] == "api"
        assert topics.index("databases") < topics.index("performance")

    def test_labels_are_unique(self):
        topics = get_all_topics()
        assert len(topics) == len(set(topics))

    def test_keywords_are_lowercase(self):
        for _, keywords in TOPIC_LEXICON:
            for keyword in keywords:
                assert keyword == keyword.lower()

    def test_get_topic_keywords(self):
        assert "goroutine" in get_topic_keywords("golang")
        assert get_topic_keywords("cooking") == ()


# =============================================================================
# Test Topic Extraction
# =============================================================================

class TestExtractTopics:
    """Tests for extract_topics."""

    def test_extracts_multiple_topics(self):
        text = "This article discusses golang concurrency patterns and goroutines for distributed systems"
        topics = extract_topics(text)
        assert "golang" in topics
        assert "concurrency" in topics
        assert "distributed-systems" in topics

    def test_results_in_lexicon_order(self):
        assert extract_topics("Tuning PostgreSQL latency") == ["databases", "performance"]
        assert extract_topics("latency of PostgreSQL") == ["databases", "performance"]

    def test_case_insensitive(self):
        assert extract_topics("KUBERNETES operators") == ["kubernetes"]

    def test_substring_matching_without_word_boundaries(self):
        assert "golang" in extract_topics("google search ranking")
        assert "machine-learning" in extract_topics("writing html by hand")

    def test_multi_word_keyword(self):
        assert "machine-learning" in extract_topics("An intro to Machine Learning")

    def test_topic_reported_once(self):
        # pytorch belongs to two topics, each reported once
        topics = extract_topics("pytorch pytorch pytorch")
        assert topics.count("python") == 1
        assert topics.count("machine-learning") == 1

    def test_unrelated_text_has_no_topics(self):
        assert extract_topics("how to make pasta and pizza") == []

    def test_empty_text(self):
        assert extract_topics("") == []
        assert extract_topics(None) == []

    def test_custom_lexicon(self):
        lexicon = (("cooking", ("pasta", "pizza")),)
        assert extract_topics("how to make pasta", lexicon=lexicon) == ["cooking"]

    def test_input_not_modified(self):
        text = "Rust and Go"
        extract_topics(text)
        assert text == "Rust and Go"


class TestExtractTopicsWithKeywords:
    """Tests for extract_topics_with_keywords."""

    def test_reports_matched_keywords(self):
        matches = extract_topics_with_keywords("goroutines and redis")
        assert matches == {
            "golang": ["go", "goroutine", "goroutines"],
            "databases": ["redis"],
        }

    def test_empty_text(self):
        assert extract_topics_with_keywords("") == {}


class TestExtractTopicsFromInsights:
    """Tests for extract_topics_from_insights."""

    def test_joins_insights(self):
        insights = ["Uses raft consensus", "benchmarks"]
        assert extract_topics_from_insights(insights) == ["distributed-systems", "performance"]

    def test_skips_empty_insights(self):
        assert extract_topics_from_insights(["", None, "kubernetes"]) == ["kubernetes"]

    def test_no_insights(self):
        assert extract_topics_from_insights([]) == []


# =============================================================================
# Test Keyword Extraction
# =============================================================================

class TestExtractKeywords:
    """Tests for extract_keywords."""

    def test_drops_stop_words_and_duplicates(self):
        assert extract_keywords("The borrow checker and the borrow rules") == [
            "borrow", "checker", "rules",
        ]

    def test_min_length(self):
        assert extract_keywords("go is fun today", min_len=3) == ["fun", "today"]

    @pytest.mark.parametrize("text", ["", None, "the and with"])
    def test_nothing_significant(self, text):
        assert extract_keywords(text) == []
