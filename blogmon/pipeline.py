"""
Blogmon engine pipeline - batch execution logic.

This module runs one pass of the engine over a batch of documents:

    Documents → Corpus → Scores → Topics → Links → Trends

Steps:
1. Load documents from the document source (most recent first)
2. Build the novelty corpus from every loaded document (a barrier: no
   document is scored until the corpus is complete)
3. Score unscored documents (or all, with rescore): community, relevance,
   novelty and the weighted final score
4. Tag every document with topics
5. Link documents with similar topic sets and upsert the links
6. Rank trending topics over the configured window

Design principles:
- Error isolation: one document failing to score does not stop the batch
- Best-effort community signal: lookup failures degrade the community score to 0
- Idempotency: scores and links are upserted, so re-running is safe
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence
import traceback

import structlog

from blogmon.config import config
from blogmon.config.settings import EngineSettings
from blogmon.models.document import Document, DocumentId, as_naive_utc, utc_now
from blogmon.models.records import Link, ScoreRecord, Trend
from blogmon.scoring.community import score_signal
from blogmon.scoring.novelty import NoveltyCorpus
from blogmon.scoring.relevance import RelevanceScorer
from blogmon.scoring.scorer import build_score_record
from blogmon.signals.base import CommunitySignalProvider
from blogmon.signals.hackernews import HackerNewsSignalProvider
from blogmon.storage.base import DocumentSource, ResultStore, UpsertResult
from blogmon.storage.memory import MemoryStorage
from blogmon.topics.extractor import extract_topics, extract_topics_from_insights
from blogmon.topics.lexicon import get_all_topics
from blogmon.topics.graph import LinkSet, build_links
from blogmon.topics.trends import TrendAnalyzer

logger = structlog.get_logger(__name__)


# =============================================================================
# Pipeline Result Data Structures
# =============================================================================

@dataclass
class PipelineResult:
    """Complete result of a pipeline execution."""
    started_at: datetime
    finished_at: Optional[datetime] = None

    documents_loaded: int = 0
    corpus_size: int = 0

    # Scoring
    scores: List[ScoreRecord] = field(default_factory=list)
    community_lookups_failed: int = 0

    # Topics, links, trends
    topics: Dict[DocumentId, List[str]] = field(default_factory=dict)
    links: List[Link] = field(default_factory=list)
    link_result: Optional[UpsertResult] = None
    trends: List[Trend] = field(default_factory=list)

    # Errors
    errors: List[str] = field(default_factory=list)

    @property
    def documents_scored(self) -> int:
        return len(self.scores)

    @property
    def duration_seconds(self) -> float:
        """Total pipeline duration in seconds."""
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "BLOGMON ENGINE SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            "",
            f"Documents loaded: {self.documents_loaded}",
            f"Corpus size:      {self.corpus_size}",
            f"Documents scored: {self.documents_scored}",
            f"Community lookups failed: {self.community_lookups_failed}",
        ]

        tagged = sum(1 for topics in self.topics.values() if topics)
        lines.append(f"Documents tagged: {tagged}")

        if self.link_result:
            lines.extend([
                "",
                "Links:",
                f"  Inserted: {self.link_result.inserted}",
                f"  Updated:  {self.link_result.updated}",
            ])

        if self.trends:
            lines.extend(["", "Trends:"])
            for i, trend in enumerate(self.trends, 1):
                lines.append(
                    f"  {i:2d}. {trend.topic:<20} {trend.score:6.1f} "
                    f"({trend.count} posts, {trend.recent_count} recent)"
                )

        if self.errors:
            lines.extend(["", "Errors:"])
            for error in self.errors[:5]:  # Show first 5
                lines.append(f"  - {error}")

        lines.append("=" * 60)
        return "\n".join(lines)


# =============================================================================
# Pipeline Configuration
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Options for a pipeline run.

    Attributes:
        score_limit: Maximum documents scored per run.
        corpus_limit: Maximum documents loaded for the corpus, links and trends.
        skip_community: Do not query the community-signal provider.
        exclude_self: Leave each document out of its own novelty comparison.
            Off by default: a document already in the corpus then scores
            novelty 0 against itself.
        rescore: Score every loaded document, not just unscored ones.
        link_min_similarity: Jaccard threshold for links (None: settings value).
        trend_window_days: Trend window (None: settings value).
        trend_limit: Maximum trends returned.
        verbose: Include tracebacks in recorded errors.
    """
    score_limit: int = config.SCORE_LIMIT
    corpus_limit: int = config.CORPUS_LIMIT
    skip_community: bool = False
    exclude_self: bool = False
    rescore: bool = False
    link_min_similarity: Optional[float] = None
    trend_window_days: Optional[int] = None
    trend_limit: int = config.TREND_LIMIT
    verbose: bool = False


# =============================================================================
# Pipeline Class
# =============================================================================

class EnginePipeline:
    """
    Runs the scoring and topic graph engine over a document source.

    Usage:
        storage = MemoryStorage(documents)
        pipeline = EnginePipeline(storage, settings=load_settings())
        result = pipeline.run()
        print(result.to_summary())
    """

    def __init__(
        self,
        source: DocumentSource,
        settings: Optional[EngineSettings] = None,
        config: Optional[PipelineConfig] = None,
        store: Optional[ResultStore] = None,
        signal_provider: Optional[CommunitySignalProvider] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            source: Where documents come from.
            settings: Interests, weights, link threshold, trend window.
            config: Run options. Defaults to PipelineConfig().
            store: Where results go. Defaults to the source if it is also a
                ResultStore, else a fresh MemoryStorage.
            signal_provider: Community-signal lookup. Defaults to Hacker News.
        """
        self.source = source
        self.settings = settings or EngineSettings()
        self.config = config or PipelineConfig()
        if store is None:
            store = source if isinstance(source, ResultStore) else MemoryStorage()
        self.store = store
        self.signal_provider = signal_provider
        if self.signal_provider is None and not self.config.skip_community:
            self.signal_provider = HackerNewsSignalProvider()
        self.relevance_scorer = RelevanceScorer(self.settings.interests)
        self._community_failures = 0

    @property
    def link_min_similarity(self) -> float:
        if self.config.link_min_similarity is not None:
            return self.config.link_min_similarity
        return self.settings.link_min_similarity

    @property
    def trend_window_days(self) -> int:
        if self.config.trend_window_days is not None:
            return self.config.trend_window_days
        return self.settings.trend_window_days

    # -- corpus and scoring --------------------------------------------------

    def build_corpus(self, documents: Sequence[Document]) -> NoveltyCorpus:
        """
        Feed every document into a fresh novelty corpus.

        The corpus is complete when this returns; only then may it be scored against.
        """
        corpus = NoveltyCorpus()
        for document in documents:
            corpus.add_document(document.id, document.text)
        logger.info("corpus_built", documents=len(documents), corpus_size=corpus.document_count)
        return corpus

    def community_score(self, document: Document) -> float:
        """
        Community score from the signal provider, 0 when unavailable.

        Any lookup failure is logged and counted, never raised: the
        document is still scored, with community 0.
        """
        if self.config.skip_community or self.signal_provider is None or not document.url:
            return 0.0

        try:
            signal = self.signal_provider.search_by_url(document.url)
        except Exception as e:
            self._community_failures += 1
            logger.warning(
                "community_lookup_failed",
                provider=self.signal_provider.name,
                document_id=document.id,
                url=document.url,
                error=f"{type(e).__name__}: {e}",
            )
            return 0.0

        if signal is not None:
            logger.debug(
                "community_signal_found",
                document_id=document.id,
                points=signal.points,
                comments=signal.comments,
            )
        return score_signal(signal)

    def score_document(self, document: Document, corpus: NoveltyCorpus) -> ScoreRecord:
        """
        Compute the full score record for one document against a built corpus.
        """
        text = document.text
        community = self.community_score(document)
        relevance = self.relevance_scorer.score(document.title, text)
        exclude_id = document.id if self.config.exclude_self else None
        novelty = corpus.score(text, exclude_id=exclude_id)

        record = build_score_record(
            document.id,
            community=community,
            relevance=relevance,
            novelty=novelty,
            weights=self.settings.weights,
        )
        logger.debug(
            "document_scored",
            document_id=document.id,
            community=round(community, 1),
            relevance=round(relevance, 1),
            novelty=round(novelty, 1),
            final=round(record.final, 1),
        )
        return record

    def _select_for_scoring(self, documents: Sequence[Document]) -> List[Document]:
        if self.config.rescore:
            return list(documents[: self.config.score_limit])
        ids = self.store.unscored_ids([doc.id for doc in documents], limit=self.config.score_limit)
        selected = set(ids)
        return [doc for doc in documents if doc.id in selected]

    def score_documents(
        self,
        documents: Sequence[Document],
        corpus: NoveltyCorpus,
    ) -> tuple[List[ScoreRecord], List[str]]:
        """
        Score and store documents with per-document error isolation.

        Returns:
            Tuple of (stored score records, error messages).
        """
        records: List[ScoreRecord] = []
        errors: List[str] = []

        for document in documents:
            try:
                record = self.score_document(document, corpus)
                self.store.upsert_score(record)
                records.append(record)
            except Exception as e:
                error_msg = f"Error scoring document {document.id}: {type(e).__name__}: {e}"
                if self.config.verbose:
                    error_msg += f"\n{traceback.format_exc()}"
                logger.error("document_score_failed", document_id=document.id, error=str(e))
                errors.append(error_msg)

        return records, errors

    def score_batch(self, documents: Optional[Sequence[Document]] = None) -> PipelineResult:
        """
        Build the corpus from the batch, then score it.

        Args:
            documents: Batch to use. Defaults to the source's documents.
        """
        result = PipelineResult(started_at=datetime.now())
        documents = self._load(documents, result)
        self._score(documents, result)
        result.finished_at = datetime.now()
        return result

    # -- topics, links, trends -----------------------------------------------

    def tag_documents(self, documents: Sequence[Document]) -> Dict[DocumentId, List[str]]:
        """
        Extract topics for every document from its title, body and insights,
        and store them.
        """
        document_topics: Dict[DocumentId, List[str]] = {}
        for document in documents:
            topics = extract_topics(document.full_text)
            insights = self.source.get_insights(document.id)
            if insights:
                found = set(topics) | set(extract_topics_from_insights(insights))
                topics = [topic for topic in get_all_topics() if topic in found]
            document_topics[document.id] = topics
            self.store.set_topics(document.id, topics)
        return document_topics

    def link_batch(self, document_topics: Dict[DocumentId, List[str]]) -> tuple[LinkSet, UpsertResult]:
        """
        Link documents by topic similarity and upsert the links into the store.
        """
        links = build_links(document_topics, min_similarity=self.link_min_similarity)
        upsert_result = self.store.upsert_links(list(links))
        logger.info(
            "links_stored",
            links=len(links),
            inserted=upsert_result.inserted,
            updated=upsert_result.updated,
        )
        return links, upsert_result

    def trend_batch(
        self,
        documents: Sequence[Document],
        document_topics: Dict[DocumentId, List[str]],
        now: Optional[datetime] = None,
    ) -> List[Trend]:
        """
        Rank topics over the trend window. Undated documents count as published now.
        """
        now = as_naive_utc(now) if now is not None else utc_now()
        analyzer = TrendAnalyzer()
        for document in documents:
            analyzer.add_document(
                document.id,
                document_topics.get(document.id, []),
                document.timestamp(now),
            )
        return analyzer.get_trends(self.trend_window_days, self.config.trend_limit, now=now)

    # -- run -----------------------------------------------------------------

    def _load(self, documents: Optional[Sequence[Document]], result: PipelineResult) -> List[Document]:
        if documents is None:
            documents = self.source.list_documents(limit=self.config.corpus_limit)
        documents = list(documents)
        result.documents_loaded = len(documents)
        logger.info("documents_loaded", source=self.source.name, documents=len(documents))
        return documents

    def _score(self, documents: List[Document], result: PipelineResult) -> None:
        corpus = self.build_corpus(documents)
        result.corpus_size = corpus.document_count

        to_score = self._select_for_scoring(documents)
        if not to_score:
            logger.info("nothing_to_score")
            return

        self._community_failures = 0
        records, errors = self.score_documents(to_score, corpus)
        result.scores.extend(records)
        result.errors.extend(errors)
        result.community_lookups_failed += self._community_failures

    def run(self, documents: Optional[Sequence[Document]] = None, now: Optional[datetime] = None) -> PipelineResult:
        """
        Execute the full pipeline.

        Args:
            documents: Batch to use. Defaults to the source's documents.
            now: Current time for trend analysis (for testing).

        Returns:
            PipelineResult with execution details.
        """
        result = PipelineResult(started_at=datetime.now())

        try:
            documents = self._load(documents, result)

            self._score(documents, result)

            result.topics = self.tag_documents(documents)

            if len(documents) >= 2:
                links, link_result = self.link_batch(result.topics)
                result.links = list(links)
                result.link_result = link_result
            else:
                logger.info("linking_skipped", reason="need at least 2 documents")

            result.trends = self.trend_batch(documents, result.topics, now=now)

        except Exception as e:
            result.errors.append(f"Pipeline error: {str(e)}")
            logger.error("pipeline_failed", error=str(e))
            if self.config.verbose:
                result.errors.append(traceback.format_exc())

        result.finished_at = datetime.now()
        logger.info(
            "pipeline_finished",
            scored=result.documents_scored,
            links=len(result.links),
            trends=len(result.trends),
            errors=len(result.errors),
            duration_s=round(result.duration_seconds, 2),
        )
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_pipeline(
    documents: Sequence[Document],
    settings: Optional[EngineSettings] = None,
    skip_community: bool = False,
    exclude_self: bool = False,
    signal_provider: Optional[CommunitySignalProvider] = None,
    now: Optional[datetime] = None,
    **options,
) -> PipelineResult:
    """
    Run the engine over an in-memory batch.

    Convenience function for programmatic use.

    Args:
        documents: Documents to process.
        settings: Engine settings (defaults when omitted).
        skip_community: If True, do not query the community-signal provider.
        exclude_self: If True, leave each document out of its own novelty comparison.
        signal_provider: Community-signal provider (Hacker News by default).
        now: Current time for trend analysis (for testing).
        **options: Other PipelineConfig fields.

    Returns:
        PipelineResult with execution details.
    """
    pipeline_config = PipelineConfig(
        skip_community=skip_community,
        exclude_self=exclude_self,
        **options,
    )
    storage = MemoryStorage(documents)
    pipeline = EnginePipeline(
        storage,
        settings=settings,
        config=pipeline_config,
        signal_provider=signal_provider,
    )
    return pipeline.run(now=now)
