"""
Topic lexicon for Blogmon.

This table is the single source of truth for the topics posts are tagged
with. Topic tags drive both the topic graph (posts sharing topics are linked)
and trend analysis.

MATCHING CONTRACT:

    A topic applies to a text when ANY of its keywords occurs as a literal,
    case-insensitive substring of the text. There are no word boundaries:
    short keywords such as "go" or "ml" also match inside unrelated words
    ("google", "html"). This trades precision for recall and is intentional;
    changing it changes which posts get linked, so do it deliberately.

The table is static data: an ordered tuple of (topic, keywords) pairs. Its
order is the order topics are reported in.
"""

# (topic label, lower-case keyword phrases)
TOPIC_LEXICON: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("golang", ("go", "golang", "goroutine", "goroutines")),
    ("rust", ("rust", "rustlang", "cargo", "ownership")),
    ("python", ("python", "django", "flask", "pytorch")),
    ("javascript", ("javascript", "typescript", "nodejs", "react", "vue")),
    ("distributed-systems", ("distributed", "consensus", "raft", "paxos", "microservices")),
    ("databases", ("database", "sql", "postgresql", "mysql", "redis", "mongodb")),
    ("kubernetes", ("kubernetes", "k8s", "docker", "containers", "helm")),
    ("performance", ("performance", "optimization", "latency", "throughput", "benchmark")),
    ("security", ("security", "authentication", "encryption", "vulnerability")),
    ("machine-learning", ("machine learning", "ml", "neural", "tensorflow", "pytorch")),
    ("devops", ("devops", "ci/cd", "jenkins", "github actions", "terraform")),
    ("architecture", ("architecture", "design patterns", "solid", "clean architecture")),
    ("testing", ("testing", "unit test", "integration test", "tdd")),
    ("concurrency", ("concurrency", "parallel", "async", "threads", "mutex")),
    ("api", ("api", "rest", "graphql", "grpc", "openapi")),
)


def get_all_topics() -> list[str]:
    """
    Get list of all topic labels, in lexicon order.
    """
    return [topic for topic, _ in TOPIC_LEXICON]


def get_topic_keywords(topic: str) -> tuple[str, ...]:
    """
    Get the keywords for a topic.

    Returns:
        Keyword tuple (empty if the topic is not in the lexicon).
    """
    for label, keywords in TOPIC_LEXICON:
        if label == topic:
            return keywords
    return ()
