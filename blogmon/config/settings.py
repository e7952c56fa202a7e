"""
Engine settings: interest profile, scoring weights, link threshold, trend window.

Settings live in a YAML file (config.yaml under BLOGMON_HOME) shaped like:

    interests:
      - topic: golang
        weight: 1.0
        keywords: [go, goroutine]
    scoring:
      community: 0.3
      relevance: 0.4
      novelty: 0.3
    graph:
      min_similarity: 0.3
    trends:
      window_days: 30

Missing file or missing sections fall back to the environment defaults in
blogmon.config.config. Everything is validated here, at load time, so scorers
never have to re-check their inputs.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

import structlog
import yaml

from blogmon.config import config
from blogmon.errors import ConfigError
from blogmon.models.interest import Interest

logger = structlog.get_logger(__name__)


@dataclass
class ScoringWeights:
    """Weights of the three sub-scores in the final score."""

    community: float = 0.3
    relevance: float = 0.4
    novelty: float = 0.3

    @classmethod
    def from_env(cls) -> "ScoringWeights":
        return cls(
            community=config.SCORE_WEIGHT_COMMUNITY,
            relevance=config.SCORE_WEIGHT_RELEVANCE,
            novelty=config.SCORE_WEIGHT_NOVELTY,
        )

    def validate(self) -> list[str]:
        errors = []
        for name in ("community", "relevance", "novelty"):
            if getattr(self, name) < 0:
                errors.append(f"scoring weight '{name}' cannot be negative")
        return errors

    def to_dict(self) -> dict:
        return {"community": self.community, "relevance": self.relevance, "novelty": self.novelty}


@dataclass
class EngineSettings:
    """
    Everything the engine reads from configuration.

    Attributes:
        interests: Interest profile (may be empty: relevance is then neutral).
        weights: Final score weights.
        link_min_similarity: Jaccard threshold for linking two documents.
        trend_window_days: Trend analysis window.
    """

    interests: list[Interest] = field(default_factory=list)
    weights: ScoringWeights = field(default_factory=ScoringWeights.from_env)
    link_min_similarity: float = field(default_factory=lambda: config.LINK_MIN_SIMILARITY)
    trend_window_days: int = field(default_factory=lambda: config.TREND_WINDOW_DAYS)

    def validate(self) -> list[str]:
        """
        Validate all settings.

        Returns:
            Every problem found (empty if valid).
        """
        errors = []

        seen_topics = set()
        for interest in self.interests:
            errors.extend(interest.validate())
            topic = interest.topic.lower()
            if topic and topic in seen_topics:
                errors.append(f"interest '{interest.topic}' is defined more than once")
            seen_topics.add(topic)

        errors.extend(self.weights.validate())

        if not (0.0 <= self.link_min_similarity <= 1.0):
            errors.append("graph min_similarity must be between 0.0 and 1.0")

        if self.trend_window_days < 1:
            errors.append("trends window_days must be at least 1")

        return errors

    def to_dict(self) -> dict:
        return {
            "interests": [interest.to_dict() for interest in self.interests],
            "scoring": self.weights.to_dict(),
            "graph": {"min_similarity": self.link_min_similarity},
            "trends": {"window_days": self.trend_window_days},
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EngineSettings":
        """
        Build settings from a parsed YAML mapping.

        Raises:
            ConfigError: If a section has the wrong shape.
        """
        settings = cls()
        if not data:
            return settings

        if not isinstance(data, dict):
            raise ConfigError(["settings file must contain a mapping"])

        interests = data.get("interests") or []
        if not isinstance(interests, list):
            raise ConfigError(["'interests' must be a list"])
        try:
            settings.interests = [Interest.from_dict(entry) for entry in interests]
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError([f"invalid interest entry: {e}"]) from e

        scoring = data.get("scoring") or {}
        try:
            settings.weights = ScoringWeights(
                community=float(scoring.get("community", settings.weights.community)),
                relevance=float(scoring.get("relevance", settings.weights.relevance)),
                novelty=float(scoring.get("novelty", settings.weights.novelty)),
            )
            graph = data.get("graph") or {}
            settings.link_min_similarity = float(
                graph.get("min_similarity", settings.link_min_similarity)
            )
            trends = data.get("trends") or {}
            settings.trend_window_days = int(trends.get("window_days", settings.trend_window_days))
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError([f"invalid numeric setting: {e}"]) from e

        return settings


def load_settings(path: Optional[Union[str, Path]] = None) -> EngineSettings:
    """
    Load and validate settings.

    Args:
        path: YAML file to read. Defaults to config.yaml under BLOGMON_HOME.

    Returns:
        EngineSettings (defaults when the file does not exist).

    Raises:
        ConfigError: If the file cannot be parsed or fails validation.
    """
    path = Path(path) if path is not None else config.settings_path()

    if not path.exists():
        logger.debug("settings_file_missing", path=str(path))
        settings = EngineSettings()
    else:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError([f"cannot parse YAML: {e}"], path=str(path)) from e
        settings = EngineSettings.from_dict(data)

    errors = settings.validate()
    if errors:
        raise ConfigError(errors, path=str(path))

    logger.debug(
        "settings_loaded",
        path=str(path),
        interests=len(settings.interests),
        weights=settings.weights.to_dict(),
    )
    return settings


def save_settings(settings: EngineSettings, path: Optional[Union[str, Path]] = None) -> Path:
    """
    Write settings to YAML, creating the parent directory if needed.

    Returns:
        The path written.
    """
    path = Path(path) if path is not None else config.settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(settings.to_dict(), f, sort_keys=False)

    return path
