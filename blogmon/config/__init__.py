"""
Configuration module.

Handles environment variables and the YAML settings file (interests, weights).
"""

from blogmon.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    LOG_JSON,
    BLOGMON_HOME,
    REQUEST_TIMEOUT,
    HN_SEARCH_URL,
    SCORE_WEIGHT_COMMUNITY,
    SCORE_WEIGHT_RELEVANCE,
    SCORE_WEIGHT_NOVELTY,
    SCORE_LIMIT,
    CORPUS_LIMIT,
    LINK_MIN_SIMILARITY,
    TREND_WINDOW_DAYS,
    TREND_LIMIT,
    is_production,
    is_development,
    settings_path,
    validate_config,
    print_config_summary,
)
from blogmon.config.settings import (
    ScoringWeights,
    EngineSettings,
    load_settings,
    save_settings,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_JSON",
    "BLOGMON_HOME",
    "REQUEST_TIMEOUT",
    "HN_SEARCH_URL",
    "SCORE_WEIGHT_COMMUNITY",
    "SCORE_WEIGHT_RELEVANCE",
    "SCORE_WEIGHT_NOVELTY",
    "SCORE_LIMIT",
    "CORPUS_LIMIT",
    "LINK_MIN_SIMILARITY",
    "TREND_WINDOW_DAYS",
    "TREND_LIMIT",
    "is_production",
    "is_development",
    "settings_path",
    "validate_config",
    "print_config_summary",
    "ScoringWeights",
    "EngineSettings",
    "load_settings",
    "save_settings",
]
