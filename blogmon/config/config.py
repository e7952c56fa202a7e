"""
Configuration module for Blogmon.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.

Interests and scoring weights can also come from the YAML settings file
(see blogmon.config.settings); the values here are the environment defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of blogmon/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose logging (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Log level name understood by the logging module ("DEBUG", "INFO", ...)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# Render logs as JSON lines instead of the console renderer
LOG_JSON: bool = os.getenv("LOG_JSON", "false").lower() == "true"


# =============================================================================
# Paths
# =============================================================================

# Home directory holding config.yaml
# Default: ~/.blogmon
BLOGMON_HOME: str = os.getenv("BLOGMON_HOME", str(Path.home() / ".blogmon"))

# Settings file name inside BLOGMON_HOME
SETTINGS_FILENAME: str = "config.yaml"


# =============================================================================
# Community Signal (Hacker News search)
# =============================================================================

# HTTP request timeout in seconds for community lookups
# Default: 10 seconds - a lookup must never block scoring for long
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))

# Algolia-backed Hacker News search endpoint
HN_SEARCH_URL: str = os.getenv("HN_SEARCH_URL", "https://hn.algolia.com/api/v1/search")


# =============================================================================
# Scoring Configuration
# =============================================================================

# Weights for the final score (not required to sum to 1.0)
SCORE_WEIGHT_COMMUNITY: float = float(os.getenv("SCORE_WEIGHT_COMMUNITY", "0.3"))
SCORE_WEIGHT_RELEVANCE: float = float(os.getenv("SCORE_WEIGHT_RELEVANCE", "0.4"))
SCORE_WEIGHT_NOVELTY: float = float(os.getenv("SCORE_WEIGHT_NOVELTY", "0.3"))

# Maximum number of unscored documents scored per batch
SCORE_LIMIT: int = int(os.getenv("SCORE_LIMIT", "50"))

# Maximum number of documents fed to the novelty corpus / link / trend passes
CORPUS_LIMIT: int = int(os.getenv("CORPUS_LIMIT", "1000"))


# =============================================================================
# Topic Graph and Trends
# =============================================================================

# Minimum Jaccard similarity between topic sets for two posts to be linked
LINK_MIN_SIMILARITY: float = float(os.getenv("LINK_MIN_SIMILARITY", "0.3"))

# Trend analysis window in days
TREND_WINDOW_DAYS: int = int(os.getenv("TREND_WINDOW_DAYS", "30"))

# Maximum number of trends returned
TREND_LIMIT: int = int(os.getenv("TREND_LIMIT", "10"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def settings_path() -> Path:
    """Path of the YAML settings file under BLOGMON_HOME."""
    return Path(BLOGMON_HOME) / SETTINGS_FILENAME


def validate_config() -> list[str]:
    """
    Validate environment configuration.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    for key, value in (
        ("SCORE_WEIGHT_COMMUNITY", SCORE_WEIGHT_COMMUNITY),
        ("SCORE_WEIGHT_RELEVANCE", SCORE_WEIGHT_RELEVANCE),
        ("SCORE_WEIGHT_NOVELTY", SCORE_WEIGHT_NOVELTY),
    ):
        if value < 0:
            errors.append(f"{key} cannot be negative")

    if not (0.0 <= LINK_MIN_SIMILARITY <= 1.0):
        errors.append("LINK_MIN_SIMILARITY must be between 0.0 and 1.0")

    if TREND_WINDOW_DAYS < 1:
        errors.append("TREND_WINDOW_DAYS must be at least 1")

    if TREND_LIMIT < 1:
        errors.append("TREND_LIMIT must be at least 1")

    if SCORE_LIMIT < 1:
        errors.append("SCORE_LIMIT must be at least 1")

    if CORPUS_LIMIT < 1:
        errors.append("CORPUS_LIMIT must be at least 1")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  BLOGMON_HOME: {BLOGMON_HOME}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(
        f"  SCORE_WEIGHTS: community={SCORE_WEIGHT_COMMUNITY} "
        f"relevance={SCORE_WEIGHT_RELEVANCE} novelty={SCORE_WEIGHT_NOVELTY}"
    )
    print(f"  LINK_MIN_SIMILARITY: {LINK_MIN_SIMILARITY}")
    print(f"  TREND_WINDOW_DAYS: {TREND_WINDOW_DAYS}")
