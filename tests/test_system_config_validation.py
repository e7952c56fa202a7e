"""
Configuration Validation Tests

Verifies that environment defaults are applied, that invalid environment
values are reported clearly, and that the YAML settings file is validated
at load time with every problem reported at once.

Test data and expected values are defined in tests/test_config.py.
Update that file to change test parameters without modifying this script.
"""

import importlib
import os
from unittest.mock import patch

import pytest

import blogmon.config.config as config_module
from blogmon.config.settings import EngineSettings, ScoringWeights, load_settings, save_settings
from blogmon.errors import ConfigError
from blogmon.models.interest import Interest

# Import externalized test configuration
from tests.test_config import CONFIG, MESSAGES, TEST_DATA


@pytest.fixture
def reload_config():
    """Reload the config module under patched env, restoring it afterwards."""
    yield lambda: importlib.reload(config_module)
    importlib.reload(config_module)


@pytest.mark.config_validation
class TestEnvironmentDefaults:
    """Tests that defaults apply when nothing is configured."""

    def test_defaults_are_valid(self, reload_config):
        """
        GIVEN: No engine variables are set
        WHEN: validate_config() is called
        THEN: No errors are returned and documented defaults apply
        """
        overrides = {key: "" for key in (
            "SCORE_WEIGHT_COMMUNITY", "LINK_MIN_SIMILARITY", "TREND_WINDOW_DAYS",
        )}
        with patch.dict(os.environ, overrides, clear=False):
            for key in overrides:
                del os.environ[key]
            config = reload_config()

            assert config.validate_config() == []
            assert config.SCORE_WEIGHT_COMMUNITY == CONFIG["default_weights"]["community"]
            assert config.LINK_MIN_SIMILARITY == CONFIG["default_link_min_similarity"]
            assert config.TREND_WINDOW_DAYS == CONFIG["default_trend_window_days"]

    def test_environment_helpers(self, reload_config):
        with patch.dict(os.environ, {"APP_ENV": CONFIG["environments"]["production"]}):
            config = reload_config()
            assert config.is_production()
            assert not config.is_development()

    def test_settings_path_under_home(self, reload_config, tmp_path):
        with patch.dict(os.environ, {"BLOGMON_HOME": str(tmp_path)}):
            config = reload_config()
            assert config.settings_path() == tmp_path / "config.yaml"

    def test_config_summary(self, reload_config, capsys):
        """
        GIVEN: Link and trend settings come from the environment
        WHEN: print_config_summary() is called
        THEN: The effective values are printed
        """
        with patch.dict(os.environ, {"LINK_MIN_SIMILARITY": "0.45", "TREND_WINDOW_DAYS": "14"}):
            reload_config().print_config_summary()

        output = capsys.readouterr().out
        assert "LINK_MIN_SIMILARITY: 0.45" in output
        assert "TREND_WINDOW_DAYS: 14" in output
        assert "SCORE_WEIGHTS: community=" in output


@pytest.mark.config_validation
class TestInvalidEnvironment:
    """Tests that invalid environment values are reported."""

    def test_negative_weight_reported(self, reload_config):
        """
        GIVEN: SCORE_WEIGHT_NOVELTY is negative
        WHEN: validate_config() is called
        THEN: The error names the variable
        """
        with patch.dict(os.environ, {"SCORE_WEIGHT_NOVELTY": "-0.5"}):
            errors = reload_config().validate_config()

            assert any("SCORE_WEIGHT_NOVELTY" in error for error in errors)
            assert any(MESSAGES["config_errors"]["negative_weight"] in error for error in errors)

    def test_all_problems_reported(self, reload_config):
        """
        GIVEN: Several invalid values at once
        WHEN: validate_config() is called
        THEN: Every problem is reported, not just the first
        """
        with patch.dict(os.environ, {
            "LINK_MIN_SIMILARITY": "1.5",
            "TREND_WINDOW_DAYS": "0",
        }):
            errors = reload_config().validate_config()

            assert any("LINK_MIN_SIMILARITY" in error for error in errors)
            assert any("TREND_WINDOW_DAYS" in error for error in errors)


@pytest.mark.config_validation
class TestSettingsFile:
    """Tests for loading the YAML settings file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml")
        assert settings.interests == []
        assert isinstance(settings.weights, ScoringWeights)

    def test_load_settings(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(TEST_DATA["settings_yaml"], encoding="utf-8")

        settings = load_settings(path)

        assert [interest.topic for interest in settings.interests] == ["golang", "rust"]
        assert settings.interests[0].keywords == ["go", "goroutine"]
        assert settings.weights == ScoringWeights(community=0.2, relevance=0.5, novelty=0.3)
        assert settings.link_min_similarity == 0.5
        assert settings.trend_window_days == 14

    def test_missing_sections_fall_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("interests:\n  - topic: rust\n", encoding="utf-8")

        settings = load_settings(path)

        assert settings.link_min_similarity == CONFIG["default_link_min_similarity"]
        assert settings.trend_window_days == CONFIG["default_trend_window_days"]

    def test_unparseable_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("interests: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="cannot parse YAML"):
            load_settings(path)

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("interests: golang\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be a list"):
            load_settings(path)

    def test_all_validation_errors_reported(self, tmp_path):
        """
        GIVEN: A negative interest weight, a negative scoring weight and an
               out-of-range link threshold
        WHEN: load_settings() is called
        THEN: ConfigError lists every problem
        """
        path = tmp_path / "config.yaml"
        path.write_text(
            "interests:\n"
            "  - topic: rust\n"
            "    weight: -1\n"
            "scoring:\n"
            "  novelty: -0.3\n"
            "graph:\n"
            "  min_similarity: 2\n",
            encoding="utf-8",
        )

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)

        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any(MESSAGES["config_errors"]["similarity_range"] in error for error in errors)
        assert str(path) in str(exc_info.value)

    def test_duplicate_interest(self):
        settings = EngineSettings(interests=[Interest("rust"), Interest("Rust")])
        assert any("more than once" in error for error in settings.validate())

    def test_window_validation(self):
        settings = EngineSettings(trend_window_days=0)
        assert any(MESSAGES["config_errors"]["window"] in error for error in settings.validate())

    def test_save_then_load(self, tmp_path):
        settings = EngineSettings(
            interests=[Interest("golang", 1.0, ["go"])],
            weights=ScoringWeights(0.1, 0.6, 0.3),
            link_min_similarity=0.4,
            trend_window_days=7,
        )
        path = save_settings(settings, tmp_path / "nested" / "config.yaml")

        assert path.exists()
        assert load_settings(path) == settings
