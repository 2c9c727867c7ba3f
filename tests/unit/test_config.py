"""Unit tests for pattern configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from chronoext.config import PatternConfig, load_config, reset_config

# =============================================================================
# Test Constants - Duplicated from src for test isolation
# =============================================================================

TEST_DEFAULT_PATTERNS = {
    "local_date": "yyyy-MM-dd",
    "local_time": "HH:mm:ss",
    "local_date_time": "yyyy-MM-dd'T'HH:mm:ss",
    "year": "yyyy",
    "year_month": "yyyy-MM",
    "month_day": "MM-dd",
}


class TestPatternConfig:
    """Tests for PatternConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Test the default patterns."""
        config = PatternConfig()
        for name, pattern in TEST_DEFAULT_PATTERNS.items():
            assert getattr(config, name) == pattern

    def test_names(self) -> None:
        """Test the configurable pattern names."""
        assert set(PatternConfig.names()) == set(TEST_DEFAULT_PATTERNS)

    def test_invalid_pattern_rejected(self) -> None:
        """Test that patterns are compiled on creation."""
        with pytest.raises(ValueError, match="Invalid pattern 'local_time'"):
            PatternConfig(local_time="HH:qq")

    def test_non_string_pattern_rejected(self) -> None:
        """Test that patterns must be strings."""
        with pytest.raises(ValueError, match="must be a string"):
            PatternConfig(local_time=12)  # type: ignore[arg-type]

    def test_formatter(self) -> None:
        """Test obtaining a strict formatter for a pattern."""
        formatter = PatternConfig(local_time="HH:mm").formatter("local_time")
        assert formatter.pattern == "HH:mm"
        assert not formatter.is_lenient
        with pytest.raises(KeyError):
            PatternConfig().formatter("unknown")

    def test_with_overrides(self) -> None:
        """Test replacing some patterns."""
        config = PatternConfig().with_overrides({"local_time": "HH:mm"})
        assert config.local_time == "HH:mm"
        assert config.local_date == TEST_DEFAULT_PATTERNS["local_date"]

    def test_unknown_override_rejected(self) -> None:
        """Test that unknown pattern names are rejected."""
        with pytest.raises(ValueError, match="Unknown pattern names: instant"):
            PatternConfig().with_overrides({"instant": "HH"})

    def test_frozen(self) -> None:
        """Test that a configuration cannot be modified."""
        with pytest.raises(AttributeError):
            PatternConfig().local_time = "HH"  # type: ignore[misc]


class TestFromEnv:
    """Tests for PatternConfig.from_env()."""

    def test_no_variables_gives_defaults(self) -> None:
        """Test defaults when nothing is set."""
        assert PatternConfig.from_env() == PatternConfig()

    def test_variables_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test CHRONOEXT_PATTERN_<NAME> variables."""
        monkeypatch.setenv("CHRONOEXT_PATTERN_LOCAL_TIME", "HH:mm")
        monkeypatch.setenv("CHRONOEXT_PATTERN_MONTH_DAY", "dd.MM")
        config = PatternConfig.from_env()
        assert config.local_time == "HH:mm"
        assert config.month_day == "dd.MM"
        assert config.year == TEST_DEFAULT_PATTERNS["year"]

    def test_invalid_variable_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an invalid pattern in the environment raises."""
        monkeypatch.setenv("CHRONOEXT_PATTERN_YEAR", "yyyy[")
        with pytest.raises(ValueError, match="Invalid pattern 'year'"):
            PatternConfig.from_env()


class TestFromYaml:
    """Tests for PatternConfig.from_yaml()."""

    def test_pattern_mapping(self, tmp_path: Path) -> None:
        """Test loading patterns from a YAML file."""
        path = tmp_path / "chronoext.yaml"
        path.write_text('pattern:\n  local_time: "HH:mm"\n  local_date: "dd.MM.yyyy"\n')
        config = PatternConfig.from_yaml(path)
        assert config.local_time == "HH:mm"
        assert config.local_date == "dd.MM.yyyy"
        assert config.year_month == TEST_DEFAULT_PATTERNS["year_month"]

    @pytest.mark.parametrize("content", ["", "other: 1\n", "pattern:\n"])
    def test_missing_patterns_give_defaults(self, tmp_path: Path, content: str) -> None:
        """Test that empty files and files without patterns give defaults."""
        path = tmp_path / "chronoext.yaml"
        path.write_text(content)
        assert PatternConfig.from_yaml(path) == PatternConfig()

    @pytest.mark.parametrize(
        ("content", "message"),
        [
            ("- a\n- b\n", "must contain a mapping"),
            ("pattern: HH\n", "'pattern' in .* must be a mapping"),
            ("pattern:\n  instant: HH\n", "Unknown pattern names"),
        ],
    )
    def test_malformed_files_rejected(self, tmp_path: Path, content: str, message: str) -> None:
        """Test that malformed content raises ValueError."""
        path = tmp_path / "chronoext.yaml"
        path.write_text(content)
        with pytest.raises(ValueError, match=message):
            PatternConfig.from_yaml(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that a missing file raises OSError."""
        with pytest.raises(OSError):
            PatternConfig.from_yaml(tmp_path / "missing.yaml")


class TestLoadConfig:
    """Tests for load_config() and reset_config()."""

    def test_environment_source(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading from the environment when no file is named."""
        monkeypatch.setenv("CHRONOEXT_PATTERN_LOCAL_TIME", "HH:mm")
        assert load_config().local_time == "HH:mm"

    def test_file_source(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that CHRONOEXT_CONFIG_FILE takes precedence over variables."""
        path = tmp_path / "chronoext.yaml"
        path.write_text("pattern:\n  local_time: H\n")
        monkeypatch.setenv("CHRONOEXT_CONFIG_FILE", str(path))
        monkeypatch.setenv("CHRONOEXT_PATTERN_LOCAL_TIME", "HH:mm")
        assert load_config().local_time == "H"

    def test_cached_until_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the configuration is loaded once until reset."""
        first = load_config()
        monkeypatch.setenv("CHRONOEXT_PATTERN_LOCAL_TIME", "HH:mm")
        assert load_config() is first
        reset_config()
        assert load_config().local_time == "HH:mm"

    def test_logs_source(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the configuration source is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="chronoext.config"):
            load_config()
        assert "Loading pattern configuration from environment" in caplog.text
