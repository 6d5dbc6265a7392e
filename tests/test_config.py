"""Unit tests for configuration management."""

import pytest
from pydantic import ValidationError

from fanfetch.config import FetchConfig, Strategy, LogFormat


class TestFetchConfigDefaults:
    """Test default configuration values."""

    def test_default_strategy(self):
        config = FetchConfig()
        assert config.strategy == Strategy.PARALLEL

    def test_default_latencies(self):
        config = FetchConfig()
        assert config.profile_delay_ms == 1000
        assert config.posts_delay_ms == 1500
        assert config.comments_delay_ms == 2000

    def test_default_failure_rates(self):
        config = FetchConfig()
        assert config.profile_failure_rate == 0.0
        assert config.posts_failure_rate == 0.0
        assert config.comment_failure_rate == 0.3

    def test_default_seed_is_unset(self):
        config = FetchConfig()
        assert config.random_seed is None

    def test_default_log_format(self):
        config = FetchConfig()
        assert config.log_format == LogFormat.CONSOLE


class TestFetchConfigEnvVars:
    """Test configuration from environment variables."""

    def test_strategy_from_env(self, monkeypatch):
        monkeypatch.setenv("FANFETCH_STRATEGY", "sequential")
        config = FetchConfig()
        assert config.strategy == Strategy.SEQUENTIAL

    def test_failure_rate_from_env(self, monkeypatch):
        monkeypatch.setenv("FANFETCH_COMMENT_FAILURE_RATE", "0")
        config = FetchConfig()
        assert config.comment_failure_rate == 0.0

    def test_seed_from_env(self, monkeypatch):
        monkeypatch.setenv("FANFETCH_RANDOM_SEED", "42")
        config = FetchConfig()
        assert config.random_seed == 42

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("FANFETCH_LOG_LEVEL", "DEBUG")
        config = FetchConfig()
        assert config.log_level == "DEBUG"


class TestFetchConfigValidation:
    """Test field constraints."""

    def test_rejects_rate_above_one(self):
        with pytest.raises(ValidationError):
            FetchConfig(comment_failure_rate=1.5)

    def test_rejects_negative_delay(self):
        with pytest.raises(ValidationError):
            FetchConfig(posts_delay_ms=-1)


class TestWithoutLatency:
    """Test the zero-latency copy helper."""

    def test_zeroes_all_delays(self):
        config = FetchConfig(comment_failure_rate=0.5).without_latency()
        assert config.profile_delay_ms == 0
        assert config.posts_delay_ms == 0
        assert config.comments_delay_ms == 0

    def test_keeps_other_settings(self):
        config = FetchConfig(comment_failure_rate=0.5, random_seed=3).without_latency()
        assert config.comment_failure_rate == 0.5
        assert config.random_seed == 3


class TestStrategyEnum:
    """Test Strategy enum values."""

    def test_strategies(self):
        assert Strategy.SEQUENTIAL.value == "sequential"
        assert Strategy.PARALLEL.value == "parallel"
