"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings


class Strategy(str, Enum):
    """Orchestration strategy for a fetch run."""
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class FetchConfig(BaseSettings):
    """Configuration for fanfetch runs."""

    # Orchestration
    strategy: Strategy = Strategy.PARALLEL

    # Simulated latency per stage
    profile_delay_ms: int = Field(default=1000, ge=0)
    posts_delay_ms: int = Field(default=1500, ge=0)
    comments_delay_ms: int = Field(default=2000, ge=0)

    # Fault injection
    profile_failure_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    posts_failure_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    comment_failure_rate: float = Field(default=0.3, ge=0.0, le=1.0)
    random_seed: int | None = None

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "FANFETCH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def without_latency(self) -> "FetchConfig":
        """Return a copy with every simulated delay set to zero."""
        return self.model_copy(
            update={"profile_delay_ms": 0, "posts_delay_ms": 0, "comments_delay_ms": 0}
        )
