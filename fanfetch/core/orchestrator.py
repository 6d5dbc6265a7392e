"""Orchestrator - configures a run and dispatches to an aggregation strategy."""

from dataclasses import dataclass

from fanfetch.config import FetchConfig, Strategy
from fanfetch.core.parallel import fetch_in_parallel
from fanfetch.core.sequential import fetch_sequentially
from fanfetch.core.source import DataSource, SimulatedDataSource
from fanfetch.exceptions import ConfigError
from fanfetch.logging import configure_logging, get_logger
from fanfetch.models.report import (
    AggregateReport,
    FATAL_STAGE,
    FAILURE_MESSAGE,
    StageError,
)

FATAL_MESSAGE = "Failed to fetch data due to a fatal error."


@dataclass
class StrategyComparison:
    """Reports from running both strategies for the same user."""

    sequential: AggregateReport
    parallel: AggregateReport

    @property
    def saved_ms(self) -> int:
        return self.sequential.elapsed_ms - self.parallel.elapsed_ms

    @property
    def speedup(self) -> float | None:
        if self.parallel.elapsed_ms <= 0:
            return None
        return self.sequential.elapsed_ms / self.parallel.elapsed_ms


class ContentFetcher:
    """
    High-level interface for fetching a user's profile, posts and comments.

    Example:
        async with ContentFetcher() as fetcher:
            report = await fetcher.fetch("u1")
            print(report.message, report.elapsed_ms)
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        source: DataSource | None = None,
    ):
        """
        Initialize fetcher with optional configuration and data source.

        Args:
            config: FetchConfig instance, uses defaults if None
            source: DataSource to fetch from, a SimulatedDataSource if None
        """
        self.config = config or FetchConfig()
        self.source: DataSource = source or SimulatedDataSource(self.config)

    async def __aenter__(self) -> "ContentFetcher":
        """Async context manager entry - configure logging."""
        configure_logging(self.config)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - nothing to release."""

    async def fetch(
        self,
        user_id: str,
        strategy: Strategy | str | None = None,
    ) -> AggregateReport:
        """
        Fetch all content for a user with the given or configured strategy.

        Args:
            user_id: User identifier
            strategy: Strategy override, uses config.strategy if None

        Returns:
            AggregateReport for the run

        Raises:
            ConfigError: If the strategy is unknown
        """
        user_id = _normalize_user_id(user_id)
        try:
            chosen = Strategy(strategy) if strategy is not None else self.config.strategy
        except ValueError as e:
            raise ConfigError(f"Unknown strategy: {strategy!r}") from e

        if chosen == Strategy.SEQUENTIAL:
            return await fetch_sequentially(self.source, user_id)
        return await fetch_in_parallel(self.source, user_id)

    async def fetch_sequentially(self, user_id: str) -> AggregateReport:
        return await self.fetch(user_id, Strategy.SEQUENTIAL)

    async def fetch_in_parallel(self, user_id: str) -> AggregateReport:
        return await self.fetch(user_id, Strategy.PARALLEL)

    async def fetch_with_fallback(self, user_id: str) -> AggregateReport:
        """
        Fetch in parallel, turning an unexpected fatal error into a report.

        Stage failures are already reported as data by the aggregator. Only
        an exception that escapes it ends up here, as a single ``fatal``
        error on an otherwise empty report.
        """
        log = get_logger("fetcher")
        user_id = _normalize_user_id(user_id)
        try:
            report = await fetch_in_parallel(self.source, user_id)
        except Exception as e:
            log.exception("fatal_fetch_error", user_id=user_id, error=str(e))
            return AggregateReport(
                user_id=user_id,
                strategy=Strategy.PARALLEL,
                profile=None,
                posts=(),
                errors=(StageError(stage=FATAL_STAGE, message=str(e) or FATAL_MESSAGE),),
                elapsed_ms=0,
                message=FAILURE_MESSAGE,
            )

        if report.has_errors:
            log.warning(
                "fetch_finished_with_errors",
                user_id=user_id,
                stages=[error.stage for error in report.errors],
            )
        return report

    async def compare(self, user_id: str) -> StrategyComparison:
        """Run the sequential strategy, then the parallel one, for the same user."""
        sequential = await self.fetch(user_id, Strategy.SEQUENTIAL)
        parallel = await self.fetch(user_id, Strategy.PARALLEL)

        comparison = StrategyComparison(sequential=sequential, parallel=parallel)
        get_logger("fetcher").info(
            "strategy_comparison",
            user_id=sequential.user_id,
            sequential_ms=sequential.elapsed_ms,
            parallel_ms=parallel.elapsed_ms,
            saved_ms=comparison.saved_ms,
        )
        return comparison


def _normalize_user_id(user_id: str) -> str:
    user_id = user_id.strip()
    if not user_id:
        raise ValueError("user_id must not be empty")
    return user_id
