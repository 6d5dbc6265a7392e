"""fanfetch - sequential vs. concurrent fan-out fetching with partial-failure reports."""

from fanfetch.models.profile import UserProfile
from fanfetch.models.post import Post, Comment, PostWithComments
from fanfetch.models.report import AggregateReport, StageError
from fanfetch.config import FetchConfig, Strategy
from fanfetch.core.faults import FaultInjector
from fanfetch.core.source import DataSource, SimulatedDataSource
from fanfetch.core.report import StageOutcome, build_report
from fanfetch.core.sequential import fetch_sequentially
from fanfetch.core.parallel import fetch_in_parallel
from fanfetch.core.orchestrator import ContentFetcher, StrategyComparison
from fanfetch.core.exporter import to_json, to_dict, save_json, load_json

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ContentFetcher",
    "StrategyComparison",
    "FetchConfig",
    "Strategy",
    # Aggregation core
    "fetch_sequentially",
    "fetch_in_parallel",
    "build_report",
    "StageOutcome",
    # Data source
    "DataSource",
    "SimulatedDataSource",
    "FaultInjector",
    # Models
    "UserProfile",
    "Post",
    "Comment",
    "PostWithComments",
    "StageError",
    "AggregateReport",
    # Export utilities
    "to_json",
    "to_dict",
    "save_json",
    "load_json",
    "__version__",
]
