"""Aggregation core: data source, strategies and report builder."""

from fanfetch.core.faults import FaultInjector
from fanfetch.core.parallel import fetch_in_parallel
from fanfetch.core.report import StageOutcome, build_report
from fanfetch.core.sequential import fetch_sequentially
from fanfetch.core.source import DataSource, SimulatedDataSource

__all__ = [
    "DataSource",
    "SimulatedDataSource",
    "FaultInjector",
    "StageOutcome",
    "build_report",
    "fetch_sequentially",
    "fetch_in_parallel",
]
