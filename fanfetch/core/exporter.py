"""Export utilities for aggregate reports."""

from pathlib import Path

from fanfetch.models.report import AggregateReport


def report_filename(report: AggregateReport) -> str:
    """File name for a report, e.g. ``u1.parallel.json``."""
    return f"{report.user_id}.{report.strategy.value}.json"


def to_json(report: AggregateReport, indent: int = 2) -> str:
    return report.model_dump_json(indent=indent)


def to_dict(report: AggregateReport) -> dict:
    """JSON-compatible dict; tuples come out as lists."""
    return report.model_dump(mode="json")


def save_json(
    report: AggregateReport,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save a report as JSON.

    A directory (existing, or a path without a suffix) gets a file named by
    report_filename inside it, so both strategies for one user can share an
    output directory.
    """
    path = Path(filepath)
    if path.is_dir() or not path.suffix:
        path = path / report_filename(report)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report, indent=indent), encoding="utf-8")
    return path


def load_json(filepath: str | Path) -> AggregateReport:
    """Load a report, re-checking its invariants on the way in."""
    path = Path(filepath)
    return AggregateReport.model_validate_json(path.read_text(encoding="utf-8"))
