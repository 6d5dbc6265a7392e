"""Command-line interface for fanfetch."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from fanfetch import ContentFetcher, FetchConfig, Strategy, save_json, to_json, __version__
from fanfetch.config import LogFormat
from fanfetch.models.report import AggregateReport

app = typer.Typer(
    name="fanfetch",
    help="Sequential vs. parallel fan-out fetching over a simulated data source",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"fanfetch version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """fanfetch - sequential vs. parallel fan-out fetching."""
    pass


def _build_config(
    seed: Optional[int],
    failure_rate: Optional[float],
    fast: bool,
    quiet: bool,
) -> FetchConfig:
    overrides: dict = {}
    if seed is not None:
        overrides["random_seed"] = seed
    if failure_rate is not None:
        overrides["comment_failure_rate"] = failure_rate
    if quiet:
        overrides["log_level"] = "ERROR"
        overrides["log_format"] = LogFormat.JSON

    config = FetchConfig(**overrides)
    return config.without_latency() if fast else config


def user_id_callback(value: str) -> str:
    value = value.strip()
    if not value:
        raise typer.BadParameter("user id must not be empty")
    return value


SeedOption = typer.Option(None, "--seed", "-s", help="Seed for fault injection")
FailureRateOption = typer.Option(
    None, "--failure-rate", "-r", min=0.0, max=1.0, help="Comment fetch failure probability"
)
FastOption = typer.Option(False, "--fast", help="Skip simulated latency")
JsonOption = typer.Option(False, "--json", help="Print the report as JSON")
OutputOption = typer.Option(None, "--output", "-o", help="Save the report as JSON (file or directory)")
QuietOption = typer.Option(False, "--quiet", "-q", help="Only log errors")


def _run_strategy(
    strategy: Strategy,
    user_id: str,
    seed: Optional[int],
    failure_rate: Optional[float],
    fast: bool,
    as_json: bool,
    output: Optional[Path],
    quiet: bool,
) -> None:
    config = _build_config(seed, failure_rate, fast, quiet)

    async def run():
        async with ContentFetcher(config) as fetcher:
            return await fetcher.fetch(user_id, strategy)

    report = asyncio.run(run())

    if as_json:
        typer.echo(to_json(report))
    else:
        _print_report(report)

    if output:
        filepath = save_json(report, output)
        console.print(f"[dim]Saved to {filepath}[/dim]")


@app.command()
def sequential(
    user_id: str = typer.Argument(..., help="User identifier", callback=user_id_callback),
    seed: Optional[int] = SeedOption,
    failure_rate: Optional[float] = FailureRateOption,
    fast: bool = FastOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
    quiet: bool = QuietOption,
):
    """Fetch profile, posts and comments one stage at a time."""
    _run_strategy(Strategy.SEQUENTIAL, user_id, seed, failure_rate, fast, as_json, output, quiet)


@app.command()
def parallel(
    user_id: str = typer.Argument(..., help="User identifier", callback=user_id_callback),
    seed: Optional[int] = SeedOption,
    failure_rate: Optional[float] = FailureRateOption,
    fast: bool = FastOption,
    as_json: bool = JsonOption,
    output: Optional[Path] = OutputOption,
    quiet: bool = QuietOption,
):
    """Fetch profile and posts together, then all comments together."""
    _run_strategy(Strategy.PARALLEL, user_id, seed, failure_rate, fast, as_json, output, quiet)


@app.command()
def compare(
    user_id: str = typer.Argument(..., help="User identifier", callback=user_id_callback),
    seed: Optional[int] = SeedOption,
    failure_rate: Optional[float] = FailureRateOption,
    fast: bool = FastOption,
    quiet: bool = QuietOption,
):
    """Run both strategies and compare their timings."""
    config = _build_config(seed, failure_rate, fast, quiet)

    async def run():
        async with ContentFetcher(config) as fetcher:
            return await fetcher.compare(user_id)

    comparison = asyncio.run(run())

    table = Table(title=f"Strategies for {user_id}")
    table.add_column("Strategy")
    table.add_column("Elapsed", justify="right")
    table.add_column("Posts", justify="right")
    table.add_column("Errors", justify="right")
    for report in (comparison.sequential, comparison.parallel):
        table.add_row(
            report.strategy.value,
            f"{report.elapsed_ms:,} ms",
            str(len(report.posts)),
            str(len(report.errors)),
        )
    console.print(table)

    if comparison.speedup is not None:
        console.print(
            f"Parallel saved [bold]{comparison.saved_ms:,} ms[/bold] "
            f"({comparison.speedup:.1f}x faster)"
        )


@app.command()
def config():
    """Show the effective configuration."""
    current = FetchConfig()

    table = Table(title="fanfetch configuration", show_header=False)
    table.add_column("Setting", style="dim")
    table.add_column("Value")
    for name, value in current.model_dump(mode="json").items():
        table.add_row(name, "-" if value is None else str(value))

    console.print(table)


def _print_report(report: AggregateReport):
    """Print a report with nested posts and comments."""
    status = "[red]✗[/red]" if report.has_errors else "[green]✓[/green]"
    console.print(f"\n{status} [bold]{report.message}[/bold] [dim]({report.strategy.value})[/dim]")

    p = report.profile
    if p:
        console.print(f"  [bold]User:[/bold] {p.name} ({p.username})")
        console.print(f"  Email: {p.email}")
    else:
        console.print("  [dim]No profile[/dim]")

    console.print(f"  Total time: [blue]{report.elapsed_ms:,} ms[/blue]")

    if report.errors:
        console.print("  [red bold]Errors:[/red bold]")
        for error in report.errors:
            console.print(f"    [red]{error.stage}: {error.message}[/red]")

    if not report.posts:
        return

    tree = Tree("[bold]Posts[/bold]")
    for post in report.posts:
        branch = tree.add(f"[bold]Post #{post.post_id}:[/bold] {post.title}")
        branch.add(f"[dim]{post.content}[/dim]")
        if post.comments_ok:
            for comment in post.comments:
                branch.add(f"{comment.username}: {comment.text}")
        else:
            branch.add(f"[red]Comments error: {post.comments_error}[/red]")
    console.print(tree)


if __name__ == "__main__":
    app()
