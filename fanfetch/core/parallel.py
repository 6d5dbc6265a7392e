"""Parallel aggregator - concurrent fan-out with settle-all joins."""

import asyncio
import time
from typing import Any, Awaitable

from fanfetch.config import Strategy
from fanfetch.core.report import StageOutcome, build_report
from fanfetch.core.source import DataSource
from fanfetch.exceptions import FetchError
from fanfetch.logging import get_logger
from fanfetch.models.report import AggregateReport, POSTS_STAGE, PROFILE_STAGE, comments_stage


async def settle_all(*aws: Awaitable[Any]) -> list[Any]:
    """
    Run awaitables concurrently and wait for every one of them to settle.

    Results come back in input order; a failed awaitable yields its exception
    instead of a value. One failure never cancels its siblings.
    """
    return await asyncio.gather(*aws, return_exceptions=True)


def to_outcome(stage: str, settled: Any) -> StageOutcome:
    """
    Convert one settled result into a StageOutcome.

    FetchError becomes a failed outcome. Any other exception is a defect and
    is re-raised as-is.
    """
    if isinstance(settled, FetchError):
        return StageOutcome.failure(stage, settled)
    if isinstance(settled, BaseException):
        raise settled
    return StageOutcome.success(stage, settled)


async def fetch_in_parallel(source: DataSource, user_id: str) -> AggregateReport:
    """
    Fetch profile and posts together, then all comments together.

    Both joins wait for every branch to settle before inspecting results, so
    a failure in one branch never hides another branch's outcome. Comment
    fetches start only after the posts stage has settled.

    Args:
        source: DataSource to fetch from
        user_id: User to fetch content for

    Returns:
        AggregateReport for the run, same shape as the sequential strategy
    """
    log = get_logger("parallel")
    start = time.monotonic()
    log.info("parallel_fetch_start", user_id=user_id)

    profile_settled, posts_settled = await settle_all(
        source.fetch_profile(user_id),
        source.fetch_posts(user_id),
    )

    profile = to_outcome(PROFILE_STAGE, profile_settled)
    if not profile.ok:
        log.error("profile_fetch_failed", user_id=user_id, error=profile.error)

    posts = to_outcome(POSTS_STAGE, posts_settled)
    if not posts.ok:
        log.error("posts_fetch_failed", user_id=user_id, error=posts.error)

    post_list = posts.value or []
    comments: list[StageOutcome] = []
    if post_list:
        comments_settled = await settle_all(
            *(source.fetch_comments(post.post_id) for post in post_list)
        )
        for post, settled in zip(post_list, comments_settled):
            outcome = to_outcome(comments_stage(post.post_id), settled)
            if not outcome.ok:
                log.error("comments_fetch_failed", post_id=post.post_id, error=outcome.error)
            comments.append(outcome)

    elapsed_ms = (time.monotonic() - start) * 1000
    report = build_report(user_id, Strategy.PARALLEL, profile, posts, comments, elapsed_ms)

    log.info(
        "parallel_fetch_complete",
        user_id=user_id,
        elapsed_ms=report.elapsed_ms,
        errors_count=len(report.errors),
    )
    return report
