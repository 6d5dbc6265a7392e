"""Sequential aggregator - every stage and every comment fetch in turn."""

import time

from fanfetch.config import Strategy
from fanfetch.core.report import StageOutcome, build_report
from fanfetch.core.source import DataSource
from fanfetch.exceptions import FetchError
from fanfetch.logging import get_logger
from fanfetch.models.report import AggregateReport, POSTS_STAGE, PROFILE_STAGE, comments_stage


async def fetch_sequentially(source: DataSource, user_id: str) -> AggregateReport:
    """
    Fetch profile, posts, then each post's comments strictly one at a time.

    A failed stage is recorded and degraded (no profile, no posts, or an
    empty comment list with an error) and the run continues. Comment fetches
    run in post order with no overlap, even though they are independent.
    Exceptions other than FetchError propagate unmodified.

    Args:
        source: DataSource to fetch from
        user_id: User to fetch content for

    Returns:
        AggregateReport for the run
    """
    log = get_logger("sequential")
    start = time.monotonic()
    log.info("sequential_fetch_start", user_id=user_id)

    try:
        profile = StageOutcome.success(PROFILE_STAGE, await source.fetch_profile(user_id))
        log.info("profile_fetched", user_id=user_id)
    except FetchError as e:
        log.error("profile_fetch_failed", user_id=user_id, error=str(e))
        profile = StageOutcome.failure(PROFILE_STAGE, e)

    try:
        posts = StageOutcome.success(POSTS_STAGE, await source.fetch_posts(user_id))
        log.info("posts_fetched", user_id=user_id, posts_count=len(posts.value))
    except FetchError as e:
        log.error("posts_fetch_failed", user_id=user_id, error=str(e))
        posts = StageOutcome.failure(POSTS_STAGE, e)

    comments: list[StageOutcome] = []
    for post in posts.value or []:
        stage = comments_stage(post.post_id)
        try:
            comments.append(StageOutcome.success(stage, await source.fetch_comments(post.post_id)))
            log.info("comments_fetched", post_id=post.post_id)
        except FetchError as e:
            log.error("comments_fetch_failed", post_id=post.post_id, error=str(e))
            comments.append(StageOutcome.failure(stage, e))

    elapsed_ms = (time.monotonic() - start) * 1000
    report = build_report(user_id, Strategy.SEQUENTIAL, profile, posts, comments, elapsed_ms)

    log.info(
        "sequential_fetch_complete",
        user_id=user_id,
        elapsed_ms=report.elapsed_ms,
        errors_count=len(report.errors),
    )
    return report
