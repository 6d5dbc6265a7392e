"""Report builder - merges settled stage outcomes into an AggregateReport."""

from dataclasses import dataclass
from typing import Any, Sequence

from fanfetch.config import Strategy
from fanfetch.models.post import Post, PostWithComments
from fanfetch.models.report import (
    AggregateReport,
    StageError,
    comments_stage,
    summary_message,
)


@dataclass(frozen=True)
class StageOutcome:
    """Settled result of one stage: a value on success, a message on failure."""

    stage: str
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, stage: str, value: Any) -> "StageOutcome":
        return cls(stage=stage, value=value)

    @classmethod
    def failure(cls, stage: str, error: BaseException | str) -> "StageOutcome":
        return cls(stage=stage, error=str(error))


def build_report(
    user_id: str,
    strategy: Strategy,
    profile: StageOutcome,
    posts: StageOutcome,
    comments: Sequence[StageOutcome],
    elapsed_ms: float,
) -> AggregateReport:
    """
    Merge settled stage outcomes into a single report.

    Pure function: the same outcomes always produce the same report. Errors
    are listed profile first, then posts, then comments in post order.

    Args:
        user_id: User the run was for
        strategy: Strategy that produced the outcomes
        profile: Outcome of the profile stage
        posts: Outcome of the posts stage, value is a list of Post
        comments: One outcome per post, aligned with the post list
        elapsed_ms: Wall-clock duration of the run

    Returns:
        AggregateReport with degraded fields for every failed stage

    Raises:
        ValueError: If comment outcomes do not line up with the posts
    """
    errors: list[StageError] = []

    if not profile.ok:
        errors.append(StageError(stage=profile.stage, message=profile.error))

    post_list: list[Post] = list(posts.value or []) if posts.ok else []
    if not posts.ok:
        errors.append(StageError(stage=posts.stage, message=posts.error))

    if len(comments) != len(post_list):
        raise ValueError(
            f"Expected {len(post_list)} comment outcomes, got {len(comments)}"
        )

    merged: list[PostWithComments] = []
    for post, outcome in zip(post_list, comments):
        if outcome.ok:
            merged.append(PostWithComments.with_comments(post, outcome.value or []))
        else:
            merged.append(PostWithComments.with_error(post, outcome.error))
            errors.append(StageError(stage=comments_stage(post.post_id), message=outcome.error))

    return AggregateReport(
        user_id=user_id,
        strategy=strategy,
        profile=profile.value if profile.ok else None,
        posts=tuple(merged),
        errors=tuple(errors),
        elapsed_ms=max(0, int(elapsed_ms)),
        message=summary_message(bool(errors)),
    )
