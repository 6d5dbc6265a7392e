"""Data source contract and the simulated, time-delayed implementation."""

import asyncio
from collections import Counter
from typing import Protocol, runtime_checkable

from fanfetch.config import FetchConfig
from fanfetch.core.faults import FaultInjector, stage_kind
from fanfetch.exceptions import FetchError
from fanfetch.logging import get_logger
from fanfetch.models.post import Comment, Post
from fanfetch.models.profile import UserProfile
from fanfetch.models.report import POSTS_STAGE, PROFILE_STAGE, comments_stage


@runtime_checkable
class DataSource(Protocol):
    """
    Asynchronous source of profiles, posts and comments.

    Implementations signal a stage failure by raising FetchError. Any other
    exception is treated by the aggregators as a defect and propagates.
    """

    async def fetch_profile(self, user_id: str) -> UserProfile: ...

    async def fetch_posts(self, user_id: str) -> list[Post]: ...

    async def fetch_comments(self, post_id: int) -> list[Comment]: ...


# (ordinal, body) for the three demo posts
POST_TEMPLATES = [
    ("First", "This is the first post content."),
    ("Second", "Some more content for post two."),
    ("Third", "Final post content in this small list."),
]

# (username, text) for the three demo comments
COMMENT_TEMPLATES = [
    ("commenter1", "Nice post!"),
    ("commenter2", "Thanks for sharing."),
    ("commenter3", "Great read."),
]


def make_profile(user_id: str) -> UserProfile:
    return UserProfile(
        id=user_id,
        name=f"User {user_id} Name",
        email=f"user{user_id}@example.com",
        username=f"user{user_id}",
    )


def make_posts(user_id: str) -> list[Post]:
    return [
        Post(
            post_id=index,
            user_id=user_id,
            title=f"{ordinal} post by {user_id}",
            content=content,
        )
        for index, (ordinal, content) in enumerate(POST_TEMPLATES, start=1)
    ]


def make_comments(post_id: int) -> list[Comment]:
    return [
        Comment(comment_id=index, post_id=post_id, username=username, text=text)
        for index, (username, text) in enumerate(COMMENT_TEMPLATES, start=1)
    ]


class SimulatedDataSource:
    """
    In-memory data source that answers after a simulated latency.

    Example:
        source = SimulatedDataSource(FetchConfig(comment_failure_rate=0.0))
        posts = await source.fetch_posts("u1")
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        faults: FaultInjector | None = None,
    ):
        """
        Initialize simulated source.

        Args:
            config: FetchConfig with latencies, uses defaults if None
            faults: FaultInjector deciding failures, built from config if None
        """
        self.config = config or FetchConfig()
        self.faults = faults or FaultInjector.from_config(self.config)
        self.calls: Counter[str] = Counter()

    async def _settle(self, stage: str, delay_ms: int) -> None:
        """Wait out the simulated latency, then raise if the stage should fail."""
        log = get_logger("source")
        self.calls[stage] += 1
        log.debug("source_call", stage=stage, delay_ms=delay_ms)
        if delay_ms > 0:
            await asyncio.sleep(delay_ms / 1000)

        if self.faults.should_fail(stage):
            log.debug("source_fault_injected", stage=stage)
            raise FetchError(f"Failed to fetch {stage_kind(stage)}")

    async def fetch_profile(self, user_id: str) -> UserProfile:
        await self._settle(PROFILE_STAGE, self.config.profile_delay_ms)
        return make_profile(user_id)

    async def fetch_posts(self, user_id: str) -> list[Post]:
        await self._settle(POSTS_STAGE, self.config.posts_delay_ms)
        return make_posts(user_id)

    async def fetch_comments(self, post_id: int) -> list[Comment]:
        await self._settle(comments_stage(post_id), self.config.comments_delay_ms)
        return make_comments(post_id)
