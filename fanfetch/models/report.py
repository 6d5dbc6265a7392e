"""Aggregate report models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fanfetch.config import Strategy
from fanfetch.exceptions import ReportError
from fanfetch.models.profile import UserProfile
from fanfetch.models.post import PostWithComments

SUCCESS_MESSAGE = "Completed successfully"
FAILURE_MESSAGE = "Completed with errors (see errors list)."

PROFILE_STAGE = "profile"
POSTS_STAGE = "posts"
FATAL_STAGE = "fatal"


def comments_stage(post_id: int) -> str:
    """Stage tag for the comment fetch of a single post."""
    return f"comments:{post_id}"


def summary_message(has_errors: bool) -> str:
    return FAILURE_MESSAGE if has_errors else SUCCESS_MESSAGE


class StageError(BaseModel):
    """A failure scoped to exactly one stage of a run."""

    model_config = ConfigDict(frozen=True)

    stage: str
    message: str


class AggregateReport(BaseModel):
    """Merged outcome of one aggregation run."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    strategy: Strategy
    profile: UserProfile | None = None
    posts: tuple[PostWithComments, ...] = ()
    errors: tuple[StageError, ...] = ()
    elapsed_ms: int = Field(ge=0)
    message: str

    @model_validator(mode="after")
    def _message_matches_errors(self) -> "AggregateReport":
        expected = summary_message(bool(self.errors))
        if self.message != expected:
            raise ReportError(
                f"Report message {self.message!r} does not match "
                f"{len(self.errors)} recorded error(s)"
            )
        return self

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def comment_count(self) -> int:
        return sum(len(post.comments) for post in self.posts)

    def error_for(self, stage: str) -> StageError | None:
        """Return the first error recorded for a stage tag, if any."""
        for error in self.errors:
            if error.stage == stage:
                return error
        return None
