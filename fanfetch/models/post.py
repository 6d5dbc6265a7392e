"""Post and comment models."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from fanfetch.exceptions import ReportError


class Comment(BaseModel):
    """A single comment left on a post."""

    model_config = ConfigDict(frozen=True)

    comment_id: int
    post_id: int
    username: str
    text: str


class Post(BaseModel):
    """A post owned by a user."""

    model_config = ConfigDict(frozen=True)

    post_id: int
    user_id: str
    title: str
    content: str


class PostWithComments(Post):
    """
    A post annotated with the outcome of its comment stage.

    Either ``comments`` holds the fetched comments and ``comments_error`` is
    None, or the fetch failed and ``comments`` is empty with the error message
    kept in ``comments_error``.
    """

    comments: tuple[Comment, ...] = ()
    comments_error: str | None = None

    @model_validator(mode="after")
    def _comments_xor_error(self) -> "PostWithComments":
        if self.comments_error is not None and self.comments:
            raise ReportError(
                f"Post {self.post_id} has both comments and a comments error"
            )
        return self

    @property
    def comments_ok(self) -> bool:
        """True when the comment fetch for this post succeeded."""
        return self.comments_error is None

    @classmethod
    def with_comments(cls, post: Post, comments: Iterable[Comment]) -> "PostWithComments":
        return cls(**post.model_dump(include=set(Post.model_fields)), comments=tuple(comments))

    @classmethod
    def with_error(cls, post: Post, message: str) -> "PostWithComments":
        return cls(**post.model_dump(include=set(Post.model_fields)), comments=(), comments_error=message)
