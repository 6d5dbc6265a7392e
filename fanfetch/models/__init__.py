"""Pydantic models for fanfetch."""

from fanfetch.models.profile import UserProfile
from fanfetch.models.post import Comment, Post, PostWithComments
from fanfetch.models.report import (
    AggregateReport,
    StageError,
    SUCCESS_MESSAGE,
    FAILURE_MESSAGE,
    comments_stage,
)

__all__ = [
    "UserProfile",
    "Post",
    "Comment",
    "PostWithComments",
    "StageError",
    "AggregateReport",
    "SUCCESS_MESSAGE",
    "FAILURE_MESSAGE",
    "comments_stage",
]
