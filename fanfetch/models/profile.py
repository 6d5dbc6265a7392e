"""User profile model."""

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """Represents a fetched user profile."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    username: str
