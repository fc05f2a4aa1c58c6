"""Profile request model."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileRequest(BaseModel):
    """A single profile lookup. Never persisted."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(min_length=1)
    access_token: str = Field(min_length=1, repr=False)
