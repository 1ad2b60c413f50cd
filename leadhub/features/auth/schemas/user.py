from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from leadhub.platform.schemas import CamelModel
from leadhub.platform.utils.timestamps import ensure_utc


class UpsertUser(CamelModel):
    """Profile as reported by the identity provider; ``id`` is its subject."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserRead(CamelModel):
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
