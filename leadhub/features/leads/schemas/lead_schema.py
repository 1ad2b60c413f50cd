from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from leadhub.platform.schemas import CamelModel, ColumnInt
from leadhub.platform.utils.timestamps import ensure_utc


class LeadCreate(CamelModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, description="Lead full name")
    email: str = Field(..., description="Lead email")
    phone: Optional[str] = None
    source: str = Field(..., description="Channel that produced the lead")
    status: str = Field("cold", description="cold, warm, hot, qualified...")
    score: ColumnInt = 0
    tags: list[str] = Field(default_factory=list)


class LeadUpdate(CamelModel):
    """Partial update: only the fields sent are applied."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None
    score: Optional[ColumnInt] = None
    tags: Optional[list[str]] = None

    @field_validator("name", "email", "source", "status", "score", "tags", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class LeadRead(CamelModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    source: str
    status: str
    score: int
    tags: list[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
