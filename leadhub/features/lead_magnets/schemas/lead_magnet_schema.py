from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from leadhub.platform.schemas import CamelModel, ColumnInt
from leadhub.platform.utils.timestamps import ensure_utc


class LeadMagnetCreate(CamelModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    type: str = Field(..., description="eBook, Quiz, Checklist...")
    industry: str
    description: Optional[str] = None
    status: str = Field("draft", description="draft, active, paused")
    leads: ColumnInt = 0
    conversion: ColumnInt = Field(0, description="Conversion percentage")


class LeadMagnetUpdate(CamelModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = None
    type: Optional[str] = None
    industry: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    leads: Optional[ColumnInt] = None
    conversion: Optional[ColumnInt] = None

    @field_validator("title", "type", "industry", "status", "leads", "conversion", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class LeadMagnetRead(CamelModel):
    id: int
    title: str
    type: str
    industry: str
    description: Optional[str] = None
    status: str
    leads: int
    conversion: int
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
