from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel

# Range of an SQL INTEGER column (int4 on PostgreSQL)
INT_COLUMN_MIN = -(2**31)
INT_COLUMN_MAX = 2**31 - 1

ColumnInt = Annotated[StrictInt, Field(ge=INT_COLUMN_MIN, le=INT_COLUMN_MAX)]


class CamelModel(BaseModel):
    """Base for every wire schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(BaseModel):
    message: str
