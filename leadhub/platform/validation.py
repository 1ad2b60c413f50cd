"""
Payload validation shared by the HTTP layer, the storage seeding and scripts.

Create and update shapes are separate pydantic models per entity: the create
model lists what is required, the update model makes every field optional.
Both forbid unknown fields. Failures surface as ``PayloadValidationError``
with one ``FieldError`` per failing field.
"""

from typing import Any, Iterable, Mapping, TypeVar, Union

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

DEFAULT_MESSAGE = "Validation failed"


class FieldError(BaseModel):
    path: list[Union[str, int]]
    message: str


class PayloadValidationError(Exception):
    def __init__(self, errors: list[FieldError], message: str = DEFAULT_MESSAGE):
        self.errors = errors
        self.message = message
        super().__init__("; ".join(f"{'.'.join(map(str, e.path)) or '<body>'}: {e.message}" for e in errors))


def field_errors_from(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts into ``FieldError`` entries.

    FastAPI prefixes body errors with ``"body"``; that prefix is dropped so
    paths name the payload field directly.
    """
    field_errors = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] == "body":
            loc = loc[1:]
        field_errors.append(FieldError(path=loc, message=error.get("msg", "Invalid value")))
    return field_errors


def validate_create(payload: Any, schema: type[ModelT], message: str = DEFAULT_MESSAGE) -> ModelT:
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(field_errors_from(exc.errors()), message) from exc


def validate_update(payload: Any, schema: type[ModelT], message: str = DEFAULT_MESSAGE) -> ModelT:
    """Validate a partial payload; ``schema`` must have no required fields."""
    required = [name for name, field in schema.model_fields.items() if field.is_required()]
    if required:
        raise TypeError(f"{schema.__name__} is not an update schema; required fields: {required}")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise PayloadValidationError(field_errors_from(exc.errors()), message) from exc
