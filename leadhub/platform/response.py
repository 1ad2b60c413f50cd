from typing import Any, Mapping, Optional, Sequence

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def error_response(
    *,
    message: str,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    errors: Optional[Sequence[Any]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """
    Single source of truth for ALL error bodies.
    Always carries a human readable ``message``; validation failures add
    the per-field ``errors`` list.
    """
    content: dict[str, Any] = {"message": message}
    if errors is not None:
        content["errors"] = jsonable_encoder(errors)

    return JSONResponse(status_code=status_code, content=content, headers=headers)
