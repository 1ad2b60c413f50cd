from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from leadhub.features.auth.utils.security import decode_access_token

# auto_error=False so a missing header is a 401, not HTTPBearer's 403
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_claims(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Resolve the bearer token to its verified claims or reject the request.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    token = credentials.credentials
    if token in request.app.state.revoked_tokens:
        raise _unauthorized("Token has been revoked. Please log in again.")

    try:
        payload = decode_access_token(token)
    except ValueError as e:
        raise _unauthorized(str(e))

    if not payload.get("sub"):
        raise _unauthorized("Invalid authentication credentials")

    return payload


def get_current_user_id(claims: dict = Depends(get_token_claims)) -> str:
    """Guard for protected routes: the current user's id."""
    return str(claims["sub"])
