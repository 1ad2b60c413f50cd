from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from leadhub.platform.config import settings


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed JWT carrying ``data`` (``sub`` is the user id)"""
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "iat": now})
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> dict:
    """Decode and verify a JWT access token"""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.ALGORITHM])
        return payload
    except jwt.ExpiredSignatureError:
        raise ValueError("Token has expired")
    except jwt.PyJWTError:
        raise ValueError("Invalid token")


def revoke_token(revoked_tokens: dict, token: str, expires_at: Optional[float]) -> None:
    """
    Record ``token`` as revoked until its ``exp`` and drop entries that
    have already expired.
    """
    now = datetime.now(timezone.utc).timestamp()
    for stale in [t for t, exp in revoked_tokens.items() if exp is not None and exp <= now]:
        del revoked_tokens[stale]
    revoked_tokens[token] = expires_at
