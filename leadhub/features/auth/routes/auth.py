from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from leadhub.features.auth.dependencies import get_current_user_id, get_token_claims, security
from leadhub.features.auth.schemas.user import UserRead
from leadhub.features.auth.services.auth_service import AuthService
from leadhub.features.auth.utils.security import revoke_token
from leadhub.platform.logger import get_logger
from leadhub.platform.schemas import MessageResponse
from leadhub.platform.storage.base import Storage
from leadhub.platform.storage.dependencies import get_storage

router = APIRouter(tags=["Authentication"])
logger = get_logger(__name__)


@router.post(
    "/login",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Complete login",
)
async def login(
    claims: dict = Depends(get_token_claims),
    storage: Storage = Depends(get_storage),
):
    """
    Post-authentication callback: records (or refreshes) the user named by the
    identity provider's token.
    """
    try:
        return await AuthService(storage).login(claims)
    except Exception:
        logger.exception("Failed to log in user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in",
        )


@router.post(
    "/logout",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    summary="Logout user",
)
async def logout(
    request: Request,
    claims: dict = Depends(get_token_claims),
    credentials: HTTPAuthorizationCredentials = Depends(security),
):
    """
    Revoke the presented token for the rest of this process's lifetime.
    """
    revoke_token(request.app.state.revoked_tokens, credentials.credentials, claims.get("exp"))
    logger.info("User logged out", extra={"user_id": claims.get("sub")})
    return MessageResponse(message="Logged out successfully")


@router.get(
    "/auth/user",
    response_model=UserRead,
    status_code=status.HTTP_200_OK,
    summary="Get the current user",
)
async def get_auth_user(
    user_id: str = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
):
    try:
        user = await AuthService(storage).get_user(user_id)
    except Exception:
        logger.exception("Error fetching user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user",
        )

    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
