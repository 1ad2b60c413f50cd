from typing import Optional

from leadhub.features.auth.schemas.user import UpsertUser, UserRead
from leadhub.platform.logger import get_logger
from leadhub.platform.storage.base import Storage

logger = get_logger(__name__)

# Token claims copied onto the user record when present
PROFILE_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


def user_from_claims(claims: dict) -> UpsertUser:
    profile = {claim: claims[claim] for claim in PROFILE_CLAIMS if claim in claims}
    return UpsertUser(id=str(claims["sub"]), **profile)


class AuthService:
    def __init__(self, storage: Storage):
        self.storage = storage

    async def login(self, claims: dict) -> UserRead:
        """Create or refresh the user described by a verified token."""
        user = await self.storage.upsert_user(user_from_claims(claims))
        logger.info("User logged in", extra={"user_id": user.id})
        return user

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return await self.storage.get_user(user_id)
