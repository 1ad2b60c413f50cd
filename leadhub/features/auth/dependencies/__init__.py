from leadhub.features.auth.dependencies.current_user import get_current_user_id, get_token_claims, security

__all__ = ["get_current_user_id", "get_token_claims", "security"]
