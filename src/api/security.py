"""Bearer-token authentication dependency."""

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from api.dependencies import get_token_provider, get_user_repo
from domain.model.errors import AuthError
from domain.model.user import User
from port.token_provider import TokenProvider
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_current_user_required(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token_provider: TokenProvider = Depends(get_token_provider),
    user_repo: UserRepository = Depends(get_user_repo),
) -> User:
    """Get current authenticated user (required). Raises AuthError (401) if not authenticated."""
    if not credentials:
        raise AuthError("JWT token is missing")

    user_id = token_provider.verify(credentials.credentials)
    if not user_id:
        raise AuthError("Invalid JWT token")

    user = user_repo.find_by_id(user_id)
    if not user:
        logger.warning("Token subject no longer exists", extra={"userId": user_id})
        raise AuthError("User not found")

    return user
