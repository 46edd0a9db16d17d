"""Authentication routes (register, login)."""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_authenticate_user_service, get_create_user_service
from api.models import AuthResponse, CreateUserRequest, SessionRequest, UserResponse
from services.auth_service import AuthenticateUserService, CreateUserService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest,
    service: CreateUserService = Depends(get_create_user_service),
):
    """Register a new user.

    Raises:
        ConflictError: email already registered (400)
        ValidationError: password too short (400)
    """
    user = service.execute(name=request.name, email=request.email, password=request.password)
    return UserResponse.from_domain(user)


@router.post("/sessions", response_model=AuthResponse)
async def create_session(
    request: SessionRequest,
    service: AuthenticateUserService = Depends(get_authenticate_user_service),
):
    """Login user and return JWT token.

    Raises:
        AuthError: credentials are invalid (401)
    """
    result = service.execute(email=request.email, password=request.password)
    return AuthResponse(user=UserResponse.from_domain(result.user), token=result.token)
