"""Profile routes for the authenticated user."""

from fastapi import APIRouter, Depends

from api.dependencies import get_show_profile_service, get_update_profile_service
from api.models import UpdateProfileRequest, UserResponse
from api.security import get_current_user_required
from domain.model.user import User
from services.profile_service import ShowProfileService, UpdateProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=UserResponse)
async def show_profile(
    current_user: User = Depends(get_current_user_required),
    service: ShowProfileService = Depends(get_show_profile_service),
):
    return UserResponse.from_domain(service.execute(current_user.id))


@router.put("", response_model=UserResponse)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user_required),
    service: UpdateProfileService = Depends(get_update_profile_service),
):
    user = service.execute(
        user_id=current_user.id,
        name=request.name,
        email=request.email,
        password=request.password,
        old_password=request.old_password,
    )
    return UserResponse.from_domain(user)
