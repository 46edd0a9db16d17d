"""Provider routes: directory and availability."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import (
    get_day_availability_service,
    get_list_providers_service,
    get_month_availability_service,
)
from api.models import DayAvailabilityResponse, HourAvailabilityResponse, UserResponse
from api.security import get_current_user_required
from domain.model.user import User
from services.provider_service import (
    ListProviderDayAvailabilityService,
    ListProviderMonthAvailabilityService,
    ListProvidersService,
)

router = APIRouter(prefix="/providers", tags=["providers"])


@router.get("", response_model=list[UserResponse])
async def list_providers(
    current_user: User = Depends(get_current_user_required),
    service: ListProvidersService = Depends(get_list_providers_service),
):
    return [UserResponse.from_domain(u) for u in service.execute(current_user.id)]


@router.get("/{provider_id}/month-availability", response_model=list[DayAvailabilityResponse])
async def month_availability(
    provider_id: str,
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    current_user: User = Depends(get_current_user_required),
    service: ListProviderMonthAvailabilityService = Depends(get_month_availability_service),
):
    days = service.execute(provider_id=provider_id, year=year, month=month)
    return [DayAvailabilityResponse(day=d.day, available=d.available) for d in days]


@router.get("/{provider_id}/day-availability", response_model=list[HourAvailabilityResponse])
async def day_availability(
    provider_id: str,
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
    current_user: User = Depends(get_current_user_required),
    service: ListProviderDayAvailabilityService = Depends(get_day_availability_service),
):
    hours = service.execute(provider_id=provider_id, year=year, month=month, day=day)
    return [HourAvailabilityResponse(hour=h.hour, available=h.available) for h in hours]
