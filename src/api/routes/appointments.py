"""Appointment routes.

- POST /appointments: book a slot with a provider
- GET /appointments/me: the authenticated provider's schedule for one day
"""

import logging
from fastapi import APIRouter, Depends, Query

from api.dependencies import get_create_appointment_service, get_list_provider_appointments_service
from api.models import AppointmentResponse, CreateAppointmentRequest
from api.security import get_current_user_required
from domain.model.user import User
from services.appointment_service import CreateAppointmentService, ListProviderAppointmentsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["appointments"])


@router.post("", response_model=AppointmentResponse)
async def create_appointment(
    request: CreateAppointmentRequest,
    current_user: User = Depends(get_current_user_required),
    service: CreateAppointmentService = Depends(get_create_appointment_service),
):
    appointment = service.execute(
        provider_id=request.provider_id,
        user_id=current_user.id,
        date=request.date,
    )
    return AppointmentResponse.from_domain(appointment)


@router.get("/me", response_model=list[AppointmentResponse])
async def list_provider_appointments(
    year: int = Query(..., ge=1970, le=9999),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
    current_user: User = Depends(get_current_user_required),
    service: ListProviderAppointmentsService = Depends(get_list_provider_appointments_service),
):
    """List appointments booked with the authenticated provider on one day."""
    appointments = service.execute(provider_id=current_user.id, year=year, month=month, day=day)

    logger.info("Provider appointments retrieved", extra={
        "providerId": current_user.id,
        "count": len(appointments),
    })

    return [AppointmentResponse.from_domain(a) for a in appointments]
