"""Appointment services: booking a slot and listing a provider's day.

Booking flow: self-booking check → past-date check → slot check → create
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from domain.model.appointment import Appointment, to_utc
from domain.model.errors import ConflictError, ValidationError
from port.appointment_repository import AppointmentRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CreateAppointmentService:
    def __init__(
        self,
        appointments_repository: AppointmentRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.appointments_repository = appointments_repository
        self.clock = clock

    def execute(self, provider_id: str, user_id: str, date: datetime) -> Appointment:
        """Book `date` with `provider_id` on behalf of `user_id`.

        Raises:
            ValidationError: self-booking or a date in the past
            ConflictError: the provider already has an appointment at `date`
        """
        date = to_utc(date)

        if provider_id == user_id:
            raise ValidationError("You can't create an appointment with yourself.")

        if date < self.clock():
            raise ValidationError("You can't create an appointment on a past date.")

        if self.appointments_repository.find_by_date(date, provider_id):
            raise ConflictError("This appointment is already booked.")

        appointment = self.appointments_repository.create(
            provider_id=provider_id,
            user_id=user_id,
            date=date,
        )
        logger.info("Appointment created", extra={
            "appointmentId": appointment.id,
            "providerId": provider_id,
            "userId": user_id,
            "date": date.isoformat(),
        })
        return appointment


class ListProviderAppointmentsService:
    def __init__(self, appointments_repository: AppointmentRepository):
        self.appointments_repository = appointments_repository

    def execute(self, provider_id: str, year: int, month: int, day: int) -> list[Appointment]:
        """Appointments of `provider_id` on the given day, earliest first."""
        appointments = self.appointments_repository.find_all_in_day_from_provider(
            provider_id=provider_id,
            year=year,
            month=month,
            day=day,
        )
        return sorted(appointments, key=lambda a: a.date)
