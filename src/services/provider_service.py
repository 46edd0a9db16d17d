"""Provider services: listing providers and their free slots."""

import calendar
from datetime import datetime, timezone
from typing import Callable

from domain.model.appointment import (
    FIRST_HOUR,
    LAST_HOUR,
    SLOTS_PER_DAY,
    DayAvailability,
    HourAvailability,
    day_range,
)
from domain.model.user import User
from port.appointment_repository import AppointmentRepository
from port.user_repository import UserRepository
from services.appointment_service import utc_now


class ListProvidersService:
    def __init__(self, users_repository: UserRepository):
        self.users_repository = users_repository

    def execute(self, user_id: str) -> list[User]:
        """Every user except the caller."""
        return self.users_repository.find_all_providers(except_user_id=user_id)


class ListProviderMonthAvailabilityService:
    def __init__(
        self,
        appointments_repository: AppointmentRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.appointments_repository = appointments_repository
        self.clock = clock

    def execute(self, provider_id: str, year: int, month: int) -> list[DayAvailability]:
        """One entry per day of the month.

        A day is available while it hasn't ended and still has a free slot.
        """
        appointments = self.appointments_repository.find_all_in_month_from_provider(
            provider_id=provider_id,
            year=year,
            month=month,
        )
        # Booked business hours per day; several bookings in one hour fill one slot.
        booked: dict[int, set[int]] = {}
        for appointment in appointments:
            hour = appointment.date.hour
            if FIRST_HOUR <= hour <= LAST_HOUR:
                booked.setdefault(appointment.date.day, set()).add(hour)

        now = self.clock()
        result = []
        for day in range(1, calendar.monthrange(year, month)[1] + 1):
            _, end = day_range(year, month, day)
            result.append(DayAvailability(
                day=day,
                available=end > now and len(booked.get(day, ())) < SLOTS_PER_DAY,
            ))
        return result


class ListProviderDayAvailabilityService:
    def __init__(
        self,
        appointments_repository: AppointmentRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.appointments_repository = appointments_repository
        self.clock = clock

    def execute(self, provider_id: str, year: int, month: int, day: int) -> list[HourAvailability]:
        """Business hours of the day, each free unless booked or already past."""
        appointments = self.appointments_repository.find_all_in_day_from_provider(
            provider_id=provider_id,
            year=year,
            month=month,
            day=day,
        )
        booked = {a.date.hour for a in appointments}

        now = self.clock()
        return [
            HourAvailability(
                hour=hour,
                available=hour not in booked
                and datetime(year, month, day, hour, tzinfo=timezone.utc) > now,
            )
            for hour in range(FIRST_HOUR, LAST_HOUR + 1)
        ]
