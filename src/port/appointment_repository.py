"""Port definition for AppointmentRepository."""

from typing import Protocol
from datetime import datetime

from domain.model.appointment import Appointment


class AppointmentRepository(Protocol):
    def create(self, provider_id: str, user_id: str, date: datetime) -> Appointment:
        """Persist a new appointment. Raise ConflictError if the slot is taken."""
        ...

    def find_by_date(self, date: datetime, provider_id: str) -> Appointment | None: ...

    def find_all_in_month_from_provider(
        self,
        provider_id: str,
        year: int,
        month: int,
    ) -> list[Appointment]: ...

    def find_all_in_day_from_provider(
        self,
        provider_id: str,
        year: int,
        month: int,
        day: int,
    ) -> list[Appointment]: ...
