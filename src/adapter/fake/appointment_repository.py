"""In-memory implementation of AppointmentRepository for testing."""

from datetime import datetime

from domain.model.appointment import Appointment, day_range, month_range, to_utc
from domain.model.errors import ConflictError


class FakeAppointmentRepository:
    def __init__(self):
        self.store: dict[str, Appointment] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, provider_id: str, user_id: str, date: datetime) -> Appointment:
        if self.find_by_date(date, provider_id):
            raise ConflictError("This appointment is already booked.")

        appointment = Appointment.create(provider_id=provider_id, user_id=user_id, date=date)
        self.store[appointment.id] = appointment
        return appointment

    # ── read operations ──────────────────────────────────────

    def find_by_date(self, date: datetime, provider_id: str) -> Appointment | None:
        date = to_utc(date)
        for appointment in self.store.values():
            if appointment.provider_id == provider_id and appointment.date == date:
                return appointment
        return None

    def find_all_in_month_from_provider(
        self,
        provider_id: str,
        year: int,
        month: int,
    ) -> list[Appointment]:
        return self._find_between(provider_id, *month_range(year, month))

    def find_all_in_day_from_provider(
        self,
        provider_id: str,
        year: int,
        month: int,
        day: int,
    ) -> list[Appointment]:
        return self._find_between(provider_id, *day_range(year, month, day))

    def _find_between(self, provider_id: str, start: datetime, end: datetime) -> list[Appointment]:
        matches = [
            a for a in self.store.values()
            if a.provider_id == provider_id and a.falls_within(start, end)
        ]
        return sorted(matches, key=lambda a: a.date)
