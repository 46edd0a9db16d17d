# domain/model/appointment.py

import calendar
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from domain.model.errors import ValidationError

# Hours a provider takes bookings: 08:00 through 17:00 starts.
FIRST_HOUR = 8
LAST_HOUR = 17
SLOTS_PER_DAY = LAST_HOUR - FIRST_HOUR + 1


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def day_range(year: int, month: int, day: int) -> tuple[datetime, datetime]:
    """Half-open [start, end) bounds of a calendar day."""
    try:
        start = datetime(year, month, day, tzinfo=timezone.utc)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {e}") from e
    return start, start + timedelta(days=1)


def month_range(year: int, month: int) -> tuple[datetime, datetime]:
    """Half-open [start, end) bounds of a calendar month."""
    try:
        start = datetime(year, month, 1, tzinfo=timezone.utc)
    except ValueError as e:
        raise ValidationError(f"Invalid month: {e}") from e
    days = calendar.monthrange(year, month)[1]
    return start, start + timedelta(days=days)


@dataclass
class Appointment:
    """Domain model representing a booked slot with a provider."""
    id: str
    provider_id: str
    user_id: str
    date: datetime
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def create(provider_id: str, user_id: str, date: datetime) -> 'Appointment':
        now = datetime.now(timezone.utc)
        return Appointment(
            id=uuid.uuid4().hex,
            provider_id=provider_id,
            user_id=user_id,
            date=to_utc(date),
            created_at=now,
            updated_at=now,
        )

    def falls_within(self, start: datetime, end: datetime) -> bool:
        return start <= self.date < end


@dataclass(frozen=True)
class DayAvailability:
    day: int
    available: bool


@dataclass(frozen=True)
class HourAvailability:
    hour: int
    available: bool
