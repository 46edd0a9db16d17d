"""MongoDB implementation of AppointmentRepository."""

from datetime import datetime
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import APPOINTMENTS_COLLECTION_NAME
from domain.model.appointment import Appointment, day_range, month_range, to_utc
from domain.model.errors import ConflictError, StorageError

logger = getLogger(__name__)


class MongoAppointmentRepository:
    def __init__(self, db: Database):
        self.collection = db[APPOINTMENTS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for appointments collection.

        The unique (provider_id, date) index guarantees one booking per slot
        even when two requests pass the service-level check at once.
        """
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(
                self.collection,
                [('provider_id', 1), ('date', 1)],
                'idx_appointments_provider_date',
                unique=True,
            )
            create_index_safe(self.collection, [('user_id', 1), ('date', -1)], 'idx_appointments_user_date')
            return True
        except Exception as e:
            logger.error("Failed to create appointments indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Appointment:
        """Convert MongoDB document to Appointment domain model."""
        return Appointment(
            id=doc['_id'],
            provider_id=doc['provider_id'],
            user_id=doc['user_id'],
            date=to_utc(doc['date']),
            created_at=to_utc(doc['created_at']),
            updated_at=to_utc(doc['updated_at']),
        )

    def _find_between(self, provider_id: str, start: datetime, end: datetime) -> list[Appointment]:
        query = {'provider_id': provider_id, 'date': {'$gte': start, '$lt': end}}
        try:
            docs = self.collection.find(query).sort('date', 1)
            return [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list appointments", extra={
                "providerId": provider_id,
                "error": str(e),
            })
            raise StorageError("Failed to list appointments") from e

    # ── write operations ─────────────────────────────────────

    def create(self, provider_id: str, user_id: str, date: datetime) -> Appointment:
        appointment = Appointment.create(provider_id=provider_id, user_id=user_id, date=date)
        try:
            self.collection.insert_one({
                '_id': appointment.id,
                'provider_id': appointment.provider_id,
                'user_id': appointment.user_id,
                'date': appointment.date,
                'created_at': appointment.created_at,
                'updated_at': appointment.updated_at,
            })
        except DuplicateKeyError:
            logger.warning("Appointment slot already taken", extra={
                "providerId": provider_id,
                "date": appointment.date.isoformat(),
            })
            raise ConflictError("This appointment is already booked.")
        except PyMongoError as e:
            logger.error("Failed to create appointment", extra={"providerId": provider_id, "error": str(e)})
            raise StorageError("Failed to create appointment") from e
        return appointment

    # ── read operations ──────────────────────────────────────

    def find_by_date(self, date: datetime, provider_id: str) -> Appointment | None:
        try:
            doc = self.collection.find_one({'provider_id': provider_id, 'date': to_utc(date)})
        except PyMongoError as e:
            logger.error("Failed to find appointment by date", extra={"providerId": provider_id, "error": str(e)})
            raise StorageError("Failed to look up appointment") from e
        return self._to_domain(doc) if doc else None

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
