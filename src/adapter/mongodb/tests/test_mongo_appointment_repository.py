"""Tests for MongoAppointmentRepository against a mocked collection."""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.appointment_repository import MongoAppointmentRepository
from domain.model.errors import ConflictError, StorageError


def _appointment_doc(**kwargs) -> dict:
    doc = {
        '_id': 'appointment-1',
        'provider_id': 'provider',
        'user_id': 'user',
        'date': datetime(2020, 5, 20, 14, 0),
        'created_at': datetime(2020, 5, 1, 9, 0),
        'updated_at': datetime(2020, 5, 1, 9, 0),
    }
    doc.update(kwargs)
    return doc


class TestMongoAppointmentRepository(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()
        db = MagicMock()
        db.__getitem__.return_value = self.collection
        self.repo = MongoAppointmentRepository(db)

    def test_create_inserts_utc_date(self):
        appointment = self.repo.create(
            provider_id='provider', user_id='user', date=datetime(2020, 5, 20, 14),
        )

        doc = self.collection.insert_one.call_args[0][0]
        self.assertEqual(doc['_id'], appointment.id)
        self.assertEqual(doc['date'], datetime(2020, 5, 20, 14, tzinfo=timezone.utc))

    def test_create_duplicate_slot_raises_conflict(self):
        self.collection.insert_one.side_effect = DuplicateKeyError('E11000 duplicate key error')

        with self.assertRaises(ConflictError):
            self.repo.create(provider_id='provider', user_id='user', date=datetime(2020, 5, 20, 14))

    def test_create_driver_failure_raises_storage_error(self):
        self.collection.insert_one.side_effect = PyMongoError('boom')

        with self.assertRaises(StorageError):
            self.repo.create(provider_id='provider', user_id='user', date=datetime(2020, 5, 20, 14))

    def test_find_by_date_queries_provider_and_exact_date(self):
        self.collection.find_one.return_value = _appointment_doc()
        date = datetime(2020, 5, 20, 14, tzinfo=timezone.utc)

        appointment = self.repo.find_by_date(date, 'provider')

        self.collection.find_one.assert_called_once_with({'provider_id': 'provider', 'date': date})
        self.assertEqual(appointment.date, date)

    def test_find_by_date_not_found(self):
        self.collection.find_one.return_value = None

        self.assertIsNone(self.repo.find_by_date(datetime(2020, 5, 20, 14), 'provider'))

    def test_find_all_in_day_uses_half_open_range(self):
        cursor = MagicMock()
        cursor.sort.return_value = [_appointment_doc()]
        self.collection.find.return_value = cursor

        appointments = self.repo.find_all_in_day_from_provider('provider', 2020, 5, 20)

        self.collection.find.assert_called_once_with({
            'provider_id': 'provider',
            'date': {
                '$gte': datetime(2020, 5, 20, tzinfo=timezone.utc),
                '$lt': datetime(2020, 5, 21, tzinfo=timezone.utc),
            },
        })
        cursor.sort.assert_called_once_with('date', 1)
        self.assertEqual(len(appointments), 1)

    def test_find_all_in_month_uses_month_range(self):
        cursor = MagicMock()
        cursor.sort.return_value = []
        self.collection.find.return_value = cursor

        self.assertEqual(self.repo.find_all_in_month_from_provider('provider', 2020, 2), [])

        query = self.collection.find.call_args[0][0]
        self.assertEqual(query['date']['$gte'], datetime(2020, 2, 1, tzinfo=timezone.utc))
        self.assertEqual(query['date']['$lt'], datetime(2020, 3, 1, tzinfo=timezone.utc))

    def test_ensure_indexes_creates_unique_slot_index(self):
        self.assertTrue(self.repo.ensure_indexes())

        self.collection.create_index.assert_any_call(
            [('provider_id', 1), ('date', 1)],
            name='idx_appointments_provider_date',
            unique=True,
        )


if __name__ == '__main__':
    unittest.main()
