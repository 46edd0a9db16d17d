"""Unit tests for provider_service module."""

import unittest
from datetime import datetime, timezone

from adapter.fake.appointment_repository import FakeAppointmentRepository
from adapter.fake.user_repository import FakeUserRepository
from services.provider_service import (
    ListProviderDayAvailabilityService,
    ListProviderMonthAvailabilityService,
    ListProvidersService,
)


class TestListProvidersService(unittest.TestCase):

    def test_lists_everyone_but_the_caller(self):
        repo = FakeUserRepository()
        john = repo.create(name='John Doe', email='john@example.com', password_hash='123456')
        mary = repo.create(name='Mary', email='mary@example.com', password_hash='123456')
        me = repo.create(name='Me', email='me@example.com', password_hash='123456')

        providers = ListProvidersService(repo).execute(me.id)

        self.assertCountEqual(providers, [john, mary])


class TestListProviderMonthAvailabilityService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeAppointmentRepository()
        now = datetime(2020, 5, 19, 11, tzinfo=timezone.utc)
        self.service = ListProviderMonthAvailabilityService(self.repo, clock=lambda: now)

    def test_full_day_is_unavailable(self):
        for hour in range(8, 18):
            self.repo.create(
                provider_id='provider', user_id='user',
                date=datetime(2020, 5, 20, hour, tzinfo=timezone.utc),
            )
        self.repo.create(
            provider_id='provider', user_id='user',
            date=datetime(2020, 5, 21, 8, tzinfo=timezone.utc),
        )

        days = {d.day: d.available for d in self.service.execute('provider', 2020, 5)}

        self.assertEqual(len(days), 31)
        self.assertFalse(days[18])  # already over
        self.assertTrue(days[19])   # today, still open
        self.assertFalse(days[20])  # fully booked
        self.assertTrue(days[21])
        self.assertTrue(days[22])

    def test_month_view_agrees_with_day_view_for_sub_hour_bookings(self):
        for minute in range(0, 50, 5):
            self.repo.create(
                provider_id='provider', user_id='user',
                date=datetime(2020, 5, 20, 8, minute, tzinfo=timezone.utc),
            )
        self.repo.create(
            provider_id='provider', user_id='user',
            date=datetime(2020, 5, 20, 21, tzinfo=timezone.utc),
        )
        now = datetime(2020, 5, 19, 11, tzinfo=timezone.utc)
        day_service = ListProviderDayAvailabilityService(self.repo, clock=lambda: now)

        days = {d.day: d.available for d in self.service.execute('provider', 2020, 5)}
        free_hours = [h.hour for h in day_service.execute('provider', 2020, 5, 20) if h.available]

        self.assertEqual(free_hours, list(range(9, 18)))
        self.assertTrue(days[20])


class TestListProviderDayAvailabilityService(unittest.TestCase):

    def test_lists_free_hours(self):
        repo = FakeAppointmentRepository()
        repo.create(provider_id='provider', user_id='user', date=datetime(2020, 5, 20, 14, tzinfo=timezone.utc))
        repo.create(provider_id='provider', user_id='user', date=datetime(2020, 5, 20, 15, tzinfo=timezone.utc))
        now = datetime(2020, 5, 20, 11, tzinfo=timezone.utc)

        hours = ListProviderDayAvailabilityService(repo, clock=lambda: now).execute('provider', 2020, 5, 20)
        availability = {h.hour: h.available for h in hours}

        self.assertEqual(sorted(availability), list(range(8, 18)))
        self.assertFalse(availability[8])
        self.assertFalse(availability[10])
        self.assertTrue(availability[13])
        self.assertFalse(availability[14])
        self.assertFalse(availability[15])
        self.assertTrue(availability[16])


if __name__ == '__main__':
    unittest.main()
