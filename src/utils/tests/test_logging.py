"""Tests for the structured JSON log formatter."""

import json
import logging
import unittest

from utils.logging import JSONFormatter


class TestJSONFormatter(unittest.TestCase):

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord('services.auth_service', logging.INFO, __file__, 1, 'User %s', ('authenticated',), None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_core_fields(self):
        data = json.loads(JSONFormatter().format(self._record()))

        self.assertEqual(data['level'], 'INFO')
        self.assertEqual(data['logger'], 'services.auth_service')
        self.assertEqual(data['message'], 'User authenticated')
        self.assertTrue(data['timestamp'].endswith('Z'))
        self.assertNotIn('args', data)
        self.assertNotIn('lineno', data)

    def test_includes_extra_fields(self):
        data = json.loads(JSONFormatter().format(self._record(userId='user-123')))

        self.assertEqual(data['userId'], 'user-123')


if __name__ == '__main__':
    unittest.main()
