"""Tests for the structured JSON log formatter."""

import json
import logging
import sys
import unittest

from utils.logging import JSONFormatter, setup_structured_logging


def _record(level=logging.INFO, msg="Lookup succeeded", extra=None, exc_info=None):
    record = logging.LogRecord(
        name="services.dictionary_service",
        level=level,
        pathname=__file__,
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in (extra or {}).items():
        setattr(record, key, value)
    return record


class TestJSONFormatter(unittest.TestCase):

    def setUp(self):
        self.formatter = JSONFormatter()

    def test_basic_fields(self):
        data = json.loads(self.formatter.format(_record()))

        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], "services.dictionary_service")
        self.assertEqual(data["message"], "Lookup succeeded")
        self.assertTrue(data["timestamp"].endswith("Z"))
        self.assertNotIn("location", data)

    def test_extra_fields_included(self):
        data = json.loads(self.formatter.format(_record(extra={"word": "cat", "entry_count": 2})))

        self.assertEqual(data["word"], "cat")
        self.assertEqual(data["entry_count"], 2)

    def test_warning_has_location(self):
        data = json.loads(self.formatter.format(_record(level=logging.WARNING)))

        self.assertIn("location", data)

    def test_non_serializable_extra(self):
        """Test values json cannot encode fall back to str()."""
        data = json.loads(self.formatter.format(_record(extra={"path": object()})))

        self.assertIn("object", data["path"])

    def test_exception_included(self):
        try:
            raise ValueError("bad body")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(self.formatter.format(record))

        self.assertIn("ValueError: bad body", data["exception"])


class TestSetupStructuredLogging(unittest.TestCase):

    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self):
        root = logging.getLogger()
        root.setLevel(self._saved[0])
        root.handlers = self._saved[1]

    def test_root_handler_and_quiet_loggers(self):
        setup_structured_logging("DEBUG")

        root = logging.getLogger()
        self.assertEqual(root.level, logging.DEBUG)
        self.assertEqual(len(root.handlers), 1)
        self.assertIsInstance(root.handlers[0].formatter, JSONFormatter)
        self.assertEqual(logging.getLogger("httpx").level, logging.WARNING)


if __name__ == '__main__':
    unittest.main()
