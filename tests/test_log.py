"""Unit tests for oracle.log."""

import json
import logging
import sys
import unittest
from decimal import Decimal

from oracle.log import LOGGER_NAME, StructuredFormatter, configure_logging


class TestStructuredFormatter(unittest.TestCase):
    """Tests the JSON-lines formatter."""

    def make_record(self, **extra):
        record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1, "llm_call", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self):
        data = json.loads(StructuredFormatter().format(self.make_record()))
        self.assertEqual(data["level"], "INFO")
        self.assertEqual(data["logger"], LOGGER_NAME)
        self.assertEqual(data["message"], "llm_call")
        self.assertIn("timestamp", data)
        self.assertNotIn("number", data)

    def test_extra_fields(self):
        record = self.make_record(number=7, prompt_tokens=12, unrelated="x")
        data = json.loads(StructuredFormatter().format(record))
        self.assertEqual(data["number"], 7)
        self.assertEqual(data["prompt_tokens"], 12)
        self.assertNotIn("unrelated", data)

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self.make_record()
            record.exc_info = sys.exc_info()
        data = json.loads(StructuredFormatter().format(record))
        self.assertEqual(data["exc_type"], "RuntimeError")
        self.assertIn("RuntimeError: boom", data["exception"])

    def test_unencodable_extra(self):
        record = self.make_record(number=Decimal("4"), errors={"isEven"})
        data = json.loads(StructuredFormatter().format(record))
        self.assertEqual(data["number"], "4")
        self.assertEqual(data["errors"], "{'isEven'}")


class TestConfigureLogging(unittest.TestCase):
    """Tests configure_logging."""

    def setUp(self):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self):
        handlers, level, propagate = self.saved
        self.logger.handlers = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_idempotent(self):
        configure_logging()
        logger = configure_logging(logging.DEBUG)
        structured = [h for h in logger.handlers if isinstance(h.formatter, StructuredFormatter)]
        self.assertEqual(len(structured), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
