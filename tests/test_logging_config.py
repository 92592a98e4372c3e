"""Unit tests for bezedit.logging_config."""

import io
import logging
import os
import unittest
from unittest import mock

from bezedit.logging_config import LOG_LEVEL_ENV, resolve_level, setup_logging


class TestResolveLevel(unittest.TestCase):

    def test_names_and_numbers(self):
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" Warning "), logging.WARNING)
        self.assertEqual(resolve_level(logging.ERROR), logging.ERROR)

    def test_unknown_name(self):
        with self.assertRaises(ValueError):
            resolve_level("chatty")

    def test_environment_default(self):
        with mock.patch.dict(os.environ, {LOG_LEVEL_ENV: "error"}):
            self.assertEqual(resolve_level(), logging.ERROR)
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(resolve_level(), logging.INFO)


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        self.logger = logging.getLogger("bezedit")
        self.saved = (list(self.logger.handlers), self.logger.level, self.logger.propagate)

    def tearDown(self):
        handlers, level, propagate = self.saved
        self.logger.handlers[:] = handlers
        self.logger.setLevel(level)
        self.logger.propagate = propagate

    def test_records_reach_stream(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        logging.getLogger("bezedit.core.editor").info("Mode toggled! Algorithm: %s", "Bernstein")
        logging.getLogger("bezedit.core.points").debug("hidden")
        out = stream.getvalue()
        self.assertIn("INFO    bezedit.core.editor: Mode toggled! Algorithm: Bernstein", out)
        self.assertNotIn("hidden", out)

    def test_repeated_setup_keeps_one_handler(self):
        setup_logging("DEBUG", stream=io.StringIO())
        logger = setup_logging("DEBUG", stream=io.StringIO())
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
