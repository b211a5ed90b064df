"""Tests for logging setup."""

import io
import logging
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tilearena.config import ArenaConfig
from tilearena.utils.logging import configure_logging, setup_logging


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._saved = (root.handlers[:], root.level, logging.getLogger("uvicorn.access").level)

    def tearDown(self):
        handlers, level, access_level = self._saved
        root = logging.getLogger()
        root.handlers[:] = handlers
        root.setLevel(level)
        logging.getLogger("uvicorn.access").setLevel(access_level)

    def test_single_handler_with_format(self):
        stream = io.StringIO()
        handler = setup_logging("DEBUG", fmt="%(levelname)s:%(name)s:%(message)s", stream=stream)
        self.assertEqual(logging.getLogger().handlers, [handler])
        logging.getLogger("tilearena.test").debug("hello %d", 7)
        self.assertEqual(stream.getvalue(), "DEBUG:tilearena.test:hello 7\n")

    def test_unknown_level_falls_back_to_info(self):
        stream = io.StringIO()
        setup_logging("CHATTY", stream=stream)
        self.assertEqual(logging.getLogger().level, logging.INFO)
        logging.getLogger("tilearena.test").debug("hidden")
        self.assertEqual(stream.getvalue(), "")

    def test_noisy_loggers_held_at_warning(self):
        setup_logging("DEBUG", stream=io.StringIO())
        self.assertEqual(logging.getLogger("uvicorn.access").level, logging.WARNING)

    def test_configure_from_arena_config(self):
        stream = io.StringIO()
        cfg = ArenaConfig(log_level="WARNING", log_format="%(name)s|%(message)s")
        configure_logging(cfg, stream=stream)
        log = logging.getLogger("tilearena.test")
        log.info("dropped")
        log.warning("kept")
        self.assertEqual(stream.getvalue(), "tilearena.test|kept\n")


if __name__ == "__main__":
    unittest.main()
