import logging
import sys
import unittest

from tensorcheck.domain import LogSink
from tensorcheck.infrastructure._logging import (
    LOGGER_NAME,
    LoggingSink,
    StdoutHandler,
    get_logger,
    setup_logging,
)


class TestLogging(unittest.TestCase):
    def tearDown(self):
        logger = get_logger()
        for h in list(logger.handlers):
            if isinstance(h, StdoutHandler):
                logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)

    def test_get_logger_names(self):
        self.assertEqual(get_logger().name, LOGGER_NAME)
        self.assertEqual(get_logger("compare").name, "tensorcheck.compare")

    def test_setup_logging_is_idempotent(self):
        logger = setup_logging(logging.DEBUG)
        setup_logging(logging.WARNING)
        own = [h for h in logger.handlers if isinstance(h, StdoutHandler)]
        self.assertEqual(len(own), 1)
        self.assertIs(own[0].stream, sys.stdout)
        self.assertEqual(logger.level, logging.WARNING)

    def test_logging_sink_forwards_level_and_message(self):
        sink = LoggingSink()
        self.assertIsInstance(sink, LogSink)
        with self.assertLogs("tensorcheck.compare", level="WARNING") as logs:
            sink(logging.WARNING, "line one\nline two")
        self.assertEqual(logs.records[0].levelno, logging.WARNING)
        self.assertEqual(logs.records[0].getMessage(), "line one\nline two")

    def test_logging_sink_custom_logger(self):
        sink = LoggingSink(logging.getLogger("harness"))
        self.assertEqual(repr(sink), "LoggingSink(logger='harness')")
        with self.assertLogs("harness", level="ERROR"):
            sink(logging.ERROR, "boom")


if __name__ == "__main__":
    unittest.main()
