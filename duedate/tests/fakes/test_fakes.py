"""Tests for the fake port implementations."""

import logging
import threading

from duedate.core.ports import LoggerPort
from duedate.tests.fakes import FakeLoggerPort


class TestFakeLoggerPort:
    """FakeLoggerPort captures records for assertions."""

    def test_is_logger_port(self) -> None:
        assert isinstance(FakeLoggerPort(), LoggerPort)

    def test_captures_records_in_order(self) -> None:
        fake = FakeLoggerPort()
        fake.log(logging.CRITICAL, "first")
        fake.log(logging.INFO, "second")
        assert fake.records == [(logging.CRITICAL, "first"), (logging.INFO, "second")]
        assert fake.get_last_record() == (logging.INFO, "second")

    def test_count_filters_by_level_and_substring(self) -> None:
        fake = FakeLoggerPort()
        fake.log(logging.CRITICAL, "Invalid task length provided: 0")
        fake.log(logging.CRITICAL, "Invalid task length provided: -3")
        fake.log(logging.WARNING, "Invalid task length provided: -4")
        fake.log(logging.CRITICAL, "Invalid start date provided: x")
        assert fake.count(logging.CRITICAL, "Invalid task length provided") == 2

    def test_reset(self) -> None:
        fake = FakeLoggerPort()
        fake.log(logging.CRITICAL, "message")
        fake.reset()
        assert fake.records == []
        assert fake.get_last_record() is None

    def test_concurrent_logging_keeps_every_record(self) -> None:
        fake = FakeLoggerPort()

        def worker() -> None:
            for i in range(100):
                fake.log(logging.CRITICAL, f"record {i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(fake.records) == 800
