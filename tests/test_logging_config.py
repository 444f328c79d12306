import logging

import pytest
import pytz

from notification_patterns.logging_config import TzFormatter, apply_config


class StubConfig:
    def __init__(self, **logging_section):
        self.section = logging_section

    def get(self, *keys, default=None):
        return self.section.get(keys[-1], default)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    formatters = [(handler, handler.formatter) for handler in root.handlers]
    yield root
    root.setLevel(level)
    for handler, formatter in formatters:
        handler.setFormatter(formatter)


def test_tz_formatter_uses_timezone() -> None:
    formatter = TzFormatter("%(asctime)s %(message)s", tz=pytz.timezone("Asia/Tokyo"))
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    record.created = 0

    assert formatter.formatTime(record) == "1970-01-01 09:00:00,000"
    assert formatter.formatTime(record, "%H:%M") == "09:00"


def test_apply_config_sets_level(restore_root_logging) -> None:
    apply_config(StubConfig(level="debug", timezone="UTC"))

    assert restore_root_logging.level == logging.DEBUG


def test_apply_config_invalid_level_falls_back_to_info(restore_root_logging) -> None:
    apply_config(StubConfig(level="LOUD", timezone="UTC"))

    assert restore_root_logging.level == logging.INFO


def test_apply_config_non_string_level_falls_back_to_info(restore_root_logging, caplog) -> None:
    restore_root_logging.setLevel(logging.DEBUG)

    apply_config(StubConfig(level=10, timezone="UTC"))

    assert restore_root_logging.level == logging.INFO
    assert any("Invalid logging level '10'" in r.getMessage() for r in caplog.records)


def test_apply_config_installs_tz_formatter(restore_root_logging) -> None:
    handler = logging.StreamHandler()
    restore_root_logging.addHandler(handler)
    try:
        apply_config(StubConfig(level="INFO", timezone="Europe/Warsaw"))
        assert isinstance(handler.formatter, TzFormatter)
        assert handler.formatter.tz.zone == "Europe/Warsaw"
    finally:
        restore_root_logging.removeHandler(handler)


def test_apply_config_invalid_timezone_keeps_formatter(restore_root_logging) -> None:
    handler = logging.StreamHandler()
    original = logging.Formatter("%(message)s")
    handler.setFormatter(original)
    restore_root_logging.addHandler(handler)
    try:
        apply_config(StubConfig(level="INFO", timezone="Mars/Olympus"))
        assert handler.formatter is original
    finally:
        restore_root_logging.removeHandler(handler)
