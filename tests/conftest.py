import logging

import pytest

from nano_ioc.constants import LOGGER

log_capture: list[str] = []


class ListLogHandler(logging.Handler):
    def emit(self, record):
        log_capture.append(self.format(record))


@pytest.fixture(autouse=True)
def reset_logging_capture():
    log_capture.clear()
    handler = ListLogHandler(level=logging.DEBUG)
    previous = LOGGER.level
    LOGGER.addHandler(handler)
    LOGGER.setLevel(logging.DEBUG)
    yield
    LOGGER.removeHandler(handler)
    LOGGER.setLevel(previous)


@pytest.fixture
def logs() -> list[str]:
    return log_capture
