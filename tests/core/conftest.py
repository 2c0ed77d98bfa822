"""
Shared pytest fixtures for core tests.

Every test starts with default global settings, an empty call-context stack and
pristine loggers, so tests can change any of them freely.
"""
import logging

import pytest

from subparams.config import GlobalSetting
from subparams.constants import (
    BINDING_LOGGER_NAME,
    EVENT_LOGGER_NAME,
    INTERCEPT_LOGGER_NAME,
    ROOT_LOGGER_NAME,
    TRACE_LOGGER_NAME,
)
from subparams.intercept import call_stack

_LOGGER_NAMES = [
    ROOT_LOGGER_NAME,
    EVENT_LOGGER_NAME,
    TRACE_LOGGER_NAME,
    INTERCEPT_LOGGER_NAME,
    BINDING_LOGGER_NAME,
]


@pytest.fixture(autouse=True)
def pristine_state():
    GlobalSetting.reset()
    call_stack.reset()
    yield
    GlobalSetting.reset()
    call_stack.reset()
    for name in _LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
