"""
Constants module for sub-parameters.

This module contains all constants used throughout the package.
"""

from ._logging import *

__all__ = [
    # Logger names
    "ROOT_LOGGER_NAME",
    "EVENT_LOGGER_NAME",
    "TRACE_LOGGER_NAME",
    "INTERCEPT_LOGGER_NAME",
    "BINDING_LOGGER_NAME",
    # Source prefixes
    "DEFAULT_INTERCEPT_SOURCE_PREFIX",
    "DEFAULT_BINDING_SOURCE_PREFIX",
]
