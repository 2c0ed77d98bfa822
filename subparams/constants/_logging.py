"""
Logging constants for sub-parameters.

This module defines the logger names and other constants used throughout the package.
"""

ROOT_LOGGER_NAME = "subparams"
"""Logger name used for root logger"""

EVENT_LOGGER_NAME = "subparams.events"
"""Logger name used for structured event logging"""

TRACE_LOGGER_NAME = "subparams.trace"
"""Logger name used for developer intended trace logging. The content and format of this log should not be depended upon."""

INTERCEPT_LOGGER_NAME = "subparams.intercept"
"""Logger name used for interceptor-related logging"""

BINDING_LOGGER_NAME = "subparams.binding"
"""Logger name used for parameter binder logging"""

# Default source prefixes
DEFAULT_INTERCEPT_SOURCE_PREFIX = "Interceptor"
"""Default prefix for interceptor source names"""

DEFAULT_BINDING_SOURCE_PREFIX = "Binder"
"""Default prefix for binder source names"""
