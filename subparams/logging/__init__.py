from ._log_event import *
from ._logger import *

__all__ = [
    # Event types
    "EventType",
    # Event classes
    "BaseEvent",
    "CallEvent",
    "CallEnterEvent",
    "CallExitEvent",
    "CallErrorEvent",
    "ParameterBoundEvent",
    "AliasReleasedEvent",
    "ParamsEvent",
    # Logger class
    "ParamsLogger",
    # Logger factory functions
    "get_logger",
    "get_intercept_logger",
    "get_binding_logger",
    "get_event_logger",
    "get_trace_logger",
    # Setup functions
    "setup_logging",
    "setup_development_logging",
    "setup_production_logging",
    "setup_quiet_logging",
    "setup_verbose_logging",
]
