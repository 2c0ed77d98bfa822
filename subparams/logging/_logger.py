"""
Main logging module for sub-parameters.

This module provides convenient logging functionality for the interceptor and
the parameter binder, including structured event logging and trace logging.
"""

import logging
from typing import Any, Dict, Optional

from subparams.constants import (
    BINDING_LOGGER_NAME,
    EVENT_LOGGER_NAME,
    INTERCEPT_LOGGER_NAME,
    ROOT_LOGGER_NAME,
    TRACE_LOGGER_NAME,
)

from ._log_event import (
    AliasReleasedEvent,
    CallEnterEvent,
    CallErrorEvent,
    CallExitEvent,
    ParameterBoundEvent,
    ParamsEvent,
)


class ParamsLogger:
    """Main logger class for sub-parameters."""

    def __init__(self, name: str, source: Optional[str] = None):
        """Initialize the logger.

        Parameters
        ----------
        name : str
            Logger name
        source : str, optional
            Source component name
        """
        self._logger = logging.getLogger(name)
        self._source = source

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled(self) -> bool:
        """Whether events would reach a handler at DEBUG level."""
        return self._logger.isEnabledFor(logging.DEBUG)

    def _log_event(self, event: ParamsEvent) -> None:
        """Log a structured event.

        Parameters
        ----------
        event : ParamsEvent
            The structured event to log
        """
        if self._source and hasattr(event, 'source'):
            event.source = self._source
        self._logger.debug(event)

    # Call events
    def log_call_enter(
        self,
        call_id: str,
        function_name: str,
        scheme: str,
        arg_count: int,
        depth: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the start of an intercepted call.

        Parameters
        ----------
        call_id : str
            Identifier of the invocation
        function_name : str
            Qualified name of the intercepted function
        scheme : str
            Binding scheme of the invocation
        arg_count : int
            Number of argument values recorded in the call context
        depth : int, optional
            Depth of the call-context stack after the push
        metadata : Dict[str, Any], optional
            Additional metadata about the event
        """
        event = CallEnterEvent(
            call_id=call_id,
            function_name=function_name,
            scheme=scheme,
            arg_count=arg_count,
            depth=depth,
            metadata=metadata or {},
        )
        self._log_event(event)

    def log_call_exit(
        self,
        call_id: str,
        function_name: str,
        scheme: str,
        execution_time: Optional[float] = None,
        depth: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the normal return of an intercepted call.

        Parameters
        ----------
        call_id : str
            Identifier of the invocation
        function_name : str
            Qualified name of the intercepted function
        scheme : str
            Binding scheme of the invocation
        execution_time : float, optional
            Time spent in the body in seconds
        depth : int, optional
            Depth of the call-context stack before the pop
        metadata : Dict[str, Any], optional
            Additional metadata about the event
        """
        event = CallExitEvent(
            call_id=call_id,
            function_name=function_name,
            scheme=scheme,
            execution_time=execution_time,
            depth=depth,
            metadata=metadata or {},
        )
        self._log_event(event)

    def log_call_error(
        self,
        call_id: str,
        function_name: str,
        scheme: str,
        error_type: str,
        error_message: str,
        execution_time: Optional[float] = None,
        depth: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an error raised by the body of an intercepted call.

        Parameters
        ----------
        call_id : str
            Identifier of the invocation
        function_name : str
            Qualified name of the intercepted function
        scheme : str
            Binding scheme of the invocation
        error_type : str
            Type of the error
        error_message : str
            Error message
        execution_time : float, optional
            Time spent in the body before the error in seconds
        depth : int, optional
            Depth of the call-context stack before the pop
        metadata : Dict[str, Any], optional
            Additional metadata about the event
        """
        event = CallErrorEvent(
            call_id=call_id,
            function_name=function_name,
            scheme=scheme,
            error_type=error_type,
            error_message=error_message,
            execution_time=execution_time,
            depth=depth,
            metadata=metadata or {},
        )
        self._log_event(event)

    # Binding events
    def log_parameter_bound(
        self,
        call_id: str,
        parameter: str,
        mode: str,
        slot: int,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the binding of a declared parameter.

        Parameters
        ----------
        call_id : str
            Identifier of the invocation the parameter was bound from
        parameter : str
            Sigil and name of the bound local
        mode : str
            Binding mode
        slot : int
            Index of the argument the parameter was bound to
        metadata : Dict[str, Any], optional
            Additional metadata about the event
        """
        event = ParameterBoundEvent(
            call_id=call_id,
            parameter=parameter,
            mode=mode,
            slot=slot,
            metadata=metadata or {},
        )
        self._log_event(event)

    def log_alias_released(
        self,
        call_id: str,
        parameter: str,
        written_back: bool,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log the release of a read-write alias."""
        event = AliasReleasedEvent(
            call_id=call_id,
            parameter=parameter,
            written_back=written_back,
            metadata=metadata or {},
        )
        self._log_event(event)

    # Trace logging methods
    def trace(self, message: str, *args, **kwargs) -> None:
        """Log a trace message."""
        self._logger.debug(message, *args, **kwargs)

    def debug(self, message: str, *args, **kwargs) -> None:
        """Log a debug message."""
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        """Log an info message."""
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        """Log a warning message."""
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        """Log an error message."""
        self._logger.error(message, *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        """Log a critical message."""
        self._logger.critical(message, *args, **kwargs)


def get_logger(name: str, source: Optional[str] = None) -> ParamsLogger:
    """Get a logger instance.

    Parameters
    ----------
    name : str
        Logger name
    source : str, optional
        Source component name

    Returns
    -------
    ParamsLogger
        ParamsLogger instance
    """
    return ParamsLogger(name, source)


def get_intercept_logger(source: Optional[str] = None) -> ParamsLogger:
    """Get the logger used by the interceptor.

    Parameters
    ----------
    source : str, optional
        Source component name

    Returns
    -------
    ParamsLogger
        ParamsLogger instance for interceptor logging
    """
    return ParamsLogger(INTERCEPT_LOGGER_NAME, source)


def get_binding_logger(source: Optional[str] = None) -> ParamsLogger:
    """Get the logger used by the parameter binder.

    Parameters
    ----------
    source : str, optional
        Source component name

    Returns
    -------
    ParamsLogger
        ParamsLogger instance for binder logging
    """
    return ParamsLogger(BINDING_LOGGER_NAME, source)


def get_event_logger(source: Optional[str] = None) -> ParamsLogger:
    """Get an event logger instance."""
    return ParamsLogger(EVENT_LOGGER_NAME, source)


def get_trace_logger(source: Optional[str] = None) -> ParamsLogger:
    """Get a trace logger instance."""
    return ParamsLogger(TRACE_LOGGER_NAME, source)


def setup_logging(
    level: int = logging.INFO,
    enable_trace: bool = True,
    enable_events: bool = True,
    enable_intercept: bool = True,
    enable_binding: bool = True,
    handlers: Optional[list] = None,
    component_levels: Optional[Dict[str, int]] = None,
) -> None:
    """Setup logging configuration for sub-parameters.

    Parameters
    ----------
    level : int, default=logging.INFO
        Default logging level for all components
    enable_trace : bool, default=True
        Whether to enable trace logging (DEBUG level)
    enable_events : bool, default=True
        Whether to enable structured event logging (DEBUG level)
    enable_intercept : bool, default=True
        Whether to enable interceptor logging (INFO level)
    enable_binding : bool, default=True
        Whether to enable binder logging (INFO level)
    handlers : list, optional
        Custom log handlers to add to the root logger
    component_levels : dict, optional
        Custom logging levels for specific components.
        Keys should be component names ('intercept', 'binding', 'events', 'trace')
        and values should be logging level constants.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if handlers:
        for handler in handlers:
            root_logger.addHandler(handler)
    else:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    component_configs = {
        'trace': (TRACE_LOGGER_NAME, logging.DEBUG if enable_trace else logging.CRITICAL),
        'events': (EVENT_LOGGER_NAME, logging.DEBUG if enable_events else logging.CRITICAL),
        'intercept': (INTERCEPT_LOGGER_NAME, logging.INFO if enable_intercept else logging.CRITICAL),
        'binding': (BINDING_LOGGER_NAME, logging.INFO if enable_binding else logging.CRITICAL),
    }

    if component_levels:
        for component, custom_level in component_levels.items():
            if component in component_configs:
                component_configs[component] = (component_configs[component][0], custom_level)

    for component, (logger_name, component_level) in component_configs.items():
        component_logger = logging.getLogger(logger_name)
        component_logger.setLevel(component_level)
        # Component loggers inherit handlers from the root logger
        component_logger.propagate = True


def setup_development_logging() -> None:
    """Setup logging configuration optimized for development.

    This configuration enables all logging levels and components.
    """
    setup_logging(
        level=logging.DEBUG,
        enable_trace=True,
        enable_events=True,
        enable_intercept=True,
        enable_binding=True,
    )


def setup_production_logging() -> None:
    """Setup logging configuration optimized for production.

    This configuration disables verbose logging while keeping
    important operational information visible.
    """
    setup_logging(
        level=logging.WARNING,
        enable_trace=False,
        enable_events=False,
        enable_intercept=True,
        enable_binding=True,
    )


def setup_quiet_logging() -> None:
    """Setup minimal logging configuration.

    This configuration only shows critical errors and warnings.
    """
    setup_logging(
        level=logging.ERROR,
        enable_trace=False,
        enable_events=False,
        enable_intercept=False,
        enable_binding=False,
    )


def setup_verbose_logging() -> None:
    """Setup verbose logging configuration.

    This configuration shows every call and every binding, including the
    structured events.
    """
    setup_logging(
        level=logging.DEBUG,
        enable_trace=True,
        enable_events=True,
        enable_intercept=True,
        enable_binding=True,
        component_levels={
            'trace': logging.DEBUG,
            'events': logging.DEBUG,
            'intercept': logging.DEBUG,
            'binding': logging.DEBUG,
        }
    )
