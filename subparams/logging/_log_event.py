"""
Structured logging events for sub-parameters.

This module provides structured event classes for logging the interception of calls
and the binding of declared parameters.
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, Field


class EventType(str, Enum):
    """Types of events that can be logged.

    Attributes
    ----------
    CALL_ENTER : str
        An intercepted call pushed its call context
    CALL_EXIT : str
        An intercepted call returned and popped its call context
    CALL_ERROR : str
        An intercepted call raised and popped its call context
    PARAMETER_BOUND : str
        A declared parameter was bound from the current call context
    ALIAS_RELEASED : str
        A read-write alias was written back to the caller's storage
    """
    CALL_ENTER = "CallEnter"
    CALL_EXIT = "CallExit"
    CALL_ERROR = "CallError"
    PARAMETER_BOUND = "ParameterBound"
    ALIAS_RELEASED = "AliasReleased"


class BaseEvent(BaseModel):
    """Base class for all structured events.

    Attributes
    ----------
    event_id : str
        Unique identifier for this event
    timestamp : datetime
        Timestamp when the event occurred
    event_type : EventType
        Type of the event
    source : str, optional
        Source component that generated the event
    metadata : Dict[str, Any]
        Additional metadata about the event
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    """Unique identifier for this event."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    """Timestamp when the event occurred."""

    event_type: EventType
    """Type of the event."""

    source: Optional[str] = None
    """Source component that generated the event."""

    metadata: Dict[str, Any] = Field(default_factory=dict)
    """Additional metadata about the event."""

    def to_json(self) -> str:
        """Convert the event to JSON string."""
        return json.dumps(self.model_dump(), default=str)

    def __str__(self) -> str:
        """String representation of the event."""
        return self.to_json()


class CallEvent(BaseEvent):
    """Base class for events of an intercepted call.

    Attributes
    ----------
    call_id : str
        Identifier of the intercepted invocation
    function_name : str
        Qualified name of the intercepted function
    scheme : str
        Binding scheme of the invocation
    depth : int, optional
        Depth of the call-context stack while the invocation is current
    """

    call_id: str
    """Identifier of the intercepted invocation."""

    function_name: str
    """Qualified name of the intercepted function."""

    scheme: str
    """Binding scheme of the invocation."""

    depth: Optional[int] = None
    """Depth of the call-context stack while the invocation is current."""


class CallEnterEvent(CallEvent):
    """Event emitted when an intercepted call pushes its call context.

    Attributes
    ----------
    arg_count : int
        Number of argument values recorded in the call context
    """

    event_type: EventType = EventType.CALL_ENTER

    arg_count: int = 0
    """Number of argument values recorded in the call context."""

    def __str__(self) -> str:
        return json.dumps({
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "call_id": self.call_id,
            "function_name": self.function_name,
            "scheme": self.scheme,
            "depth": self.depth,
            "arg_count": self.arg_count,
            "source": self.source,
            "metadata": self.metadata,
        })


class CallExitEvent(CallEvent):
    """Event emitted when an intercepted call returns.

    Attributes
    ----------
    execution_time : float, optional
        Time spent in the body in seconds
    """

    event_type: EventType = EventType.CALL_EXIT

    execution_time: Optional[float] = None
    """Time spent in the body in seconds."""

    def __str__(self) -> str:
        return json.dumps({
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "call_id": self.call_id,
            "function_name": self.function_name,
            "scheme": self.scheme,
            "depth": self.depth,
            "execution_time": self.execution_time,
            "source": self.source,
            "metadata": self.metadata,
        })


class CallErrorEvent(CallEvent):
    """Event emitted when the body of an intercepted call raises.

    Attributes
    ----------
    error_type : str
        Type of the error
    error_message : str
        Error message
    execution_time : float, optional
        Time spent in the body before the error in seconds
    """

    event_type: EventType = EventType.CALL_ERROR

    error_type: str
    """Type of the error."""

    error_message: str
    """Error message."""

    execution_time: Optional[float] = None
    """Time spent in the body before the error in seconds."""

    def __str__(self) -> str:
        return json.dumps({
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "call_id": self.call_id,
            "function_name": self.function_name,
            "scheme": self.scheme,
            "depth": self.depth,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "execution_time": self.execution_time,
            "source": self.source,
            "metadata": self.metadata,
        })


class ParameterBoundEvent(BaseEvent):
    """Event emitted when a declared parameter is bound.

    Attributes
    ----------
    call_id : str
        Identifier of the invocation the parameter was bound from
    parameter : str
        Sigil and name of the bound local, e.g. `$foo`
    mode : str
        Binding mode, `copy` or `rw`
    slot : int
        Index of the argument the parameter was bound to
    """

    event_type: EventType = EventType.PARAMETER_BOUND

    call_id: str
    """Identifier of the invocation the parameter was bound from."""

    parameter: str
    """Sigil and name of the bound local."""

    mode: str
    """Binding mode."""

    slot: int
    """Index of the argument the parameter was bound to."""

    def __str__(self) -> str:
        return json.dumps({
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "call_id": self.call_id,
            "parameter": self.parameter,
            "mode": self.mode,
            "slot": self.slot,
            "source": self.source,
            "metadata": self.metadata,
        })


class AliasReleasedEvent(BaseEvent):
    """Event emitted when a read-write alias is released at the end of a call.

    Attributes
    ----------
    call_id : str
        Identifier of the invocation that owned the alias
    parameter : str
        Name of the aliased local
    written_back : bool
        Whether the final value of the local was written to the caller's storage
    """

    event_type: EventType = EventType.ALIAS_RELEASED

    call_id: str
    """Identifier of the invocation that owned the alias."""

    parameter: str
    """Name of the aliased local."""

    written_back: bool = False
    """Whether the final value of the local was written to the caller's storage."""


# Union type for all events
ParamsEvent = Union[
    CallEnterEvent,
    CallExitEvent,
    CallErrorEvent,
    ParameterBoundEvent,
    AliasReleasedEvent,
]
