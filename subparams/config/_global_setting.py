"""
Global settings for sub-parameters.
"""

from typing import ClassVar, Optional
from pydantic import BaseModel, Field
from threading import Lock

from subparams.types._common import Scheme, Mode, SchemeLike, ModeLike
from subparams.capabilities import (
    NameIntrospector,
    BytecodeNameIntrospector,
    LexicalAliaser,
    FrameLocalsAliaser,
)


class GlobalSetting(BaseModel):
    """
    Global settings for sub-parameters.

    This class uses a singleton pattern. The singleton instance is accessed via
    `GlobalSetting.read()` and can be configured via `GlobalSetting.set()`.

    Attributes
    ----------
    default_scheme : Scheme
        The scheme used by `want_params` when none is given at decoration time.
    default_mode : Mode
        The mode used by the binder when none is given at declaration time.
    emit_events : bool
        Whether the interceptor and the binder emit structured log events.
    name_introspector : NameIntrospector
        Resolves the name of the local a binder call declares.
    aliaser : LexicalAliaser
        Links read-write locals to the storage of the caller's arguments.
    """
    model_config = {"arbitrary_types_allowed": True, "validate_assignment": True}

    default_scheme: Scheme = Scheme.POSITIONAL
    """The scheme used by `want_params` when none is given at decoration time."""

    default_mode: Mode = Mode.COPY
    """The mode used by the binder when none is given at declaration time."""

    emit_events: bool = True
    """Whether the interceptor and the binder emit structured log events."""

    name_introspector: NameIntrospector = Field(default_factory=BytecodeNameIntrospector)
    """Resolves the name of the local a binder call declares."""

    aliaser: LexicalAliaser = Field(default_factory=FrameLocalsAliaser)
    """Links read-write locals to the storage of the caller's arguments."""

    # Singleton instance
    _instance: ClassVar[Optional["GlobalSetting"]] = None
    _lock: ClassVar[Lock] = Lock()

    @classmethod
    def read(cls) -> "GlobalSetting":
        """
        Get the singleton global setting instance.

        Returns
        -------
        GlobalSetting
            The singleton global setting instance.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def set(
        cls,
        default_scheme: Optional[SchemeLike] = None,
        default_mode: Optional[ModeLike] = None,
        emit_events: Optional[bool] = None,
        name_introspector: Optional[NameIntrospector] = None,
        aliaser: Optional[LexicalAliaser] = None,
    ) -> None:
        """
        Set global setting fields.

        Only the fields that are given are changed; the others keep their current value.

        Parameters
        ----------
        default_scheme : Optional[SchemeLike]
            The scheme used by `want_params` when none is given.
        default_mode : Optional[ModeLike]
            The mode used by the binder when none is given.
        emit_events : Optional[bool]
            Whether structured log events are emitted.
        name_introspector : Optional[NameIntrospector]
            Replacement for the name introspection capability.
        aliaser : Optional[LexicalAliaser]
            Replacement for the lexical aliasing capability.
        """
        instance = cls.read()
        with cls._lock:
            if default_scheme is not None:
                instance.default_scheme = default_scheme
            if default_mode is not None:
                instance.default_mode = default_mode
            if emit_events is not None:
                instance.emit_events = emit_events
            if name_introspector is not None:
                instance.name_introspector = name_introspector
            if aliaser is not None:
                instance.aliaser = aliaser

    @classmethod
    def reset(cls) -> None:
        """
        Restore every field to its default value.
        """
        with cls._lock:
            cls._instance = cls()
