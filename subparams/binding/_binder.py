import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from subparams.capabilities import ArgSlot, Storage
from subparams.config import GlobalSetting
from subparams.constants import DEFAULT_BINDING_SOURCE_PREFIX
from subparams.intercept import CallContext, call_stack
from subparams.logging import get_binding_logger
from subparams.types._common import Kind, Mode, ModeLike, Ref, Scheme
from subparams.types._error import (
    ParameterDeclarationError,
    ParameterKindError,
    ParameterNameError,
    UndecoratedFunctionError,
    UnknownSchemeError,
)

_logger = get_binding_logger(source=DEFAULT_BINDING_SOURCE_PREFIX)

# Frames between `_bind` and the front-end entry point of each path. The body frame
# sits `stacklevel` frames above the entry point.
_DIRECT_CALL_LEVEL = 1
_ATTRIBUTE_DISPATCH_LEVEL = 1


@dataclass(frozen=True)
class Binding:
    """
    A parameter declaration resolved against the current call context.
    """
    name: str
    kind: Kind
    mode: Mode
    slot: int

    @property
    def label(self) -> str:
        return f"{self.kind.value}{self.name}"


def _coerce_mode(mode: Optional[ModeLike]) -> Mode:
    if mode is None:
        return GlobalSetting.read().default_mode
    try:
        return Mode(mode)
    except ValueError:
        raise ParameterDeclarationError(
            f"unknown parameter mode {mode!r}, expected one of {[m.value for m in Mode]}"
        ) from None


def _resolve_slot(context: CallContext, name: str, label: str) -> int:
    if context.scheme is Scheme.POSITIONAL:
        slot = context.next_positional_slot
        context.next_positional_slot += 1
        if slot >= len(context.args):
            raise ParameterNameError(
                f"can't find a parameter for '{label}': no argument was provided at position {slot}"
            )
        return slot
    elif context.scheme is Scheme.NAMED:
        slot = context.name_to_slot.get(name)
        if slot is None:
            raise ParameterNameError(f"can't find a parameter for '{label}'")
        return slot
    else:
        raise UnknownSchemeError(
            f"don't know what kind of processing to do for the scheme {context.scheme!r}!"
        )


def _deref(value: Any) -> Any:
    return value.value if isinstance(value, Ref) else value


def _check_kind(kind: Kind, value: Any, label: str) -> None:
    if kind is Kind.SEQUENCE:
        if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
            raise ParameterKindError(
                f"can't assign non-sequence reference to '{label}', got {type(value).__name__}"
            )
    elif kind is Kind.MAPPING:
        if not isinstance(value, Mapping):
            raise ParameterKindError(
                f"can't assign non-mapping reference to '{label}', got {type(value).__name__}"
            )


def _copy(kind: Kind, value: Any) -> Any:
    if kind is Kind.SEQUENCE:
        return list(value)
    if kind is Kind.MAPPING:
        return dict(value)
    return value


def _bind(mode: Optional[ModeLike], kind: Kind, name: Optional[str], call_level: int) -> Any:
    settings = GlobalSetting.read()
    mode = _coerce_mode(mode)
    try:
        frame = sys._getframe(call_level)
    except ValueError:
        raise ParameterDeclarationError(
            "stacklevel points past the outermost frame of the call stack"
        ) from None
    try:
        context = call_stack.peek()
        if context is None or not context.owns(frame):
            raise UndecoratedFunctionError(
                f"attempt to use a parameter in an undecorated function `{frame.f_code.co_name}`"
            )

        if name is None:
            name = settings.name_introspector.resolve(frame)
        label = f"{kind.value}{name}"
        slot = _resolve_slot(context, name, label)
        binding = Binding(name=name, kind=kind, mode=mode, slot=slot)

        argument = context.args[slot]
        value = _deref(argument)
        _check_kind(kind, value, label)

        if mode is Mode.COPY:
            result = _copy(kind, value)
        else:
            storage: Storage = argument if isinstance(argument, Ref) else ArgSlot(context.args, slot)
            context.aliases.append(settings.aliaser.alias(frame, name, storage, value))
            result = value

        if settings.emit_events and _logger.is_enabled():
            _logger.log_parameter_bound(
                call_id=context.call_id,
                parameter=binding.label,
                mode=binding.mode.value,
                slot=binding.slot,
            )
        return result
    finally:
        del frame


def param(
    mode: Optional[ModeLike] = None,
    *,
    kind: Kind = Kind.SCALAR,
    name: Optional[str] = None,
    stacklevel: int = 1,
) -> Any:
    """
    Declare the local being assigned as a parameter of the current intercepted call, and
    return the value it is bound to.

    Parameters
    ----------
    mode : Optional[ModeLike]
        `copy` to receive an independent value, `rw` to share storage with the caller's
        argument. Defaults to `GlobalSetting.default_mode`.
    kind : Kind
        Whether the local expects a scalar, a sequence or a mapping.
    name : Optional[str]
        The name of the local. Resolved from the assignment target when omitted.
    stacklevel : int
        Which frame declares the parameter. 1 is the caller of `param`; a helper that
        declares a parameter on behalf of its own caller passes 2.

    Returns
    -------
    Any
        The argument value, or a shallow copy of it for collections in `copy` mode.

    Raises
    ------
    UndecoratedFunctionError
        If the declaring function was not decorated with `want_params`.
    ParameterNameError
        If no argument matches the parameter.
    ParameterKindError
        If a sequence or mapping parameter receives an argument of another kind.
    ParameterDeclarationError
        If the mode is unknown or the name of the local can't be resolved.
    """
    return _bind(mode, Kind(kind), name, _DIRECT_CALL_LEVEL + stacklevel)


class Parameter:
    """
    Attribute-dispatch front-end of the binder.

    Reading the `copy` or `rw` attribute declares the local being assigned with that mode:

    >>> foo = scalar.rw
    >>> items = sequence.copy

    Reading a mode is a declaration, not a lookup: outside the body of an intercepted call
    it raises `UndecoratedFunctionError`, so `hasattr(scalar, "rw")` raises too. Use
    `Mode` to enumerate the supported modes.
    """

    def __init__(self, kind: Kind = Kind.SCALAR):
        self._kind = Kind(kind)

    @property
    def kind(self) -> Kind:
        return self._kind

    def __getattr__(self, attr: str) -> Any:
        if attr.startswith("_"):
            raise AttributeError(attr)
        try:
            mode = Mode(attr)
        except ValueError:
            raise AttributeError(
                f"'{type(self).__name__}' has no mode '{attr}', expected one of {[m.value for m in Mode]}"
            ) from None
        return _bind(mode, self._kind, None, _ATTRIBUTE_DISPATCH_LEVEL + 1)

    def __call__(
        self,
        mode: Optional[ModeLike] = None,
        *,
        name: Optional[str] = None,
        stacklevel: int = 1,
    ) -> Any:
        return _bind(mode, self._kind, name, _ATTRIBUTE_DISPATCH_LEVEL + stacklevel)

    def __repr__(self) -> str:
        return f"Parameter({self._kind.name})"


scalar = Parameter(Kind.SCALAR)
sequence = Parameter(Kind.SEQUENCE)
mapping = Parameter(Kind.MAPPING)
