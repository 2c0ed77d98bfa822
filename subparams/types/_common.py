from enum import Enum
from typing import Any, Generic, TypeVar, Union
from typing_extensions import TypeAlias

T = TypeVar("T")


class Scheme(str, Enum):
    """
    Definitions of binding schemes:
    - POSITIONAL: The arguments of the call are bound to the declared parameters strictly in
    declaration order. The first declared parameter receives the first argument, and so on.
    - NAMED: The arguments of the call are treated as alternating name/value pairs, and each
    declared parameter receives the value that follows its own name.
    """
    POSITIONAL = "positional"
    NAMED = "named"


class Mode(str, Enum):
    """
    Definitions of binding modes:
    - COPY: The local receives an independent value. Later mutation of the local does not
    affect the caller's argument.
    - RW: The local shares storage with the caller's argument. Mutations are visible to the
    caller, and a rebinding of the local is written back when the body finishes.
    """
    COPY = "copy"
    RW = "rw"


class Kind(str, Enum):
    """
    The kind of value a declared parameter expects. The value of each member is the sigil
    used when the parameter is named in error messages and log events.
    """
    SCALAR = "$"
    SEQUENCE = "@"
    MAPPING = "%"


SchemeLike: TypeAlias = Union[Scheme, str]
ModeLike: TypeAlias = Union[Mode, str]


class Ref(Generic[T]):
    """
    A mutable cell standing for a variable of the caller.

    Pass a `Ref` where a read-write parameter should write back into the caller's storage:

    >>> cell = Ref("foo value")
    >>> specimen(cell)
    >>> cell.value
    'new value'
    """

    __slots__ = ("value",)

    def __init__(self, value: T = None):
        self.value = value

    def __repr__(self) -> str:
        return f"Ref({self.value!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Ref):
            return self.value == other.value
        return NotImplemented

    __hash__ = None
