from dataclasses import dataclass
from types import FrameType
from typing import Any, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Storage(Protocol):
    """
    A location a read-write parameter writes back to. `Ref` and `ArgSlot` implement it.
    """
    value: Any


class ArgSlot:
    """
    A view onto one slot of the argument list recorded in a call context.
    """

    __slots__ = ("_args", "_index")

    def __init__(self, args: List[Any], index: int):
        self._args = args
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def value(self) -> Any:
        return self._args[self._index]

    @value.setter
    def value(self, value: Any) -> None:
        self._args[self._index] = value

    def __repr__(self) -> str:
        return f"ArgSlot({self._index}, {self.value!r})"


@dataclass
class Alias:
    """
    A live link between a local of a running body frame and the storage of the argument
    it was bound to. Owned by the call context of the invocation that created it.
    """
    frame: Optional[FrameType]
    name: str
    storage: Storage
    bound: Any


@runtime_checkable
class LexicalAliaser(Protocol):
    """
    Links a local of a body frame to externally supplied storage.
    """

    def alias(self, frame: FrameType, name: str, storage: Storage, bound: Any) -> Alias:
        ...

    def release(self, alias: Alias) -> bool:
        ...


class FrameLocalsAliaser:
    """
    Aliases a local by writing its final value back into the storage when the body of
    the intercepted call has finished.

    Collections bound in read-write mode are shared with the caller, so in-place
    mutations are visible immediately; rebinding the local itself becomes visible once
    the alias is released. A local deleted by the body leaves the storage untouched.
    """

    def alias(self, frame: FrameType, name: str, storage: Storage, bound: Any) -> Alias:
        return Alias(frame=frame, name=name, storage=storage, bound=bound)

    def release(self, alias: Alias) -> bool:
        frame, alias.frame = alias.frame, None
        if frame is None:
            return False
        frame_locals = frame.f_locals
        if alias.name not in frame_locals:
            return False
        alias.storage.value = frame_locals[alias.name]
        return True
