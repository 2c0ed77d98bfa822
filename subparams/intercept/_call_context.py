import uuid
from dataclasses import dataclass, field
from types import CodeType, FrameType
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from subparams.types._common import Scheme
from subparams.capabilities import Alias
from subparams.tracing import ContextStack


def index_named_arguments(args: Sequence[Any]) -> Dict[str, int]:
    """
    Treat `args` as alternating name/value pairs and map every name to the index of the
    value that follows it.

    A trailing name without a value is ignored, a repeated name maps to its last value,
    and names that are not strings are not indexed.

    >>> index_named_arguments(["foo", "fv", "baz", "bv"])
    {'foo': 1, 'baz': 3}
    """
    order: Dict[str, int] = {}
    for i in range(0, len(args) - 1, 2):
        key = args[i]
        if isinstance(key, str):
            order[key] = i + 1
    return order


@dataclass
class CallContext:
    """
    The record of one active invocation of an intercepted function.

    Created and pushed by the interceptor immediately before the body runs, and popped
    when the body finishes. The binder reads the top context to resolve the argument
    slot of each declared parameter.
    """
    scheme: Scheme
    target: Callable
    target_code: CodeType
    args: List[Any]
    name_to_slot: Dict[str, int] = field(default_factory=dict)
    next_positional_slot: int = 0
    aliases: List[Alias] = field(default_factory=list)
    call_id: str = field(default_factory=lambda: f"call_{uuid.uuid4().hex[:16]}")
    entry_frame: Optional[FrameType] = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        target: Callable,
        target_code: CodeType,
        scheme: Scheme,
        args: Sequence[Any],
        kwargs: Optional[Mapping[str, Any]] = None,
        entry_frame: Optional[FrameType] = None,
    ) -> "CallContext":
        """
        Build the context of a call from its actual arguments.

        Under the named scheme, keyword arguments are appended to the positional ones as
        name/value pairs, and the name-to-slot index is built eagerly.
        """
        values = list(args)
        if scheme is Scheme.NAMED:
            for key, value in (kwargs or {}).items():
                values.extend((key, value))
            name_to_slot = index_named_arguments(values)
        else:
            name_to_slot = {}
        return cls(
            scheme=scheme,
            target=target,
            target_code=target_code,
            args=values,
            name_to_slot=name_to_slot,
            entry_frame=entry_frame,
        )

    @property
    def function_name(self) -> str:
        return getattr(self.target, "__qualname__", repr(self.target))

    def owns(self, frame: FrameType) -> bool:
        """
        Whether `frame` runs the body of this call.

        The frame must execute the target code and be reached from `entry_frame`, the
        interceptor frame that created the context, without passing through another frame
        of the target code. Closures sharing the code of the target, and direct calls of
        the unwrapped function from the body, are therefore not owned. A context built
        without an entry frame only checks the code.
        """
        if frame.f_code is not self.target_code:
            return False
        if self.entry_frame is None:
            return True
        caller = frame.f_back
        while caller is not None and caller is not self.entry_frame:
            if caller.f_code is self.target_code:
                return False
            caller = caller.f_back
        return caller is not None


call_stack: ContextStack[CallContext] = ContextStack("subparams_call_stack")
"""The stack of active call contexts of the current thread or task."""
