import dis
from bisect import bisect_right
from functools import lru_cache
from types import CodeType, FrameType
from typing import Optional, Protocol, Tuple, runtime_checkable

from subparams.types._error import ParameterDeclarationError

_STORE_OPNAMES = frozenset({
    "STORE_FAST",
    "STORE_NAME",
    "STORE_DEREF",
    "STORE_GLOBAL",
})


@runtime_checkable
class NameIntrospector(Protocol):
    """
    Maps a binder call running inside a body frame to the name of the local it declares.
    """

    def resolve(self, frame: FrameType) -> str:
        ...


def _store_name(instr: Optional[dis.Instruction]) -> Optional[str]:
    if instr is None:
        return None
    if instr.opname in _STORE_OPNAMES:
        return instr.argval
    if instr.opname.startswith("STORE_FAST_") and isinstance(instr.argval, tuple):
        # Superinstructions such as STORE_FAST_LOAD_FAST store into the first name.
        return instr.argval[0]
    return None


@lru_cache(maxsize=512)
def _instruction_table(code: CodeType) -> Tuple[Tuple[int, ...], Tuple[Optional[str], ...]]:
    """
    Return the sorted offsets of the instructions of `code`, and for each of them the plain
    name stored by the instruction that follows it, or None.
    """
    instructions = list(dis.get_instructions(code))
    offsets = tuple(instr.offset for instr in instructions)
    targets = tuple(_store_name(following) for following in instructions[1:] + [None])
    return offsets, targets


class BytecodeNameIntrospector:
    """
    Resolves the declared name from the store instruction that follows the instruction
    currently executing in the body frame.

    `f_lasti` may point into the inline cache entries of the executing call, so the
    executing instruction is the one with the greatest offset not past `f_lasti`.

    The binder must therefore be the whole right-hand side of a plain assignment:

    >>> foo = param()          # resolves to "foo"
    >>> foo: int = scalar.rw   # resolves to "foo"
    >>> self.foo = param()     # not a plain name, rejected
    """

    def resolve(self, frame: FrameType) -> str:
        offsets, targets = _instruction_table(frame.f_code)
        index = bisect_right(offsets, frame.f_lasti) - 1
        name = targets[index] if index >= 0 else None
        if name is None:
            raise ParameterDeclarationError(
                f"can't resolve the name of the parameter declared at line {frame.f_lineno} "
                f"of `{frame.f_code.co_name}`: the binder must be assigned to a plain local name, "
                "or the name must be given explicitly"
            )
        return name
