from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


class ContextStack(Generic[T]):
    """
    Thin wrapper around ContextVar-based stacks.

    Each thread and each asyncio task sees its own stack, so "top of stack" always
    refers to the innermost item pushed on the current flow of control.
    """

    def __init__(self, name: str):
        self._var: ContextVar[Tuple[T, ...]] = ContextVar(name, default=())

    def push(self, item: T) -> None:
        stack = self._var.get()
        self._var.set((*stack, item))

    def pop(self) -> Optional[T]:
        stack = self._var.get()
        if not stack:
            return None
        item = stack[-1]
        self._var.set(stack[:-1])
        return item

    def peek(self) -> Optional[T]:
        stack = self._var.get()
        return stack[-1] if stack else None

    def depth(self) -> int:
        return len(self._var.get())

    def reset(self) -> None:
        self._var.set(())

    @contextmanager
    def scoped(self, item: T) -> Iterator[T]:
        """
        Push `item` for the duration of the `with` block. The item is popped on every exit
        path, including exceptions raised inside the block.
        """
        self.push(item)
        try:
            yield item
        finally:
            self.pop()
