"""
Capabilities consumed by the parameter binder: resolving the name of a declared local,
and aliasing a local to the storage of the caller's argument.
"""

from subparams.capabilities._introspection import NameIntrospector, BytecodeNameIntrospector
from subparams.capabilities._aliasing import (
    Storage,
    ArgSlot,
    Alias,
    LexicalAliaser,
    FrameLocalsAliaser,
)

__all__ = [
    "NameIntrospector",
    "BytecodeNameIntrospector",
    "Storage",
    "ArgSlot",
    "Alias",
    "LexicalAliaser",
    "FrameLocalsAliaser",
]
