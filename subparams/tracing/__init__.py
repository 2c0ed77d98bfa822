"""
The Tracing module keeps track of the nesting of active intercepted invocations.
"""

from subparams.tracing._context_stack import ContextStack

__all__ = [
    "ContextStack",
]
