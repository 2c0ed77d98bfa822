"""
The Intercept module wraps functions so that every call records its arguments in a
call context that the parameter binder reads.
"""

from subparams.intercept._call_context import CallContext, call_stack, index_named_arguments
from subparams.intercept._interceptor import want_params, is_intercepted, coerce_scheme

__all__ = [
    "CallContext",
    "call_stack",
    "index_named_arguments",
    "want_params",
    "is_intercepted",
    "coerce_scheme",
]
