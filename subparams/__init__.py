"""
Enhanced parameter handling: mark a function with `want_params`, then declare which
locals of its body receive the arguments of the current call, positionally or by name,
as a copy or as a read-write alias of the caller's storage.
"""

from subparams.types import *
from subparams.intercept import want_params, is_intercepted, CallContext, call_stack
from subparams.binding import param, Parameter, scalar, sequence, mapping
from subparams.config import GlobalSetting

__version__ = "0.1.0"

__all__ = [
    "want_params",
    "is_intercepted",
    "CallContext",
    "call_stack",
    "param",
    "Parameter",
    "scalar",
    "sequence",
    "mapping",
    "GlobalSetting",
    "Scheme",
    "Mode",
    "Kind",
    "Ref",
    "ParameterUsageError",
    "UndecoratedFunctionError",
    "UnknownSchemeError",
    "ParameterNameError",
    "ParameterKindError",
    "ParameterDeclarationError",
]
