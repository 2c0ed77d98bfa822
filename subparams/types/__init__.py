"""
Common types and errors shared by the interceptor and the parameter binder.
"""

from subparams.types._common import Scheme, Mode, Kind, Ref, SchemeLike, ModeLike
from subparams.types._error import *

__all__ = [
    "Scheme",
    "Mode",
    "Kind",
    "Ref",
    "SchemeLike",
    "ModeLike",
    "ParameterUsageError",
    "UndecoratedFunctionError",
    "UnknownSchemeError",
    "ParameterNameError",
    "ParameterKindError",
    "ParameterDeclarationError",
]
