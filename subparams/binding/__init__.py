"""
The Binding module declares locals of an intercepted function as parameters and binds
them from the arguments of the current call.
"""

from subparams.binding._binder import Binding, Parameter, param, scalar, sequence, mapping

__all__ = [
    "Binding",
    "Parameter",
    "param",
    "scalar",
    "sequence",
    "mapping",
]
