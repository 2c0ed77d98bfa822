###########################################################
# Parameter Usage Errors
###########################################################

class ParameterUsageError(Exception):
    """
    Base class of every error raised when a parameter declaration or an intercepted
    function is used incorrectly. These errors are never transient and are not meant
    to be caught and handled at runtime.
    """
    pass

class UndecoratedFunctionError(ParameterUsageError):
    """
    Raised when a parameter is declared in a function that was never intercepted, or
    when the current call context belongs to another function.
    """
    pass

class UnknownSchemeError(ParameterUsageError):
    """
    Raised when the binding scheme of a call context is not one of the known schemes.
    """
    pass

class ParameterNameError(ParameterUsageError):
    """
    Raised when no argument slot can be found for a declared parameter.
    """
    pass

class ParameterKindError(ParameterUsageError):
    """
    Raised when a sequence-valued or mapping-valued parameter receives an argument
    of the wrong kind.
    """
    pass

###########################################################
# Declaration Errors
###########################################################

class ParameterDeclarationError(ParameterUsageError):
    """
    Raised when the declaration itself is not valid: an unknown mode, a binder result
    that is not stored into a plain local name, or a target that cannot be intercepted.
    """
    pass
