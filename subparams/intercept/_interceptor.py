import inspect
import sys
import time
from functools import wraps
from types import CodeType
from typing import Any, Callable, Optional, Union

from subparams.config import GlobalSetting
from subparams.constants import DEFAULT_INTERCEPT_SOURCE_PREFIX
from subparams.intercept._call_context import CallContext, call_stack
from subparams.logging import get_intercept_logger
from subparams.types._common import Scheme, SchemeLike
from subparams.types._error import ParameterDeclarationError, UnknownSchemeError

_logger = get_intercept_logger(source=DEFAULT_INTERCEPT_SOURCE_PREFIX)


def coerce_scheme(scheme: SchemeLike) -> Scheme:
    try:
        return Scheme(scheme)
    except ValueError:
        raise UnknownSchemeError(
            f"don't know what kind of processing to do for the scheme {scheme!r}! "
            f"Supported schemes: {[s.value for s in Scheme]}"
        ) from None


def _target_code_of(func: Callable) -> CodeType:
    code = getattr(inspect.unwrap(func), "__code__", None)
    if not isinstance(code, CodeType):
        raise ParameterDeclarationError(
            f"`{func!r}` can't be intercepted: only functions and methods defined in Python are supported"
        )
    return code


def _events_enabled() -> bool:
    return GlobalSetting.read().emit_events and _logger.is_enabled()


def _enter(context: CallContext) -> None:
    call_stack.push(context)
    if _events_enabled():
        _logger.log_call_enter(
            call_id=context.call_id,
            function_name=context.function_name,
            scheme=context.scheme.value,
            arg_count=len(context.args),
            depth=call_stack.depth(),
        )


def _exit(context: CallContext, start_time: float, error: Optional[BaseException] = None) -> None:
    if not _events_enabled():
        return
    if error is None:
        _logger.log_call_exit(
            call_id=context.call_id,
            function_name=context.function_name,
            scheme=context.scheme.value,
            execution_time=time.time() - start_time,
            depth=call_stack.depth(),
        )
    else:
        _logger.log_call_error(
            call_id=context.call_id,
            function_name=context.function_name,
            scheme=context.scheme.value,
            error_type=type(error).__name__,
            error_message=str(error),
            execution_time=time.time() - start_time,
            depth=call_stack.depth(),
        )


def _leave(context: CallContext) -> None:
    """
    Release the read-write aliases of the context, then pop it. The pop happens even if
    an aliaser fails.
    """
    try:
        aliaser = GlobalSetting.read().aliaser
        emit = _events_enabled()
        while context.aliases:
            alias = context.aliases.pop(0)
            written_back = aliaser.release(alias)
            if emit:
                _logger.log_alias_released(
                    call_id=context.call_id,
                    parameter=alias.name,
                    written_back=written_back,
                )
    finally:
        context.entry_frame = None
        call_stack.pop()


def _intercept(func: Callable, scheme: Scheme) -> Callable:
    if inspect.isgeneratorfunction(func) or inspect.isasyncgenfunction(func):
        raise ParameterDeclarationError(
            f"`{func.__qualname__}` is a generator function, its body runs after the call "
            "has returned and can't receive parameters"
        )
    target_code = _target_code_of(func)

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = CallContext.create(func, target_code, scheme, args, kwargs, entry_frame=sys._getframe())
            _enter(context)
            start_time = time.time()
            try:
                result = await func(*args, **kwargs)
                _exit(context, start_time)
                return result
            except BaseException as e:
                _exit(context, start_time, e)
                raise
            finally:
                _leave(context)

        async_wrapper.__param_scheme__ = scheme
        return async_wrapper

    @wraps(func)
    def sync_wrapper(*args, **kwargs):
        context = CallContext.create(func, target_code, scheme, args, kwargs, entry_frame=sys._getframe())
        _enter(context)
        start_time = time.time()
        try:
            result = func(*args, **kwargs)
            _exit(context, start_time)
            return result
        except BaseException as e:
            _exit(context, start_time, e)
            raise
        finally:
            _leave(context)

    sync_wrapper.__param_scheme__ = scheme
    return sync_wrapper


def want_params(
    func: Optional[Union[Callable, SchemeLike]] = None,
    scheme: Optional[SchemeLike] = None,
) -> Callable:
    """
    A decorator for marking a function whose body declares bound parameters.

    Every call of the decorated function pushes a `CallContext` built from the actual
    arguments before the body runs, and pops it after the body finishes, whether it
    returns or raises. The arguments, the return value and the exceptions of the
    function pass through unchanged.

    Parameters
    ----------
    func : Optional[Union[Callable, SchemeLike]]
        The function to decorate when used bare (`@want_params`), or the scheme when
        the scheme is given positionally (`@want_params("named")`).
    scheme : Optional[SchemeLike]
        The binding scheme, `positional` or `named`. Defaults to
        `GlobalSetting.default_scheme`.

    Raises
    ------
    UnknownSchemeError
        If the scheme is not one of the supported schemes.
    ParameterDeclarationError
        If the decorated object is a generator function or is not defined in Python.
    """
    if isinstance(func, (str, Scheme)):
        if scheme is not None:
            raise ParameterDeclarationError("the scheme was given twice")
        func, scheme = None, func

    resolved = coerce_scheme(scheme if scheme is not None else GlobalSetting.read().default_scheme)

    if func is None:
        def decorator(f: Callable) -> Callable:
            return _intercept(f, resolved)
        return decorator
    return _intercept(func, resolved)


def is_intercepted(func: Any) -> bool:
    """
    Whether `func` was produced by `want_params`.
    """
    return isinstance(getattr(func, "__param_scheme__", None), Scheme)
