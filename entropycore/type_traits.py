"""Runtime checks about classes, callables and values."""

from __future__ import annotations

import types
from typing import Any

SUPER_ATTRIBUTE = "entropy_super"

_CO_VARARGS = 0x04

# (minimum positional count, maximum positional count or None for unlimited)
_Bounds = tuple[int, "int | None"]


def _as_class(obj: Any) -> type:
    return obj if isinstance(obj, type) else type(obj)


def has_base_class(cls: Any) -> bool:
    """Tell whether a class (or an instance's class) declares ``entropy_super``."""
    return hasattr(_as_class(cls), SUPER_ATTRIBUTE)


def base_class_of(cls: Any) -> type | None:
    """Return the declared ``entropy_super`` of a class or instance, or None."""
    return getattr(_as_class(cls), SUPER_ATTRIBUTE, None)


def _shift(bounds: _Bounds | None, count: int) -> _Bounds | None:
    """Drop ``count`` leading positional slots, already filled by binding."""
    if bounds is None:
        return None
    low, high = bounds
    if high is not None and high < count:
        return (1, 0)
    return (max(low - count, 0), None if high is None else high - count)


def _function_bounds(func: types.FunctionType) -> _Bounds:
    code = func.__code__
    positional = code.co_argcount
    defaults = func.__defaults__ or ()
    kw_names = code.co_varnames[positional : positional + code.co_kwonlyargcount]
    kw_defaults = func.__kwdefaults__ or {}
    if any(name not in kw_defaults for name in kw_names):
        # A required keyword-only parameter can never be met positionally.
        return (1, 0)
    high = None if code.co_flags & _CO_VARARGS else positional
    return (positional - len(defaults), high)


def _text_signature_bounds(text: str | None) -> _Bounds | None:
    if not text or not text.startswith("(") or not text.endswith(")"):
        return None
    params = [p.strip() for p in text[1:-1].split(",") if p.strip()]
    low = 0
    high: int | None = 0
    for param in params:
        if param.startswith("$") or param == "/":
            continue
        if param == "*":
            break
        if param.startswith("**"):
            continue
        if param.startswith("*"):
            high = None
            break
        if "=" in param:
            high += 1
        else:
            low += 1
            high += 1
    return (low, high)


def _bounds(func: Any) -> _Bounds | None:
    """Work out how many positional arguments ``func`` accepts, if knowable."""
    if isinstance(func, types.FunctionType):
        return _function_bounds(func)
    if isinstance(func, types.MethodType):
        return _shift(_bounds(func.__func__), 1)
    if isinstance(func, type):
        init = func.__init__
        if init is object.__init__:
            if func.__new__ is object.__new__:
                return (0, 0)
            return _shift(_bounds(func.__new__), 1)
        if isinstance(init, types.FunctionType):
            return _shift(_function_bounds(init), 1)
        return None
    if isinstance(func, (types.BuiltinFunctionType, types.BuiltinMethodType)):
        return _text_signature_bounds(getattr(func, "__text_signature__", None))
    call = getattr(type(func), "__call__", None)
    if isinstance(call, types.FunctionType):
        return _shift(_function_bounds(call), 1)
    return None


def is_invocable(func: Any, *args: Any) -> bool:
    """Tell whether ``func`` can be called with the positional ``args``."""
    if not callable(func):
        return False
    bounds = _bounds(func)
    if bounds is None:
        return True
    low, high = bounds
    count = len(args)
    return count >= low and (high is None or count <= high)


def is_class_method_invocable(obj: Any, method_name: str, *args: Any) -> bool:
    """Tell whether ``obj.method_name(*args)`` is a valid call."""
    method = getattr(obj, method_name, None)
    return method is not None and is_invocable(method, *args)


def is_null(value: Any) -> bool:
    """Tell whether ``value`` is the null value."""
    return value is None