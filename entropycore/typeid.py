"""Type names and hashed type identifiers."""

from __future__ import annotations

import collections.abc
import types
import typing
from typing import Any

from entropycore.hashing import string_hash
from entropycore.strong_alias import StrongAlias

_NONE_TYPE = type(None)


class TypeId(StrongAlias):
    """Identifier of a type: the 32-bit hash of its name."""

    __slots__ = ()
    value_type = int


INVALID_TYPE_ID = TypeId(0)


def make_type_name_from_raw_name(raw_name: str) -> str:
    """Normalise a raw type name: tight commas and no inline ``__2`` namespace."""
    return raw_name.replace(", ", ",").replace("::__2::", "::")


def make_type_name_no_template_params(raw_name: str) -> str:
    """Normalise a raw type name and drop everything from its first ``<``."""
    name = make_type_name_from_raw_name(raw_name)
    head, _, _ = name.partition("<")
    return head


def make_type_id_from_type_name(type_name: str) -> TypeId:
    """Return the :class:`TypeId` for a type name."""
    return TypeId(string_hash(type_name))


def _class_name(cls: type) -> str:
    if cls is _NONE_TYPE:
        return "None"
    if cls.__module__ == "builtins":
        raw = cls.__qualname__
    else:
        raw = f"{cls.__module__}.{cls.__qualname__}"
    return make_type_name_from_raw_name(raw)


def _origin_name(origin: Any) -> str:
    if origin is typing.Union or origin is types.UnionType:
        return "Union"
    if isinstance(origin, type):
        return _class_name(origin)
    name = getattr(origin, "_name", None) or getattr(origin, "__name__", None)
    return name or repr(origin)


def _join(args: typing.Iterable[Any]) -> str:
    return ", ".join(make_type_name(arg) for arg in args)


def make_type_name(tp: Any) -> str:
    """Build a readable name for a class, generic alias, callable type or raw name.

    Generic parameters are written between angle brackets and separated by
    ``", "``; callable types read ``"Ret (Arg1, Arg2)"``.
    """
    if isinstance(tp, str):
        return make_type_name_from_raw_name(tp)
    if tp is None or tp is _NONE_TYPE:
        return "None"
    if tp is Ellipsis:
        return "..."

    origin = typing.get_origin(tp)
    if origin is not None:
        args = typing.get_args(tp)
        if origin is collections.abc.Callable:
            params, result = args if args else (Ellipsis, Any)
            rendered = "..." if params is Ellipsis else _join(params)
            return f"{make_type_name(result)} ({rendered})"
        if origin is typing.Literal:
            return f"Literal<{', '.join(repr(arg) for arg in args)}>"
        if origin is typing.Annotated:
            return make_type_name(args[0])
        return f"{_origin_name(origin)}<{_join(args)}>"

    if isinstance(tp, type):
        return _class_name(tp)

    name = getattr(tp, "__name__", None) or getattr(tp, "_name", None)
    if isinstance(name, str) and name:
        return name
    raise TypeError(f"not a type: {tp!r}")


_NAME_CACHE: dict[Any, str] = {}
_ID_CACHE: dict[Any, TypeId] = {}


def type_name_of(tp: Any) -> str:
    """Return the name of ``tp``, computed once per hashable type."""
    try:
        cached = _NAME_CACHE.get(tp)
    except TypeError:
        return make_type_name(tp)
    if cached is None:
        cached = make_type_name(tp)
        _NAME_CACHE[tp] = cached
    return cached


def type_id_of(tp: Any) -> TypeId:
    """Return the :class:`TypeId` of ``tp``, computed once per hashable type."""
    try:
        cached = _ID_CACHE.get(tp)
    except TypeError:
        return make_type_id_from_type_name(make_type_name(tp))
    if cached is None:
        cached = make_type_id_from_type_name(type_name_of(tp))
        _ID_CACHE[tp] = cached
    return cached