"""Strongly typed wrappers around plain values."""

from __future__ import annotations

from typing import Any

_MISSING = object()
_FOREIGN = object()


class StrongAlias:
    """A value wrapped in a distinct type.

    Subclasses made by :func:`define_strong_alias` carry a ``value_type``
    that values are converted to and that supplies the default value.
    Aliases compare with aliases of the same type and with raw values.
    """

    __slots__ = ("value",)
    value_type: Any = None

    def __init__(self, value: Any = _MISSING) -> None:
        vtype = type(self).value_type
        if isinstance(value, StrongAlias):
            if type(value) is not type(self):
                raise TypeError(
                    f"cannot build {type(self).__name__} from {type(value).__name__}"
                )
            value = value.value
        if value is _MISSING:
            value = vtype() if vtype is not None else None
        elif vtype is not None and not isinstance(value, vtype):
            value = vtype(value)
        self.value = value

    def _operand(self, other: Any) -> Any:
        if isinstance(other, StrongAlias):
            return other.value if type(other) is type(self) else _FOREIGN
        return other

    def __eq__(self, other: object) -> bool:
        operand = self._operand(other)
        if operand is _FOREIGN:
            return NotImplemented
        return self.value == operand

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __lt__(self, other: Any) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is _FOREIGN else self.value < operand

    def __le__(self, other: Any) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is _FOREIGN else self.value <= operand

    def __gt__(self, other: Any) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is _FOREIGN else self.value > operand

    def __ge__(self, other: Any) -> bool:
        operand = self._operand(other)
        return NotImplemented if operand is _FOREIGN else self.value >= operand

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


def define_strong_alias(name: str, value_type: type) -> type[StrongAlias]:
    """Create a new :class:`StrongAlias` subclass named ``name`` over ``value_type``."""
    return type(name, (StrongAlias,), {"__slots__": (), "value_type": value_type})


def underlying_type(alias: Any) -> Any:
    """Return the wrapped type of an alias class or instance; other types unchanged."""
    if isinstance(alias, type) and issubclass(alias, StrongAlias):
        return alias.value_type
    if isinstance(alias, StrongAlias):
        return type(alias).value_type
    return alias