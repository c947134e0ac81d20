"""Typed value store returned by a successful parse."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ItemsView, Iterator, KeysView

from cmdflags.domain.errors import TypeMismatchError, UnknownFlagNameError
from cmdflags.domain.types import FlagKind, FlagScalar, TypedValue

__all__ = ["ParseResult"]


def _expected_name(expected: FlagKind | type) -> str:
    if isinstance(expected, FlagKind):
        return expected.type_name
    return getattr(expected, "__name__", repr(expected))


class ParseResult:
    """Immutable store from flag name to parsed value.

    Holds exactly one value per registered flag. Item access
    (``result["port"]``) returns the raw value; ``get`` additionally checks
    the value against the requested kind or type. Not a ``Mapping``: its
    ``get`` takes an expected kind instead of a fallback default.

    Example:
        >>> result = program.parse(["--port", "8080"])
        >>> result.get("port", FlagKind.U16)
        8080
        >>> result.get_bool("use-tls")
        False
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, TypedValue]) -> None:
        self._values = MappingProxyType(dict(values))

    def typed(self, name: str) -> TypedValue:
        """Get the value of ``name`` together with its kind."""
        try:
            return self._values[name]
        except KeyError:
            raise UnknownFlagNameError(name) from None

    def kind_of(self, name: str) -> FlagKind:
        return self.typed(name).kind

    def get(self, name: str, expected: FlagKind | type) -> Any:
        """
        Get the value of ``name``, checked against ``expected``.

        Args:
            name: Registered flag name
            expected: A FlagKind (must match exactly) or one of int, float,
                bool, str (must be the kind's Python type)

        Returns:
            The stored value

        Raises:
            UnknownFlagNameError: If no flag is registered under ``name``
            TypeMismatchError: If the stored value is of another kind
        """
        typed = self.typed(name)
        if not typed.matches(expected):
            raise TypeMismatchError(name, _expected_name(expected), typed.kind.type_name)
        return typed.value

    def get_int(self, name: str) -> int:
        return self.get(name, int)

    def get_float(self, name: str) -> float:
        return self.get(name, float)

    def get_bool(self, name: str) -> bool:
        return self.get(name, bool)

    def get_str(self, name: str) -> str:
        return self.get(name, str)

    def to_dict(self) -> dict[str, FlagScalar]:
        """Plain dict of flag name to value."""
        return {name: typed.value for name, typed in self._values.items()}

    def keys(self) -> KeysView[str]:
        return self._values.keys()

    def items(self) -> ItemsView[str, FlagScalar]:
        return self.to_dict().items()

    def __getitem__(self, name: str) -> FlagScalar:
        return self.typed(name).value

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ParseResult({self.to_dict()!r})"
