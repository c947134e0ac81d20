"""Flag value kinds."""

from enum import Enum
from typing import Any

__all__ = ["FlagKind"]


class FlagKind(Enum):
    """Closed set of value kinds a flag can be declared with.

    Each member carries its display name (used in help text and error
    messages), the Python type of its values and, for integer kinds, the
    inclusive range of representable values.
    """

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    FLOAT = "float"
    BOOL = "bool"
    STR = "str"

    @property
    def type_name(self) -> str:
        return self.value

    @property
    def python_type(self) -> type:
        """Python type of values of this kind."""
        if self.is_integer:
            return int
        if self is FlagKind.FLOAT:
            return float
        if self is FlagKind.BOOL:
            return bool
        return str

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_BOUNDS

    @property
    def is_signed(self) -> bool:
        return self.is_integer and self.value.startswith("i")

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Inclusive (min, max) for integer kinds, None otherwise."""
        return _INTEGER_BOUNDS.get(self)

    @classmethod
    def of(cls, kind: Any) -> "FlagKind":
        """Resolve a FlagKind from a FlagKind or a builtin Python type.

        ``int`` resolves to I64. Note that ``bool`` has to be checked before
        ``int`` could ever match, since bool is a subclass of int.
        """
        if isinstance(kind, FlagKind):
            return kind
        if kind is bool:
            return cls.BOOL
        if kind is int:
            return cls.I64
        if kind is float:
            return cls.FLOAT
        if kind is str:
            return cls.STR
        raise TypeError(f"Unsupported flag kind: {kind!r}")


_INTEGER_BOUNDS: dict[FlagKind, tuple[int, int]] = {
    FlagKind.U8: (0, 2**8 - 1),
    FlagKind.U16: (0, 2**16 - 1),
    FlagKind.U32: (0, 2**32 - 1),
    FlagKind.U64: (0, 2**64 - 1),
    FlagKind.I8: (-(2**7), 2**7 - 1),
    FlagKind.I16: (-(2**15), 2**15 - 1),
    FlagKind.I32: (-(2**31), 2**31 - 1),
    FlagKind.I64: (-(2**63), 2**63 - 1),
}
