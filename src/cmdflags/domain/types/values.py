"""Typed flag values."""

from dataclasses import dataclass
from typing import Union

from cmdflags.domain.types.kinds import FlagKind

__all__ = ["FlagScalar", "TypedValue"]

FlagScalar = Union[int, float, bool, str]


@dataclass(frozen=True)
class TypedValue:
    """A flag value tagged with the kind it was parsed or declared as."""

    kind: FlagKind
    value: FlagScalar

    def matches(self, expected: FlagKind | type) -> bool:
        """Check this value against a requested kind.

        A FlagKind must match exactly. A Python type matches when it is the
        kind's Python type, so ``bool`` never matches an integer kind.
        """
        if isinstance(expected, FlagKind):
            return expected is self.kind
        return expected is self.kind.python_type
