"""Shared domain types."""

from cmdflags.domain.types.kinds import FlagKind
from cmdflags.domain.types.values import FlagScalar, TypedValue

__all__ = [
    "FlagKind",
    "FlagScalar",
    "TypedValue",
]
