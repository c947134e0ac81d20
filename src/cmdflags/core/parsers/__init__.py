"""Token parsing package."""

from cmdflags.core.parsers.tokens import TokenParser

__all__ = [
    "TokenParser",
]
