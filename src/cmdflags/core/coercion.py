"""Value coercion between command-line text and typed flag values."""

import re
from typing import Any

from cmdflags.domain.errors import CoercionError
from cmdflags.domain.types import FlagKind, FlagScalar, TypedValue

__all__ = ["parse_token", "format_value", "validate_default"]

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

TRUE_TEXT = "true"
FALSE_TEXT = "false"


def parse_token(kind: FlagKind, text: str) -> FlagScalar:
    """
    Convert one command-line token into a value of ``kind``.

    Integers are read in radix 10 with an optional sign (``-`` only for
    signed kinds) and must fit the kind's width. Booleans accept exactly
    ``true`` or ``false``. Strings accept anything.

    Args:
        kind: Kind to convert to
        text: Raw token text

    Returns:
        The converted value

    Raises:
        CoercionError: If the text is not a valid value of the kind
    """
    if kind.is_integer:
        pattern = _SIGNED_INT if kind.is_signed else _UNSIGNED_INT
        if not pattern.fullmatch(text):
            raise CoercionError(text, kind.type_name)
        value = int(text)
        low, high = kind.bounds
        if not low <= value <= high:
            raise CoercionError(text, kind.type_name)
        return value
    elif kind is FlagKind.FLOAT:
        # float() tolerates surrounding whitespace and digit underscores.
        # It also reads non-ASCII digits; only ASCII text is accepted here.
        if not text.isascii() or text != text.strip() or "_" in text:
            raise CoercionError(text, kind.type_name)
        try:
            return float(text)
        except ValueError as e:
            raise CoercionError(text, kind.type_name) from e
    elif kind is FlagKind.BOOL:
        if text == TRUE_TEXT:
            return True
        if text == FALSE_TEXT:
            return False
        raise CoercionError(text, kind.type_name)
    elif kind is FlagKind.STR:
        return text
    raise TypeError(f"Unsupported flag kind: {kind!r}")


def format_value(kind: FlagKind, value: Any) -> str:
    """
    Render a value of ``kind`` as command-line text.

    For canonical integer and boolean text this is the inverse of
    ``parse_token``.
    """
    if kind.is_integer:
        return str(value)
    elif kind is FlagKind.FLOAT:
        return repr(float(value))
    elif kind is FlagKind.BOOL:
        return TRUE_TEXT if value else FALSE_TEXT
    elif kind is FlagKind.STR:
        return str(value)
    raise TypeError(f"Unsupported flag kind: {kind!r}")


def validate_default(kind: FlagKind, value: Any) -> TypedValue:
    """
    Check that a Python value can be stored as ``kind``.

    Ints are widened to float for FLOAT. A bool is never accepted for a
    numeric kind even though it is an int subclass.

    Raises:
        CoercionError: If the value is of the wrong type or out of range
    """
    if kind.is_integer:
        if isinstance(value, bool) or not isinstance(value, int):
            raise CoercionError(repr(value), kind.type_name)
        low, high = kind.bounds
        if not low <= value <= high:
            raise CoercionError(repr(value), kind.type_name)
        return TypedValue(kind, value)
    elif kind is FlagKind.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise CoercionError(repr(value), kind.type_name)
        try:
            return TypedValue(kind, float(value))
        except OverflowError as e:
            raise CoercionError(repr(value), kind.type_name) from e
    elif kind is FlagKind.BOOL:
        if not isinstance(value, bool):
            raise CoercionError(repr(value), kind.type_name)
        return TypedValue(kind, value)
    elif kind is FlagKind.STR:
        if not isinstance(value, str):
            raise CoercionError(repr(value), kind.type_name)
        return TypedValue(kind, value)
    raise TypeError(f"Unsupported flag kind: {kind!r}")
