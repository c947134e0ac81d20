"""Error taxonomy for flag registration, parsing and retrieval.

Every failure raised by the core is a ``ProgramError`` subclass carrying an
``ErrorKind`` and the offending flag name(s), so a host application can
decide how to present it (print help, exit non-zero, ...). The core itself
never prints or exits.
"""

from enum import Enum
from typing import Any

__all__ = [
    "ErrorKind",
    "ProgramError",
    "RegistrationError",
    "ParseError",
    "RetrievalError",
    "DuplicateFlagError",
    "InvalidDefaultError",
    "UnknownFlagError",
    "MissingValueError",
    "InvalidValueError",
    "FlagGivenTwiceError",
    "MissingRequiredFlagError",
    "HelpRequested",
    "UnknownFlagNameError",
    "TypeMismatchError",
    "CoercionError",
]


class ErrorKind(str, Enum):
    """Kind of a ProgramError."""

    # Registration time
    DUPLICATE_FLAG = "duplicate_flag"
    INVALID_DEFAULT = "invalid_default"
    # Parse time
    UNKNOWN_FLAG = "unknown_flag"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    MISSING_REQUIRED_FLAG = "missing_required_flag"
    HELP_REQUESTED = "help_requested"
    # Retrieval time
    UNKNOWN_FLAG_NAME = "unknown_flag_name"
    TYPE_MISMATCH = "type_mismatch"


class ProgramError(Exception):
    """Base class for every error raised by cmdflags.

    Two errors are equal when they have the same class and the same fields.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class RegistrationError(ProgramError):
    """Raised while declaring flags on a ProgramBuilder."""


class ParseError(ProgramError):
    """Raised while parsing a token sequence."""


class RetrievalError(ProgramError):
    """Raised while reading a value from a ParseResult."""


class DuplicateFlagError(RegistrationError):
    """A flag with this name is already registered."""

    kind = ErrorKind.DUPLICATE_FLAG

    def __init__(self, name: str) -> None:
        super().__init__(f"Flag already exists with name {name}")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class InvalidDefaultError(RegistrationError):
    """An optional flag's default cannot be represented in its kind."""

    kind = ErrorKind.INVALID_DEFAULT

    def __init__(self, name: str, type_name: str, default: Any) -> None:
        super().__init__(f"Default {default!r} for flag {name} is not a valid {type_name}")
        self.name = name
        self.type_name = type_name
        self.default = default

    def _fields(self) -> tuple[Any, ...]:
        return (self.name, self.type_name, repr(self.default))


class UnknownFlagError(ParseError):
    """A token does not name any registered flag."""

    kind = ErrorKind.UNKNOWN_FLAG

    def __init__(self, name: str, token: str | None = None) -> None:
        super().__init__(f"No such flag exists with name {name}")
        self.name = name
        self.token = token if token is not None else name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class MissingValueError(ParseError):
    """A value flag was the last token, with nothing left to consume."""

    kind = ErrorKind.MISSING_VALUE

    def __init__(self, name: str) -> None:
        super().__init__(f"No value was given for flag {name}")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class InvalidValueError(ParseError):
    """A value token could not be coerced to the flag's kind."""

    kind = ErrorKind.INVALID_VALUE

    def __init__(self, name: str, text: str, type_name: str) -> None:
        super().__init__(f"Could not parse {text!r} given for {name} as type of {type_name}")
        self.name = name
        self.text = text
        self.type_name = type_name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name, self.text, self.type_name)


class FlagGivenTwiceError(ParseError):
    """The same flag appeared more than once in the token sequence."""

    kind = ErrorKind.DUPLICATE_FLAG

    def __init__(self, name: str) -> None:
        super().__init__(f"Flag {name} was given more than once")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class MissingRequiredFlagError(ParseError):
    """One or more required flags were not given.

    ``names`` lists every missing required flag in registration order.
    """

    kind = ErrorKind.MISSING_REQUIRED_FLAG

    def __init__(self, names: tuple[str, ...] | list[str]) -> None:
        names = tuple(names)
        super().__init__(f"Required args were not given with names {', '.join(names)}")
        self.names = names

    def _fields(self) -> tuple[Any, ...]:
        return self.names


class HelpRequested(ParseError):
    """The help flag was given; ``help_text`` holds the rendered help."""

    kind = ErrorKind.HELP_REQUESTED

    def __init__(self, help_text: str) -> None:
        super().__init__("Help flag was given")
        self.help_text = help_text

    def _fields(self) -> tuple[Any, ...]:
        return (self.help_text,)


class UnknownFlagNameError(RetrievalError, KeyError):
    """A value was requested for a name that was never registered."""

    kind = ErrorKind.UNKNOWN_FLAG_NAME

    def __init__(self, name: str) -> None:
        super().__init__(f"No flag is registered with name {name}")
        self.name = name

    def _fields(self) -> tuple[Any, ...]:
        return (self.name,)


class TypeMismatchError(RetrievalError, TypeError):
    """A value was requested as a different type than it was declared with."""

    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(f"Flag {name} holds a {actual}, not a {expected}")
        self.name = name
        self.expected = expected
        self.actual = actual

    def _fields(self) -> tuple[Any, ...]:
        return (self.name, self.expected, self.actual)


class CoercionError(ValueError):
    """Raised by the coercion layer when text or a value does not fit a kind.

    It is not attributed to a flag; callers wrap it into InvalidValueError or
    InvalidDefaultError with the flag name.
    """

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(f"Could not parse {text!r} as type of {type_name}")
        self.text = text
        self.type_name = type_name
