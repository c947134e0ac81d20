"""
Typed command-line flag declaration and parsing.

Declare flags on a ProgramBuilder, build a Program, parse an already
tokenized command line, then read typed values from the ParseResult:

    from cmdflags import FlagKind, ProgramBuilder

    program = (
        ProgramBuilder("An HTTP server")
        .with_required_flag("port", FlagKind.U16, "Port number")
        .with_optional_flag("use-tls", bool, False, "TLS PLS?")
        .build()
    )
    result = program.parse(["--port", "8080"])
    port = result.get("port", FlagKind.U16)
    use_tls = result.get_bool("use-tls")

Failures are raised as ProgramError subclasses; printing help or exiting is
left to the caller.
"""

from cmdflags.core import (
    FlagSchemaEntry,
    ParseResult,
    ParserConfig,
    Program,
    ProgramBuilder,
    ProgramMetadata,
    format_value,
    generate_help_text,
    parse_token,
)
from cmdflags.domain.errors import (
    CoercionError,
    DuplicateFlagError,
    ErrorKind,
    FlagGivenTwiceError,
    HelpRequested,
    InvalidDefaultError,
    InvalidValueError,
    MissingRequiredFlagError,
    MissingValueError,
    ParseError,
    ProgramError,
    RegistrationError,
    RetrievalError,
    TypeMismatchError,
    UnknownFlagError,
    UnknownFlagNameError,
)
from cmdflags.domain.types import FlagKind, TypedValue
from cmdflags.logger import disable_logging
from cmdflags.version import __version__

# Library logging stays off until a host calls cmdflags.logger.setup_logger
disable_logging()

__all__ = [
    "__version__",
    "FlagKind",
    "TypedValue",
    "ProgramBuilder",
    "Program",
    "ProgramMetadata",
    "FlagSchemaEntry",
    "ParserConfig",
    "ParseResult",
    "generate_help_text",
    "parse_token",
    "format_value",
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
