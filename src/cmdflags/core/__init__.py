"""Core flag engine: coercion, schema, builder, parser and value store."""

from cmdflags.core.builder import ProgramBuilder
from cmdflags.core.coercion import format_value, parse_token, validate_default
from cmdflags.core.config import ParserConfig
from cmdflags.core.help import generate_help_text
from cmdflags.core.program import Program
from cmdflags.core.schema import FlagSchemaEntry, ProgramMetadata
from cmdflags.core.store import ParseResult

__all__ = [
    "ProgramBuilder",
    "Program",
    "ParserConfig",
    "FlagSchemaEntry",
    "ProgramMetadata",
    "ParseResult",
    "generate_help_text",
    "parse_token",
    "format_value",
    "validate_default",
]
