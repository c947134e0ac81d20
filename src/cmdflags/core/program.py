"""Finalized, parse-ready program."""

from typing import Iterable

from cmdflags.core.config import ParserConfig
from cmdflags.core.help import generate_help_text
from cmdflags.core.parsers import TokenParser
from cmdflags.core.schema import ProgramMetadata
from cmdflags.core.store import ParseResult

__all__ = ["Program"]


class Program:
    """A program whose flags are fixed.

    Created by ``ProgramBuilder.build``. It has no way to register more
    flags; ``parse`` may be called any number of times, from any thread,
    and each call returns an independent ParseResult.
    """

    __slots__ = ("_metadata", "_config", "_parser")

    def __init__(self, metadata: ProgramMetadata, config: ParserConfig | None = None) -> None:
        self._metadata = metadata
        self._config = config or ParserConfig()
        self._parser = TokenParser(metadata, self._config)

    @property
    def metadata(self) -> ProgramMetadata:
        return self._metadata

    @property
    def config(self) -> ParserConfig:
        return self._config

    @property
    def description(self) -> str:
        return self._metadata.description

    def help_text(self) -> str:
        """Help text for this program."""
        return generate_help_text(self._metadata, self._config.prefix)

    def parse(self, tokens: Iterable[str]) -> ParseResult:
        """Parse a tokenized command line. See ``TokenParser.parse``."""
        return self._parser.parse(tokens)

    def __repr__(self) -> str:
        return f"Program(description={self.description!r}, flags={self._metadata.names()!r})"
