"""Token parser matching a command line against a program schema."""

from typing import Iterable

from cmdflags.core.coercion import parse_token
from cmdflags.core.config import ParserConfig
from cmdflags.core.help import generate_help_text
from cmdflags.core.schema import FlagSchemaEntry, ProgramMetadata
from cmdflags.core.store import ParseResult
from cmdflags.domain.errors import (
    CoercionError,
    FlagGivenTwiceError,
    HelpRequested,
    InvalidValueError,
    MissingRequiredFlagError,
    MissingValueError,
    UnknownFlagError,
)
from cmdflags.domain.types import TypedValue
from cmdflags.logger import get_logger

logger = get_logger("parsers")


class TokenParser:
    """
    Parser for flag tokens (``--name value`` pairs and ``--switch`` tokens).

    Scanning is fail-fast: the first unknown, repeated, valueless or
    malformed flag raises immediately. Completeness is checked only after
    the whole sequence was scanned, and reports every missing required flag
    at once.
    """

    def __init__(self, metadata: ProgramMetadata, config: ParserConfig | None = None):
        self.metadata = metadata
        self.config = config or ParserConfig()
        self._entries: dict[str, FlagSchemaEntry] = {entry.name: entry for entry in metadata.entries}

    def parse(self, tokens: Iterable[str]) -> ParseResult:
        """
        Parse a token sequence into a ParseResult.

        Args:
            tokens: The tokenized command line, without the program name

        Returns:
            ParseResult with one value per registered flag

        Raises:
            HelpRequested: If the help flag was given
            UnknownFlagError: If a token does not name a registered flag
            MissingValueError: If a value flag is the last token
            FlagGivenTwiceError: If a flag is given more than once
            InvalidValueError: If a value cannot be coerced to the flag's kind
            MissingRequiredFlagError: If required flags were not given
            TypeError: If ``tokens`` is a single string
        """
        if isinstance(tokens, (str, bytes)):
            raise TypeError("tokens must be a sequence of strings, not a single string")
        tokens = tuple(tokens)
        values = self._scan(tokens)

        missing = [entry.name for entry in self.metadata.entries if entry.required and entry.name not in values]
        if missing:
            logger.debug(f"Missing required flags: {missing}")
            raise MissingRequiredFlagError(missing)

        for entry in self.metadata.entries:
            if entry.name not in values:
                values[entry.name] = entry.default
                logger.debug(f"Applied default value for '{entry.name}': {entry.formatted_default()}")

        # Registration order, independent of command-line order
        ordered = {entry.name: values[entry.name] for entry in self.metadata.entries}
        logger.debug(f"Parsed {len(tokens)} token(s) into {len(ordered)} flag value(s)")
        return ParseResult(ordered)

    def _scan(self, tokens: tuple[str, ...]) -> dict[str, TypedValue]:
        values: dict[str, TypedValue] = {}
        i = 0
        while i < len(tokens):
            token = tokens[i]
            entry = self._match(token)

            if entry.name in values:
                raise FlagGivenTwiceError(entry.name)

            if entry.takes_value:
                if i + 1 >= len(tokens):
                    raise MissingValueError(entry.name)
                text = tokens[i + 1]
                try:
                    value = parse_token(entry.kind, text)
                except CoercionError as e:
                    raise InvalidValueError(entry.name, text, entry.kind.type_name) from e
                i += 2
            else:
                value = True
                i += 1

            values[entry.name] = TypedValue(entry.kind, value)
            logger.debug(f"Parsed argument '{entry.name}' = {value!r}")

        return values

    def _match(self, token: str) -> FlagSchemaEntry:
        """Find the entry a token names, or raise."""
        name = self.config.strip_prefix(token)
        if name is None:
            raise UnknownFlagError(token, token)

        entry = self._entries.get(name)
        if entry is not None:
            return entry

        if self.config.help_flag is not None and name == self.config.help_flag:
            raise HelpRequested(generate_help_text(self.metadata, self.config.prefix))

        raise UnknownFlagError(name, token)
