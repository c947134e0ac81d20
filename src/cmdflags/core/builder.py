"""Program builder for declaring flags."""

from typing import Any

from cmdflags.core.coercion import validate_default
from cmdflags.core.config import ParserConfig
from cmdflags.core.program import Program
from cmdflags.core.schema import FlagSchemaEntry, ProgramMetadata
from cmdflags.domain.errors import CoercionError, DuplicateFlagError, InvalidDefaultError
from cmdflags.domain.types import FlagKind
from cmdflags.logger import get_logger

logger = get_logger("builder")

__all__ = ["ProgramBuilder"]


class ProgramBuilder:
    """
    Accumulates flag declarations and produces a Program.

    Every registration is validated immediately and returns the builder, so
    declarations chain:

        program = (
            ProgramBuilder("An HTTP server")
            .with_required_flag("port", FlagKind.U16, "Port number")
            .with_optional_flag("use-tls", bool, False, "TLS PLS?")
            .build()
        )
    """

    def __init__(self, description: str = "", *, config: ParserConfig | None = None) -> None:
        self.description = description
        self.config = config or ParserConfig()
        self._entries: list[FlagSchemaEntry] = []

    def with_description(self, description: str) -> "ProgramBuilder":
        self.description = description
        return self

    def with_required_flag(
        self,
        name: str,
        kind: FlagKind | type,
        description: str = "",
    ) -> "ProgramBuilder":
        """
        Register a flag that must be given on the command line.

        Args:
            name: Flag name, without prefix
            kind: FlagKind or one of int, float, bool, str
            description: Help text for the flag

        Raises:
            DuplicateFlagError: If a flag named ``name`` is already registered
        """
        kind = FlagKind.of(kind)
        self._check_name(name)
        self._add(FlagSchemaEntry(name=name, kind=kind, required=True, description=description))
        return self

    def with_optional_flag(
        self,
        name: str,
        kind: FlagKind | type,
        default: Any,
        description: str = "",
        *,
        switch: bool = False,
    ) -> "ProgramBuilder":
        """
        Register a flag that falls back to ``default`` when not given.

        Args:
            name: Flag name, without prefix
            kind: FlagKind or one of int, float, bool, str
            default: Value used when the flag is absent
            description: Help text for the flag
            switch: For bool flags, take no value token; presence means True

        Raises:
            DuplicateFlagError: If a flag named ``name`` is already registered
            InvalidDefaultError: If ``default`` cannot be represented in ``kind``
        """
        kind = FlagKind.of(kind)
        self._check_name(name)
        if switch and kind is not FlagKind.BOOL:
            raise ValueError(f"Only bool flags can be switches, {name} is a {kind.type_name}")

        try:
            typed_default = validate_default(kind, default)
        except CoercionError as e:
            logger.debug(f"Rejected default {default!r} for flag '{name}'")
            raise InvalidDefaultError(name, kind.type_name, default) from e

        self._add(
            FlagSchemaEntry(
                name=name,
                kind=kind,
                required=False,
                default=typed_default,
                description=description,
                switch=switch,
            )
        )
        return self

    def with_switch(self, name: str, description: str = "") -> "ProgramBuilder":
        """Register a bool switch: ``--name`` alone sets it, absence leaves it False."""
        return self.with_optional_flag(name, FlagKind.BOOL, False, description, switch=True)

    def build(self) -> Program:
        """Finalize the declarations into a Program.

        The builder can still be used afterwards; programs already built are
        not affected by later registrations.
        """
        metadata = ProgramMetadata(description=self.description, entries=tuple(self._entries))
        logger.debug(f"Built program with {len(metadata.entries)} flag(s): {metadata.names()}")
        return Program(metadata, self.config)

    def _check_name(self, name: str) -> None:
        if not name or any(c.isspace() for c in name):
            raise ValueError(f"Invalid flag name {name!r}")
        if name.startswith(self.config.prefix):
            raise ValueError(f"Flag name {name!r} must be given without the {self.config.prefix!r} prefix")
        if any(entry.name == name for entry in self._entries):
            # A duplicated name could never be told apart on the command line
            raise DuplicateFlagError(name)

    def _add(self, entry: FlagSchemaEntry) -> None:
        self._entries.append(entry)
        logger.debug(f"Registered {'required' if entry.required else 'optional'} flag '{entry.name}' ({entry.kind.type_name})")
