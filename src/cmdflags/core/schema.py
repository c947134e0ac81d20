"""Flag schema models.

These frozen Pydantic models describe a finalized program: one
FlagSchemaEntry per registered flag, held in registration order by
ProgramMetadata.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, model_validator

from cmdflags.core.coercion import format_value
from cmdflags.domain.types import FlagKind, TypedValue

__all__ = ["FlagSchemaEntry", "ProgramMetadata"]


class FlagSchemaEntry(BaseModel):
    """Declaration of a single flag."""

    name: str = Field(..., description="Flag name, as given without its prefix")
    kind: FlagKind = Field(..., description="Kind of the flag's value")
    required: bool = Field(..., description="Whether the flag must be given")
    default: Optional[InstanceOf[TypedValue]] = Field(
        None, description="Value used when an optional flag is not given"
    )
    description: str = Field(default="", description="Help text for the flag")
    switch: bool = Field(
        default=False, description="Whether the flag is a bare boolean switch taking no value"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_entry(self) -> "FlagSchemaEntry":
        if not self.name or any(c.isspace() for c in self.name):
            raise ValueError(f"invalid flag name {self.name!r}")
        if self.required and self.default is not None:
            raise ValueError(f"required flag {self.name} cannot have a default")
        if not self.required and self.default is None:
            raise ValueError(f"optional flag {self.name} must have a default")
        if self.default is not None and self.default.kind is not self.kind:
            raise ValueError(
                f"default for flag {self.name} is a {self.default.kind.type_name}, not a {self.kind.type_name}"
            )
        if self.switch and (self.required or self.kind is not FlagKind.BOOL):
            raise ValueError(f"only optional bool flags can be switches, not {self.name}")
        return self

    @property
    def takes_value(self) -> bool:
        """Whether the flag consumes the token that follows it."""
        return not self.switch

    def formatted_default(self) -> str | None:
        """Default rendered as command-line text, or None for required flags."""
        if self.default is None:
            return None
        return format_value(self.kind, self.default.value)


class ProgramMetadata(BaseModel):
    """Finalized description of a program and its flags."""

    description: str = Field(default="", description="Program description shown in help")
    entries: tuple[FlagSchemaEntry, ...] = Field(
        default=(), description="Flag declarations in registration order"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _validate_unique_names(self) -> "ProgramMetadata":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.name in seen:
                raise ValueError(f"flag {entry.name} is declared more than once")
            seen.add(entry.name)
        return self

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    def entry(self, name: str) -> FlagSchemaEntry | None:
        """Get the entry registered under ``name``, if any."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def required_entries(self) -> list[FlagSchemaEntry]:
        return [entry for entry in self.entries if entry.required]

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self.entries)
