"""Parser configuration."""

import os
from dataclasses import dataclass
from typing import Optional

__all__ = ["ParserConfig", "DEFAULT_PREFIX", "DEFAULT_HELP_FLAG"]

DEFAULT_PREFIX = "--"
DEFAULT_HELP_FLAG = "help"


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for how tokens are matched to flags."""

    # Text that marks a token as a flag, stripped before name lookup
    prefix: str = DEFAULT_PREFIX

    # Flag name that requests help; None disables it. A registered flag with
    # the same name takes precedence.
    help_flag: Optional[str] = DEFAULT_HELP_FLAG

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("prefix cannot be empty")

    def strip_prefix(self, token: str) -> str | None:
        """Return the flag name in ``token``, or None if it is not in flag format."""
        if not token.startswith(self.prefix):
            return None
        return token[len(self.prefix):]

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Load configuration from environment variables.

        CMDFLAGS_PREFIX overrides the prefix; CMDFLAGS_HELP_FLAG overrides the
        help flag name, and an empty value disables it.
        """
        prefix = os.getenv("CMDFLAGS_PREFIX", DEFAULT_PREFIX)
        help_flag: Optional[str] = os.getenv("CMDFLAGS_HELP_FLAG", DEFAULT_HELP_FLAG)
        if not help_flag:
            help_flag = None
        return cls(prefix=prefix, help_flag=help_flag)
