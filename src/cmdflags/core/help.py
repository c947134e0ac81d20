"""Help text generation."""

from cmdflags.core.config import DEFAULT_PREFIX
from cmdflags.core.schema import FlagSchemaEntry, ProgramMetadata

__all__ = ["generate_help_text", "describe_requirement"]

NO_ARGS_TEXT = "(no args)"


def describe_requirement(entry: FlagSchemaEntry) -> str:
    """Marker shown after a flag's type: required, or its default."""
    if entry.required:
        return "(required)"
    if entry.switch:
        return f"(switch, default: {entry.formatted_default()})"
    return f"(default: {entry.formatted_default()})"


def generate_help_text(metadata: ProgramMetadata, prefix: str = DEFAULT_PREFIX) -> str:
    """
    Render help for a program.

    The description comes first, then one line per flag in registration
    order with the name, type, requirement marker and description in
    columns padded to their widest value.

    Args:
        metadata: The program to describe
        prefix: Flag prefix shown before each name

    Returns:
        The help text
    """
    rows = [
        (entry.name, f"<{entry.kind.type_name}>", describe_requirement(entry), entry.description)
        for entry in metadata.entries
    ]

    if not rows:
        return f"\n{metadata.description}\n\n{NO_ARGS_TEXT}\n"

    name_width = max(len(name) for name, _, _, _ in rows)
    type_width = max(len(type_text) for _, type_text, _, _ in rows)
    marker_width = max(len(marker) for _, _, marker, _ in rows)

    lines = [
        f"\t{prefix}{name.ljust(name_width)} {type_text.ljust(type_width)} {marker.ljust(marker_width)}: {description}"
        for name, type_text, marker, description in rows
    ]
    return f"\n{metadata.description}\n\n" + "\n".join(lines) + "\n"
