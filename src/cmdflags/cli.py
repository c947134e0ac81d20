"""Typer-based demo CLI exercising cmdflags as a host application would.

The core never reads process arguments, prints or exits; this module is
where those happen. Flags after ``--`` are handed to the demo program:

    $ python -m cmdflags demo -- --port 8080 --use-tls true
"""

from __future__ import annotations

import os
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from cmdflags.core import Program, ProgramBuilder, ParserConfig
from cmdflags.core.coercion import format_value
from cmdflags.domain.errors import HelpRequested, ProgramError
from cmdflags.domain.types import FlagKind
from cmdflags.logger import get_logger, setup_logger

logger = get_logger("cli")

# Exit status for malformed command lines, matching argparse/click
USAGE_ERROR_EXIT_CODE = 2

app = typer.Typer(
    name="cmdflags",
    help="Typed command-line flag parsing demo",
    add_completion=False,
    no_args_is_help=True,
)


def build_demo_program(config: Optional[ParserConfig] = None) -> Program:
    """The HTTP server example program."""
    return (
        ProgramBuilder("An HTTP server", config=config)
        .with_required_flag("port", FlagKind.U16, "Port number")
        .with_optional_flag("use-tls", FlagKind.BOOL, False, "TLS PLS?")
        .with_optional_flag("host", FlagKind.STR, "127.0.0.1", "Address to bind")
        .with_switch("verbose", "Log every request")
        .build()
    )


def _render_values(console: Console, program: Program, values) -> None:
    table = Table(title=program.description)
    table.add_column("flag")
    table.add_column("type")
    table.add_column("value")
    for entry in program.metadata.entries:
        table.add_row(entry.name, entry.kind.type_name, format_value(entry.kind, values[entry.name]))
    console.print(table)


@app.callback()
def main(
    log_level: str = typer.Option(
        os.getenv("CMDFLAGS_LOG_LEVEL", "WARNING"), "--log-level", help="Log level for cmdflags records"
    ),
) -> None:
    """Typed command-line flag parsing demo."""
    load_dotenv()
    setup_logger(log_level=log_level.upper(), console_output=True)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def demo(ctx: typer.Context) -> None:
    """Parse the tokens after `--` with the demo HTTP server program."""
    program = build_demo_program(ParserConfig.from_env())
    tokens = list(ctx.args)
    logger.info(f"Parsing {len(tokens)} token(s)")

    try:
        result = program.parse(tokens)
    except HelpRequested as e:
        Console().print(e.help_text, markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=0)
    except ProgramError as e:
        err_console = Console(stderr=True)
        err_console.print(program.help_text(), markup=False, highlight=False, soft_wrap=True)
        err_console.print(f"error: {e}", markup=False, highlight=False, soft_wrap=True, style="bold red")
        logger.warning(f"Rejected command line ({e.kind.value}): {e}")
        raise typer.Exit(code=USAGE_ERROR_EXIT_CODE)

    _render_values(Console(), program, result)


@app.command("help")
def show_help() -> None:
    """Print the demo program's flag help."""
    program = build_demo_program(ParserConfig.from_env())
    Console().print(program.help_text(), markup=False, highlight=False, soft_wrap=True)
