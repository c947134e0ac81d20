"""Shared fixtures for cmdflags tests."""

import pytest
from loguru import logger

from cmdflags import FlagKind, Program, ProgramBuilder
from cmdflags.logger import disable_logging


@pytest.fixture
def http_program() -> Program:
    """Required u16 port plus optional bool use-tls."""
    return (
        ProgramBuilder("An HTTP server")
        .with_required_flag("port", FlagKind.U16, "Port number")
        .with_optional_flag("use-tls", FlagKind.BOOL, False, "TLS PLS?")
        .build()
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by a test and silence cmdflags again."""
    yield
    logger.remove()
    disable_logging()
