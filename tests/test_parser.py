"""Unit tests for token parsing."""

import pytest

from cmdflags import (
    ErrorKind,
    FlagGivenTwiceError,
    FlagKind,
    HelpRequested,
    InvalidValueError,
    MissingRequiredFlagError,
    MissingValueError,
    ParseError,
    ParserConfig,
    ProgramBuilder,
    UnknownFlagError,
)
from cmdflags.core.parsers import TokenParser


class TestHttpServerScenario:
    """The port/use-tls example program."""

    def test_required_given_optional_defaulted(self, http_program):
        result = http_program.parse(["--port", "8080"])

        assert result.to_dict() == {"port": 8080, "use-tls": False}

    def test_missing_required_flag(self, http_program):
        with pytest.raises(MissingRequiredFlagError) as exc_info:
            http_program.parse(["--use-tls", "true"])

        assert exc_info.value.names == ("port",)
        assert exc_info.value.kind is ErrorKind.MISSING_REQUIRED_FLAG

    def test_invalid_value(self, http_program):
        with pytest.raises(InvalidValueError) as exc_info:
            http_program.parse(["--port", "notanumber"])

        assert exc_info.value == InvalidValueError("port", "notanumber", "u16")
        assert exc_info.value.text == "notanumber"

    def test_unknown_flag(self, http_program):
        with pytest.raises(UnknownFlagError) as exc_info:
            http_program.parse(["--port", "8080", "--bogus", "x"])

        assert exc_info.value.name == "bogus"
        assert exc_info.value.token == "--bogus"
        assert exc_info.value.kind is ErrorKind.UNKNOWN_FLAG

    def test_explicit_bool_value(self, http_program):
        result = http_program.parse(["--use-tls", "true", "--port", "443"])

        assert result["use-tls"] is True
        assert result["port"] == 443


class TestTokenScanning:
    """Tests for the left-to-right scan."""

    def test_single_string_is_rejected(self, http_program):
        """Test a whole command line string is not split into characters."""
        with pytest.raises(TypeError):
            http_program.parse("--port 8080")

    def test_any_iterable_of_tokens_is_accepted(self, http_program):
        result = http_program.parse(iter(["--port", "8080"]))

        assert result["port"] == 8080

    def test_flag_given_twice_is_an_error(self):
        """Test a repeated flag fails instead of keeping the last value."""
        program = ProgramBuilder().with_required_flag("port", FlagKind.U16).build()

        with pytest.raises(FlagGivenTwiceError) as exc_info:
            program.parse(["--port", "80", "--port", "81"])

        assert exc_info.value.name == "port"
        assert exc_info.value.kind is ErrorKind.DUPLICATE_FLAG

    def test_repeated_switch_is_an_error(self):
        program = ProgramBuilder().with_switch("verbose").build()

        with pytest.raises(FlagGivenTwiceError):
            program.parse(["--verbose", "--verbose"])

    def test_missing_value(self):
        program = ProgramBuilder().with_required_flag("name", str).build()

        with pytest.raises(MissingValueError) as exc_info:
            program.parse(["--name"])

        assert exc_info.value.name == "name"

    def test_value_token_is_consumed_verbatim(self):
        """Test the token after a value flag is its value even if it looks like a flag."""
        program = (
            ProgramBuilder()
            .with_required_flag("name", str)
            .with_switch("verbose")
            .build()
        )

        result = program.parse(["--name", "--verbose"])

        assert result["name"] == "--verbose"
        assert result["verbose"] is False

    def test_switch_consumes_no_value(self):
        program = (
            ProgramBuilder()
            .with_switch("is-wonderful")
            .with_required_flag("name", str)
            .build()
        )

        result = program.parse(["--is-wonderful", "--name", "Dr. Ollie"])

        assert result.get_bool("is-wonderful") is True
        assert result.get_str("name") == "Dr. Ollie"

    def test_value_bool_requires_value_token(self):
        program = (
            ProgramBuilder()
            .with_required_flag("is-great", bool)
            .with_required_flag("name", str)
            .build()
        )

        result = program.parse(["--is-great", "true", "--name", "Dr. Ollie"])
        assert result.get_bool("is-great") is True

        with pytest.raises(InvalidValueError):
            program.parse(["--is-great", "--name", "Dr. Ollie"])

    def test_token_without_prefix_is_unknown(self, http_program):
        with pytest.raises(UnknownFlagError) as exc_info:
            http_program.parse(["port", "8080"])

        assert exc_info.value.name == "port"

    def test_no_prefix_matching(self, http_program):
        """Test names match exactly, not by prefix."""
        with pytest.raises(UnknownFlagError):
            http_program.parse(["--po", "8080"])
        with pytest.raises(UnknownFlagError):
            http_program.parse(["--port-number", "8080"])

    def test_scan_errors_fail_fast_before_completeness(self, http_program):
        """Test an unknown flag is reported even though port is also missing."""
        with pytest.raises(UnknownFlagError):
            http_program.parse(["--bogus", "x"])

    def test_first_scan_error_wins(self, http_program):
        with pytest.raises(InvalidValueError):
            http_program.parse(["--port", "nope", "--bogus"])

    def test_string_value_may_be_empty(self):
        program = ProgramBuilder().with_required_flag("name", str).build()

        assert program.parse(["--name", ""])["name"] == ""

    def test_accepts_any_iterable(self, http_program):
        result = http_program.parse(iter(["--port", "1"]))

        assert result["port"] == 1

    def test_errors_share_parse_error_base(self, http_program):
        with pytest.raises(ParseError):
            http_program.parse([])


class TestCompleteness:
    """Tests for required-flag and default handling after the scan."""

    def test_all_missing_required_flags_reported_at_once(self):
        program = (
            ProgramBuilder()
            .with_required_flag("port", FlagKind.U16)
            .with_required_flag("host", str)
            .build()
        )

        with pytest.raises(MissingRequiredFlagError) as exc_info:
            program.parse([])

        assert exc_info.value.names == ("port", "host")
        assert exc_info.value == MissingRequiredFlagError(["port", "host"])

    def test_defaults_fill_optional_flags(self):
        program = (
            ProgramBuilder()
            .with_optional_flag("name", str, "Mr. Ollie")
            .with_optional_flag("ratio", float, 0.5)
            .with_switch("verbose")
            .build()
        )

        result = program.parse([])

        assert result.to_dict() == {"name": "Mr. Ollie", "ratio": 0.5, "verbose": False}

    def test_result_follows_registration_order(self):
        program = (
            ProgramBuilder()
            .with_required_flag("a", str)
            .with_required_flag("b", str)
            .build()
        )

        result = program.parse(["--b", "2", "--a", "1"])

        assert list(result) == ["a", "b"]

    def test_one_value_per_registered_flag(self):
        program = (
            ProgramBuilder()
            .with_required_flag("r1", FlagKind.I32)
            .with_required_flag("r2", str)
            .with_optional_flag("o1", FlagKind.U8, 3)
            .with_optional_flag("o2", bool, True)
            .with_switch("o3")
            .build()
        )

        result = program.parse(["--r2", "text", "--r1", "-5"])

        assert len(result) == 5
        assert result["r1"] == -5
        assert result["r2"] == "text"
        assert result["o1"] == 3

    def test_empty_program_parses_empty_input(self):
        program = ProgramBuilder("nothing").build()

        assert program.parse([]).to_dict() == {}


class TestIdempotence:
    """Tests that parsing does not depend on previous calls."""

    def test_same_tokens_same_result(self, http_program):
        tokens = ["--port", "8080", "--use-tls", "true"]

        first = http_program.parse(tokens)
        second = http_program.parse(tokens)

        assert first == second
        assert first is not second

    def test_failed_parse_does_not_affect_next(self, http_program):
        with pytest.raises(InvalidValueError):
            http_program.parse(["--port", "x"])

        assert http_program.parse(["--port", "1"])["port"] == 1


class TestHelpFlag:
    """Tests for the help flag signal."""

    def test_help_flag_raises_help_requested(self, http_program):
        with pytest.raises(HelpRequested) as exc_info:
            http_program.parse(["--port", "8080", "--help"])

        assert exc_info.value.help_text == http_program.help_text()
        assert exc_info.value.kind is ErrorKind.HELP_REQUESTED

    def test_registered_help_flag_takes_precedence(self):
        program = ProgramBuilder().with_switch("help").build()

        assert program.parse(["--help"])["help"] is True

    def test_help_flag_can_be_disabled(self):
        program = ProgramBuilder(config=ParserConfig(help_flag=None)).build()

        with pytest.raises(UnknownFlagError):
            program.parse(["--help"])


class TestTokenParser:
    """Tests for using TokenParser directly."""

    def test_custom_prefix(self, http_program):
        parser = TokenParser(http_program.metadata, ParserConfig(prefix="-"))

        result = parser.parse(["-port", "22"])

        assert result["port"] == 22

    def test_default_config(self, http_program):
        parser = TokenParser(http_program.metadata)

        assert parser.config == ParserConfig()
        assert parser.parse(["--port", "22"])["port"] == 22
