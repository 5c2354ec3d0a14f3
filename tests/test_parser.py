"""Tests for command-line parsing (core/parser.py).

The parser is pure, so every test is a plain input → ParsedCommand check.
"""

from __future__ import annotations

import pytest

from cmdsim.core.models import ParsedCommand
from cmdsim.core.parser import parse_command, tokenize


# ---------------------------------------------------------------------------
# Command name
# ---------------------------------------------------------------------------

class TestName:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("help", "help"),
            ("hello --verbose world", "hello"),
            ("unknown-cmd", "unknown-cmd"),
            ("  leading spaces", "leading"),
            ("--looks-like-a-flag x", "--looks-like-a-flag"),
        ],
    )
    def test_first_token_is_name(self, text: str, expected: str) -> None:
        assert parse_command(text).name == expected

    @pytest.mark.parametrize("text", ["", " ", "   ", "\t"])
    def test_empty_or_blank_input(self, text: str) -> None:
        cmd = parse_command(text)
        assert cmd == ParsedCommand(name="", flags=frozenset(), positional_args=())

    def test_name_is_not_validated(self) -> None:
        assert parse_command("!@#$ x").name == "!@#$"


# ---------------------------------------------------------------------------
# Flags
# ---------------------------------------------------------------------------

class TestFlags:
    def test_double_dash_token_is_flag(self) -> None:
        cmd = parse_command("hello --verbose")
        assert cmd.flags == frozenset({"verbose"})
        assert cmd.positional_args == ()

    def test_duplicate_flags_are_idempotent(self) -> None:
        cmd = parse_command("hello --verbose --verbose")
        assert cmd.flags == frozenset({"verbose"})

    def test_flag_values_are_not_split(self) -> None:
        cmd = parse_command("deploy --env=prod")
        assert cmd.flags == frozenset({"env=prod"})

    def test_bare_double_dash_is_empty_flag(self) -> None:
        cmd = parse_command("run --")
        assert cmd.flags == frozenset({""})
        assert cmd.positional_args == ()

    def test_single_dash_is_positional(self) -> None:
        cmd = parse_command("ls -l")
        assert cmd.flags == frozenset()
        assert cmd.positional_args == ("-l",)


# ---------------------------------------------------------------------------
# Positional arguments
# ---------------------------------------------------------------------------

class TestPositionalArgs:
    def test_order_is_preserved(self) -> None:
        cmd = parse_command("copy a --force b c")
        assert cmd.positional_args == ("a", "b", "c")
        assert cmd.flags == frozenset({"force"})

    def test_consecutive_spaces_are_collapsed(self) -> None:
        cmd = parse_command("echo a  b   c")
        assert cmd.positional_args == ("a", "b", "c")

    def test_trailing_space_adds_nothing(self) -> None:
        assert parse_command("help ").positional_args == ()


# ---------------------------------------------------------------------------
# Scenarios and properties
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_hello_verbose_world(self) -> None:
        assert parse_command("hello --verbose world") == ParsedCommand(
            name="hello",
            flags=frozenset({"verbose"}),
            positional_args=("world",),
        )

    def test_help_alone(self) -> None:
        cmd = parse_command("help")
        assert cmd.name == "help"
        assert cmd.flags == frozenset()
        assert cmd.positional_args == ()

    @pytest.mark.parametrize(
        "text",
        ["", "help", "hello --verbose world", "x --a --b c d --a"],
    )
    def test_parsing_is_deterministic(self, text: str) -> None:
        assert parse_command(text) == parse_command(text)

    @pytest.mark.parametrize(
        "text",
        ["a --b c --d e", "cmd x y z", "cmd --p --q"],
    )
    def test_every_token_lands_in_exactly_one_place(self, text: str) -> None:
        cmd = parse_command(text)
        rest = tokenize(text)[1:]
        flag_tokens = [t for t in rest if t.startswith("--")]
        assert cmd.flags == frozenset(t[2:] for t in flag_tokens)
        assert list(cmd.positional_args) == [t for t in rest if not t.startswith("--")]
