"""Unit tests for inline command interpretation over word sequences."""

from __future__ import annotations

import pytest

from textfixer.text.interpreter import CommandDiagnostic, CommandInterpreter


def _interpret(text: str) -> list[str]:
    return CommandInterpreter().interpret(text.split())


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("fix (cap) this", "Fix this"),
        ("one two three (up,2)", "one TWO THREE"),
        ("SHOUT (low)", "shout"),
        ("ff (hex)", "255"),
        ("101 (bin)", "5"),
        ("it WAS A test (cap,3) done", "it Was A Test done"),
    ],
)
def test_interpreter_applies_commands_to_preceding_words(text: str, expected: str) -> None:
    """Commands should edit already emitted words and disappear from the output."""

    assert " ".join(_interpret(text)) == expected


def test_interpreter_is_a_no_op_without_command_tokens() -> None:
    """Plain words, including bracketed ones, should pass through unchanged."""

    words = ["plain", "(aside)", "words,", "here."]

    assert CommandInterpreter().interpret(list(words)) == words


def test_interpreter_rejoins_indexed_command_split_by_whitespace() -> None:
    """`(up,` followed by `2)` should be merged into one command token."""

    assert _interpret("this is great (up, 2) indeed") == ["this", "IS", "GREAT", "indeed"]


def test_interpreter_clamps_count_to_available_words() -> None:
    """A count beyond the emitted words should transform what exists without error."""

    assert _interpret("x (cap,5)") == ["X"]


def test_interpreter_drops_command_before_any_word() -> None:
    """Commands with an empty result sequence should be discarded silently."""

    report = CommandInterpreter().interpret_with_report("(up,2) (cap) (hex) hello".split())

    assert report.words == ["hello"]
    assert report.dropped_commands == 3
    assert report.applied_commands == 0
    assert report.diagnostics == ()


@pytest.mark.parametrize(
    "text",
    ["hello (up,two)", "hello (cap,)", "hello (low,2,3)", "hello (up,2 words"],
)
def test_interpreter_drops_malformed_indexed_commands(text: str) -> None:
    """Malformed counts drop the command token (and its merged lookahead) silently."""

    report = CommandInterpreter().interpret_with_report(text.split())

    assert report.words == ["hello"]
    assert report.dropped_commands == 1
    assert report.diagnostics == ()


def test_interpreter_drops_comma_tokens_with_unknown_names() -> None:
    """Unknown indexed names are discarded together with their merged lookahead."""

    report = CommandInterpreter().interpret_with_report("text (see, e.g.) more".split())

    assert report.words == ["text", "more"]
    assert report.dropped_commands == 1
    assert report.applied_commands == 0


def test_interpreter_drops_trailing_split_command_without_lookahead() -> None:
    """A dangling `(cap,` at end of input has no count and is dropped."""

    assert _interpret("word (cap,") == ["word"]


def test_interpreter_records_diagnostic_for_failed_conversion() -> None:
    """Unparsable numbers stay unchanged and produce one diagnostic."""

    report = CommandInterpreter().interpret_with_report("zz (hex) 12 (bin)".split())

    assert report.words == ["zz", "12"]
    assert report.applied_commands == 0
    assert report.diagnostics == (
        CommandDiagnostic(
            command="hex", word="zz", position=0, message="Error converting hex to dec"
        ),
        CommandDiagnostic(
            command="bin", word="12", position=1, message="Error converting bin to dec"
        ),
    )


def test_interpreter_commands_chain_on_the_same_word() -> None:
    """Later commands see the result of earlier ones."""

    assert _interpret("1010 (bin) (hex)") == ["16"]


def test_interpreter_counts_applied_commands() -> None:
    """Every applied command should be counted once."""

    report = CommandInterpreter().interpret_with_report("a b (up) c (cap,2)".split())

    assert report.words == ["a", "B", "C"]
    assert report.applied_commands == 2
    assert report.dropped_commands == 0
