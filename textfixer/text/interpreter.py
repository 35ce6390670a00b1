"""Command interpreter for inline formatting tokens.

Responsibilities:
- Walk word tokens left to right, emitting ordinary words unchanged.
- Recognize bracketed command tokens and apply them to already emitted words.
- Rejoin an indexed command split across one whitespace gap, e.g. `(up,` `2)`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .commands import (
    BaseConversionError,
    CommandSyntaxError,
    apply_command,
    lookup_command,
    parse_indexed_command,
)


@dataclass(frozen=True, slots=True)
class CommandDiagnostic:
    """A recoverable command failure reported to the user.

    Attributes:
        command: Command kind that failed, e.g. `hex`.
        word: Word the command was applied to; left unchanged.
        position: 0-based index of `word` in the interpreted word sequence.
        message: Human-readable description.
    """

    command: str
    word: str
    position: int
    message: str


@dataclass(frozen=True, slots=True)
class InterpretationReport:
    """Structured output of one interpreter pass."""

    words: list[str]
    applied_commands: int
    dropped_commands: int
    diagnostics: tuple[CommandDiagnostic, ...]


class CommandInterpreter:
    """Expand command tokens into edits of the emitted word sequence."""

    def interpret(self, words: list[str]) -> list[str]:
        """Return the word sequence with commands removed and applied."""

        return self.interpret_with_report(words).words

    def interpret_with_report(self, words: list[str]) -> InterpretationReport:
        """Interpret commands and return words with counters and diagnostics."""

        result: list[str] = []
        diagnostics: list[CommandDiagnostic] = []
        applied = 0
        dropped = 0
        index = 0

        while index < len(words):
            word = words[index]
            index += 1

            if not word.startswith("("):
                result.append(word)
                continue

            if "," in word:
                consumed = [word]
                if not word.endswith(")") and index < len(words):
                    consumed.append(words[index])
                    index += 1
                try:
                    command = parse_indexed_command(" ".join(consumed))
                except CommandSyntaxError:
                    command = None
                if command is None:
                    dropped += 1
                    continue
            else:
                command = lookup_command(word)
                if command is None:
                    result.append(word)
                    continue

            if not result:
                dropped += 1
                continue

            try:
                apply_command(command, result)
            except BaseConversionError as exc:
                diagnostics.append(
                    CommandDiagnostic(
                        command=exc.kind,
                        word=exc.word,
                        position=len(result) - 1,
                        message=str(exc),
                    )
                )
                continue
            applied += 1

        return InterpretationReport(
            words=result,
            applied_commands=applied,
            dropped_commands=dropped,
            diagnostics=tuple(diagnostics),
        )
