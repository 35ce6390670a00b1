"""Inline formatting commands and their handlers.

Responsibilities:
- Represent the recognized bracketed commands as small immutable records.
- Parse bare `(name)` and indexed `(name,count)` command tokens.
- Apply a command to the tail of the in-progress result sequence.

Key types:
- `CaseCommand`: capitalize/upper/lower over the last `count` words.
- `ConversionCommand`: hexadecimal or binary to decimal on the last word.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Literal

from ..parsing import parse_decimal_integer

CaseKind = Literal["capitalize", "upper", "lower"]
ConversionKind = Literal["hex", "bin"]

_CASE_COMMANDS: dict[str, CaseKind] = {
    "(cap)": "capitalize",
    "(up)": "upper",
    "(low)": "lower",
}
_CONVERSION_COMMANDS: dict[str, ConversionKind] = {
    "(hex)": "hex",
    "(bin)": "bin",
}
_RADIX_BY_KIND = {"hex": 16, "bin": 2}
_DIGITS_BY_KIND = {
    "hex": re.compile(r"[+-]?[0-9A-Fa-f]+"),
    "bin": re.compile(r"[+-]?[01]+"),
}
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class CommandSyntaxError(ValueError):
    """Raised when a known indexed command carries an unusable count."""


class BaseConversionError(ValueError):
    """Raised when a word cannot be read as a number in the requested radix."""

    def __init__(self, word: str, kind: ConversionKind) -> None:
        """Keep the offending word and conversion kind for diagnostics."""

        super().__init__(f"Error converting {kind} to dec")
        self.word = word
        self.kind = kind


@dataclass(frozen=True, slots=True)
class CaseCommand:
    """Change letter case of the most recently emitted words.

    Attributes:
        kind: One of `capitalize`, `upper`, `lower`.
        count: Number of trailing words to transform.
    """

    kind: CaseKind
    count: int = 1


@dataclass(frozen=True, slots=True)
class ConversionCommand:
    """Replace the most recently emitted word with its decimal value."""

    kind: ConversionKind

    @property
    def radix(self) -> int:
        """Return the numeric base the target word is read in."""

        return _RADIX_BY_KIND[self.kind]


Command = CaseCommand | ConversionCommand


def lookup_command(token: str) -> Command | None:
    """Return the command for a bare `(name)` token, or `None` if unknown."""

    case_kind = _CASE_COMMANDS.get(token)
    if case_kind is not None:
        return CaseCommand(kind=case_kind)
    conversion_kind = _CONVERSION_COMMANDS.get(token)
    if conversion_kind is not None:
        return ConversionCommand(kind=conversion_kind)
    return None


def parse_indexed_command(token: str) -> CaseCommand | None:
    """Parse a comma-bearing `(name,count)` token.

    Returns:
        The parsed command, or `None` when `name` is not an indexed command.

    Raises:
        CommandSyntaxError: If the name is known but the token is malformed.
    """

    parts = token.split(",")
    kind = _CASE_COMMANDS.get(parts[0].strip() + ")")
    if kind is None:
        return None
    if len(parts) != 2:
        raise CommandSyntaxError(f"Expected one comma in `{token}`.")

    count = parse_decimal_integer(parts[1].strip().rstrip(")").strip())
    if count is None:
        raise CommandSyntaxError(f"Invalid count in `{token}`.")
    return CaseCommand(kind=kind, count=count)


def capitalize_word(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""

    if not word:
        return word
    return word[0].upper() + word[1:].lower()


_CASE_TRANSFORMS = {
    "capitalize": capitalize_word,
    "upper": str.upper,
    "lower": str.lower,
}


def convert_to_decimal(word: str, kind: ConversionKind) -> str:
    """Read `word` as a signed 64-bit integer in the kind's radix; return base 10.

    Raises:
        BaseConversionError: If the word has invalid digits or is out of range.
    """

    if not _DIGITS_BY_KIND[kind].fullmatch(word):
        raise BaseConversionError(word, kind)
    value = int(word, _RADIX_BY_KIND[kind])
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise BaseConversionError(word, kind)
    return str(value)


def apply_command(command: Command, words: list[str]) -> None:
    """Apply `command` in place to the tail of a non-empty result sequence.

    Case commands touch up to `count` trailing words and stop at the start of
    the sequence. Conversion commands leave the word untouched when they raise.
    """

    if isinstance(command, CaseCommand):
        transform = _CASE_TRANSFORMS[command.kind]
        last_index = len(words) - 1
        for offset in range(command.count):
            index = last_index - offset
            if index < 0:
                break
            words[index] = transform(words[index])
        return

    words[-1] = convert_to_decimal(words[-1], command.kind)
