"""Character-level spacing rules applied to joined text.

Responsibilities:
- Attach punctuation to the preceding word and space it from the next one.
- Remove spaces just inside single-quoted spans.
"""

from __future__ import annotations

from typing import Protocol

from .splitter import WHITESPACE


class SpacingRule(Protocol):
    """A character-level pass over joined text."""

    def apply(self, text: str) -> str:
        """Apply a single spacing transformation."""


class PunctuationSpacingNormalizer:
    """Normalize spaces around `. ! , ? : ;`."""

    PUNCTUATION = frozenset(".!,?:;")

    def apply(self, text: str) -> str:
        """Drop spaces before punctuation and add one after it where missing."""

        punctuation = self.PUNCTUATION
        length = len(text)
        output: list[str] = []

        for index, current in enumerate(text):
            following = text[index + 1] if index + 1 < length else None
            if current == " " and following in punctuation:
                continue

            output.append(current)

            if (
                current in punctuation
                and following is not None
                and following not in WHITESPACE
                and following not in punctuation
            ):
                output.append(" ")

        return "".join(output)


class QuoteSpacingNormalizer:
    """Remove spaces adjacent to apostrophes inside quoted spans."""

    QUOTE = "'"

    def apply(self, text: str) -> str:
        """Toggle quote state on every apostrophe and trim inner edge spaces."""

        quote = self.QUOTE
        length = len(text)
        in_quote = False
        output: list[str] = []

        for index, current in enumerate(text):
            if current == quote:
                in_quote = not in_quote
                output.append(current)
                continue

            if in_quote and current == " ":
                after_opening = index > 0 and text[index - 1] == quote
                before_closing = index + 1 < length and text[index + 1] == quote
                if after_opening or before_closing:
                    continue

            output.append(current)

        return "".join(output)
