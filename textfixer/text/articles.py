"""Indefinite article correction.

Rewrites `a`/`A` to `an`/`An` when the following word starts with a vowel or
`h`, keeping punctuation attached to the article.
"""

from __future__ import annotations

from dataclasses import dataclass
import unicodedata


_VOWELS_AND_H = frozenset("aeiouh")
_ARTICLE_REPLACEMENTS = {"a": "an", "A": "An"}


def _is_punctuation(character: str) -> bool:
    """Return whether a character belongs to a Unicode punctuation category."""

    return unicodedata.category(character).startswith("P")


def _strip_trailing_punctuation(word: str) -> str:
    end = len(word)
    while end > 0 and _is_punctuation(word[end - 1]):
        end -= 1
    return word[:end]


def _strip_leading_punctuation(word: str) -> str:
    start = 0
    while start < len(word) and _is_punctuation(word[start]):
        start += 1
    return word[start:]


@dataclass(frozen=True, slots=True)
class ArticleFixReport:
    """Structured output of indefinite article correction."""

    words: list[str]
    rewrites: int


class IndefiniteArticleFixer:
    """Choose `an` over `a` using the vowel-or-h rule."""

    def fix(self, words: list[str]) -> list[str]:
        """Fix articles in place and return the same list."""

        return self.fix_with_report(words).words

    def fix_with_report(self, words: list[str]) -> ArticleFixReport:
        """Fix articles in one left-to-right pass and count rewrites."""

        rewrites = 0
        for index in range(len(words) - 1):
            current = words[index]
            article = _strip_trailing_punctuation(current)
            replacement = _ARTICLE_REPLACEMENTS.get(article)
            if replacement is None:
                continue

            following = _strip_leading_punctuation(words[index + 1])
            if not following or following[0].lower() not in _VOWELS_AND_H:
                continue

            words[index] = replacement + current[len(article):]
            rewrites += 1

        return ArticleFixReport(words=words, rewrites=rewrites)
