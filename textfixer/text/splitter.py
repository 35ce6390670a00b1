"""Word splitting and document decoding helpers.

Responsibilities:
- Convert raw document bytes to text and back without losing undecodable bytes.
- Split text into whitespace-delimited word tokens.
"""

from __future__ import annotations

import re

_BYTE_PRESERVING_ERRORS = "surrogateescape"

# Unicode White_Space. Python's str.isspace() also counts the information
# separators U+001C-U+001F; here they are ordinary word characters.
WHITESPACE = frozenset(
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_WORD_RE = re.compile("[^" + re.escape("".join(sorted(WHITESPACE))) + "]+")


def decode_document(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw document bytes, keeping invalid byte sequences recoverable."""

    return data.decode(encoding, errors=_BYTE_PRESERVING_ERRORS)


def encode_document(text: str, encoding: str = "utf-8") -> bytes:
    """Encode text produced by `decode_document` back to raw bytes."""

    return text.encode(encoding, errors=_BYTE_PRESERVING_ERRORS)


def split_words(text: str) -> list[str]:
    """Return maximal runs of non-`WHITESPACE` characters in document order."""

    return _WORD_RE.findall(text)


def join_words(words: list[str]) -> str:
    """Join words with single spaces."""

    return " ".join(words)
