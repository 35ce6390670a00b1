"""Shared parsing helpers for configuration values and command counts."""

from __future__ import annotations

import re


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_DECIMAL_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_decimal_integer(value: str) -> int | None:
    """Parse an optionally signed base-10 integer, returning `None` when invalid.

    Only ASCII digits are accepted; underscores, inner whitespace and other
    digit scripts that `int()` would tolerate are rejected.
    """

    if not _DECIMAL_INTEGER_RE.fullmatch(value):
        return None
    return int(value)
