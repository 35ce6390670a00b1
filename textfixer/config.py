"""Run configuration for textfixer.

A run reads `--config <file.yaml>` when given, otherwise `TEXTFIXER_*`
environment variables; anything unset keeps the `FixerConfig` default. Every
setting is listed once in `SETTINGS` and both loaders read through it.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, fields
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean


@dataclass(slots=True)
class FixerConfig:
    """Runtime configuration for one document run.

    Attributes:
        encoding: Codec used to decode the input and encode the output.
        apply_commands: Whether inline `(cap)`/`(hex)`-style commands run.
        fix_articles: Whether `a` is rewritten to `an` before vowel-or-h words.
        fix_punctuation: Whether spacing around punctuation is normalized.
        fix_quotes: Whether spaces inside single-quoted spans are removed.
    """

    encoding: str = "utf-8"
    apply_commands: bool = True
    fix_articles: bool = True
    fix_punctuation: bool = True
    fix_quotes: bool = True

    def validate(self) -> None:
        """Raise `ValueError` when `encoding` is not a known codec."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc


# Setting name -> environment variable.
SETTINGS = {field.name: f"TEXTFIXER_{field.name.upper()}" for field in fields(FixerConfig)}


def _coerce(name: str, raw: object, origin: str) -> str | bool | None:
    """Return the typed value for setting `name`, or `None` when `raw` is blank."""

    if normalize_optional_string(raw) is None:
        return None
    if name == "encoding":
        return normalize_optional_string(raw)

    parsed = parse_permissive_boolean(raw)
    if parsed is None:
        raise ValueError(
            f"{origin} must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`), "
            f"got `{raw}`."
        )
    return parsed


def _build(values: dict[str, str | bool | None]) -> FixerConfig:
    config = FixerConfig(**{name: value for name, value in values.items() if value is not None})
    config.validate()
    return config


class ConfigLoader:
    """Build a validated `FixerConfig` from a YAML file or the environment."""

    @staticmethod
    def from_yaml(path: Path) -> FixerConfig:
        """Load settings from a YAML mapping; unknown keys are rejected."""

        try:
            payload: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")

        unknown = sorted(str(key) for key in payload if key not in SETTINGS)
        if unknown:
            raise ValueError(
                f"YAML config `{path}` includes unsupported key(s): {', '.join(unknown)}."
            )

        return _build(
            {
                name: _coerce(name, payload[name], f"Field `{name}` in `{path}`")
                for name in SETTINGS
                if name in payload
            }
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> FixerConfig:
        """Load settings from `TEXTFIXER_*` variables; blank values are ignored."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        return _build(
            {
                name: _coerce(name, env_map[variable], f"Environment variable `{variable}`")
                for name, variable in SETTINGS.items()
                if variable in env_map
            }
        )
