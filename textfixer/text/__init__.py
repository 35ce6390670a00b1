"""Text transformation components.

This package provides word splitting, inline command interpretation, and the
article, punctuation, and quote normalization passes.
"""

from .articles import ArticleFixReport, IndefiniteArticleFixer
from .commands import (
    BaseConversionError,
    CaseCommand,
    Command,
    CommandSyntaxError,
    ConversionCommand,
)
from .interpreter import CommandDiagnostic, CommandInterpreter, InterpretationReport
from .spacing import PunctuationSpacingNormalizer, QuoteSpacingNormalizer
from .splitter import split_words

__all__ = [
    "ArticleFixReport",
    "BaseConversionError",
    "CaseCommand",
    "Command",
    "CommandDiagnostic",
    "CommandInterpreter",
    "CommandSyntaxError",
    "ConversionCommand",
    "IndefiniteArticleFixer",
    "InterpretationReport",
    "PunctuationSpacingNormalizer",
    "QuoteSpacingNormalizer",
    "split_words",
]
