"""Top-level package for textfixer.

This package reads a text document, applies inline formatting commands such as
`(cap)`, `(up,2)` and `(hex)`, normalizes indefinite articles, punctuation
spacing and quote spacing, and writes the result. The main orchestration entry
point is `TextFixerPipeline`.
"""

from .pipeline import TextFixerPipeline

__all__ = ["TextFixerPipeline", "__version__"]

__version__ = "0.1.0"
