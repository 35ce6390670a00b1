"""Input/output adapters for reading and writing documents."""

from .storage import DocumentStore

__all__ = ["DocumentStore"]
