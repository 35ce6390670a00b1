"""Stage progress and diagnostic logging for document runs."""

from .logger import RunLogger
from .stages import STAGES, StageTracker

__all__ = ["RunLogger", "STAGES", "StageTracker"]
