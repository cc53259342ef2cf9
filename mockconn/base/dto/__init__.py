"""Data transfer objects for diagnostics and verification summaries."""

from .diagnostic import Diagnostic
from .action_report import ActionReport

__all__ = ["Diagnostic", "ActionReport"]
