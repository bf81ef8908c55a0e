"""Purpose alignment scoring for project directories."""

from .engine import AlignmentEngine, analyze_alignment

__all__ = ["AlignmentEngine", "analyze_alignment"]
