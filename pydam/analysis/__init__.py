"""Analysis: the full stability calculation, with optional solve mode."""

from pydam.analysis.pipeline import calculate_stability

__all__ = ["calculate_stability"]
