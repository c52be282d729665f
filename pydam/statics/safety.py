"""Safety-factor classification and number formatting."""

from __future__ import annotations

from enum import Enum

SAFE_THRESHOLD = 1.5
MARGINAL_THRESHOLD = 1.0


class SafetyStatus(str, Enum):
    """Conventional stability bands for a safety factor."""

    SAFE = "safe"
    MARGINAL = "marginal"
    UNSAFE = "unsafe"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SafetyStatus.SAFE: f"Safe (≥ {SAFE_THRESHOLD})",
    SafetyStatus.MARGINAL: f"Marginal ({MARGINAL_THRESHOLD}-{SAFE_THRESHOLD})",
    SafetyStatus.UNSAFE: f"Unsafe (< {MARGINAL_THRESHOLD})",
}


def evaluate_safety_status(factor: float) -> SafetyStatus:
    """Classify *factor*: safe ≥ 1.5, marginal ≥ 1.0, unsafe below."""
    if factor >= SAFE_THRESHOLD:
        return SafetyStatus.SAFE
    if factor >= MARGINAL_THRESHOLD:
        return SafetyStatus.MARGINAL
    return SafetyStatus.UNSAFE


def format_number(value: float, decimals: int = 2) -> str:
    """Fixed-point rendering used in derivation explanations."""
    return f"{value:.{decimals}f}"
