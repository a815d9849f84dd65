from __future__ import annotations

from dataclasses import dataclass

QUALITY_MIN = 0
QUALITY_MAX = 25


def clamp(value: int, lo: int, hi: int) -> int:
    """Clamp an integer between lo and hi inclusive."""
    return max(lo, min(value, hi))


@dataclass(frozen=True)
class QualityBounds:
    """Inclusive quality range enforced by the ageing strategies."""

    minimum: int = QUALITY_MIN
    maximum: int = QUALITY_MAX

    def clamp(self, value: int) -> int:
        return clamp(value, self.minimum, self.maximum)

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


DEFAULT_BOUNDS = QualityBounds()
