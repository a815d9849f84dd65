from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..items.models import Item
from .bounds import DEFAULT_BOUNDS, QualityBounds

logger = logging.getLogger(__name__)


class UpdateStrategy:
    """Base class for per-category end-of-day rules. ``apply`` mutates the item in place."""

    name = "strategy"

    def apply(self, item: Item) -> None:
        raise NotImplementedError


def age_one_day(item: Item, fresh_delta: int, expired_delta: int, bounds: QualityBounds) -> None:
    """
    Shared daily step: decrement sell_in, pick the rate from the updated
    sell_in, apply it once and clamp.

    The day the item crosses its sell-by date already uses ``expired_delta``.
    """
    before = item.quality
    item.sell_in -= 1
    delta = expired_delta if item.sell_in < 0 else fresh_delta
    item.quality = bounds.clamp(item.quality + delta)
    logger.debug(
        "Aged %s: sell_in=%d quality %d->%d (delta %+d)",
        item.name,
        item.sell_in,
        before,
        item.quality,
        delta,
    )


@dataclass
class StandardStrategy(UpdateStrategy):
    fresh_delta: int = -1
    expired_delta: int = -2
    bounds: QualityBounds = field(default=DEFAULT_BOUNDS)

    name = "standard"

    def apply(self, item: Item) -> None:
        age_one_day(item, self.fresh_delta, self.expired_delta, self.bounds)


@dataclass
class FastDegradingStrategy(UpdateStrategy):
    """Organic produce: twice the standard loss, four times once expired."""

    fresh_delta: int = -2
    expired_delta: int = -4
    bounds: QualityBounds = field(default=DEFAULT_BOUNDS)

    name = "fast_degrading"

    def apply(self, item: Item) -> None:
        age_one_day(item, self.fresh_delta, self.expired_delta, self.bounds)


@dataclass
class AppreciatingStrategy(UpdateStrategy):
    """Aged goods such as cheese gain quality, twice as fast past the sell-by date."""

    fresh_delta: int = 1
    expired_delta: int = 2
    bounds: QualityBounds = field(default=DEFAULT_BOUNDS)

    name = "appreciating"

    def apply(self, item: Item) -> None:
        age_one_day(item, self.fresh_delta, self.expired_delta, self.bounds)


@dataclass
class UnchangingStrategy(UpdateStrategy):
    """
    Shelf-stable goods. Writes nothing, not even a clamp, so a quality
    outside the usual bounds is kept as constructed.
    """

    name = "unchanging"

    def apply(self, item: Item) -> None:
        return None


STRATEGY_KINDS = {
    StandardStrategy.name: StandardStrategy,
    FastDegradingStrategy.name: FastDegradingStrategy,
    AppreciatingStrategy.name: AppreciatingStrategy,
    UnchangingStrategy.name: UnchangingStrategy,
}

__all__ = [
    "UpdateStrategy",
    "StandardStrategy",
    "FastDegradingStrategy",
    "AppreciatingStrategy",
    "UnchangingStrategy",
    "STRATEGY_KINDS",
    "age_one_day",
]
