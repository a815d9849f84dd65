from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .config.loader import InventoryConfig
from .items.models import Item
from .rules.selector import StrategySelector

logger = logging.getLogger(__name__)


class InventoryEngine:
    """
    Owns the inventory and runs the end-of-day update.

    - Items passed in are copied, so later changes to the caller's objects do
      not reach the engine.
    - Snapshots handed out are copies too; mutating them does not change the
      engine's state.
    - Items at or past ``config.removal_sell_in`` (default -5) are dropped
      after each day's update.
    """

    def __init__(
        self,
        items: Iterable[Item] = (),
        selector: Optional[StrategySelector] = None,
        config: Optional[InventoryConfig] = None,
    ) -> None:
        self._config = config or InventoryConfig()
        self._selector = selector or StrategySelector.from_config(self._config)
        self._items: List[Item] = [item.copy() for item in items]
        self._day = 0

    @property
    def day(self) -> int:
        """Number of days advanced so far."""
        return self._day

    def __len__(self) -> int:
        return len(self._items)

    def get_items(self) -> List[Item]:
        return [item.copy() for item in self._items]

    def advance_day(self) -> List[Item]:
        """Age every item by one day, drop expired stock and return a snapshot."""
        for item in self._items:
            strategy = self._selector.resolve(item)
            logger.debug("Applying %s to %s", strategy.name, item.name)
            strategy.apply(item)

        kept: List[Item] = []
        for item in self._items:
            if item.sell_in <= self._config.removal_sell_in:
                logger.info("Removed %s from inventory (sell_in=%d)", item.name, item.sell_in)
            else:
                kept.append(item)
        self._items = kept
        self._day += 1
        logger.debug("Day %d complete; %d items remain", self._day, len(self._items))
        return self.get_items()
