from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Item:
    """
    A grocery item tracked by the inventory.

    ``name`` is the only signal used to pick the item's ageing rule.
    ``sell_in`` counts days left before the sell-by date and goes negative
    once it has passed. ``quality`` is kept within bounds by the rules, except
    for the unchanging category which never touches it.
    """

    name: str
    sell_in: int
    quality: int

    def copy(self) -> "Item":
        return replace(self)
