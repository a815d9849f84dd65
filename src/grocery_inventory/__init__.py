"""
Grocery inventory package root.

The ageing engine lives in :mod:`grocery_inventory.engine`; category rules are
in :mod:`grocery_inventory.rules`. Display code stays in
:mod:`grocery_inventory.report` so the domain modules remain free of console
concerns.
"""

from .engine import InventoryEngine
from .items.models import Item

__version__ = "0.1.0"

__all__ = [
    "InventoryEngine",
    "Item",
    "__version__",
]
