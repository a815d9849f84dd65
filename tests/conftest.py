import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from grocery_inventory.engine import InventoryEngine  # noqa: E402
from grocery_inventory.items.models import Item  # noqa: E402


@pytest.fixture()
def age_one():
    """Run a single item through one day and return the surviving snapshot."""

    def _run(name: str, sell_in: int, quality: int):
        engine = InventoryEngine([Item(name, sell_in, quality)])
        return engine.advance_day()

    return _run
