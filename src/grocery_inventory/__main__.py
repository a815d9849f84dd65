from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config.loader import load_inventory_config
from .engine import InventoryEngine
from .exceptions import ConfigError
from .items.models import Item
from .report import render_table

logger = logging.getLogger(__name__)


def demo_items() -> list[Item]:
    return [
        Item("Apple", 10, 10),
        Item("Banana", 7, 9),
        Item("Strawberry", 5, 10),
        Item("Cheddar Cheese", 10, 16),
        Item("Instant Ramen", 0, 5),
        Item("Organic Avocado", 5, 16),
    ]


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="grocery-inventory",
        description="Simulate end-of-day ageing of the demo grocery inventory",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--days", type=int, default=2, help="Number of days to simulate")
    parser.add_argument("--config", default=None, help="Path to a rules YAML file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_inventory_config(args.config)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 2

    engine = InventoryEngine(demo_items(), config=config)
    for day in range(args.days):
        print(f"Day {day}  ---------------------------------")
        print(render_table(engine.get_items()))
        print()
        engine.advance_day()
    return 0


if __name__ == "__main__":
    sys.exit(main())
