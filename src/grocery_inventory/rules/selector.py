from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional

from ..exceptions import ConfigError
from ..items.models import Item
from .bounds import QualityBounds
from .strategies import (
    STRATEGY_KINDS,
    AppreciatingStrategy,
    FastDegradingStrategy,
    StandardStrategy,
    UnchangingStrategy,
    UpdateStrategy,
)

if TYPE_CHECKING:
    from ..config.loader import InventoryConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrefixRule:
    """Case-insensitive name prefix mapped to a strategy."""

    prefix: str
    strategy: UpdateStrategy

    def matches(self, name: str) -> bool:
        return name.lower().startswith(self.prefix.lower())


class StrategySelector:
    """
    Resolves an item to exactly one UpdateStrategy.

    Precedence is exact name (case-insensitive dict lookup), then the first
    matching prefix rule in order, then the default strategy. A name that
    matches nothing is not an error; it simply gets the default.

    The tables are fixed at construction. New categories are added by passing
    more entries, not by changing ``resolve``.
    """

    def __init__(
        self,
        named: Optional[Mapping[str, UpdateStrategy]] = None,
        prefixes: Optional[Iterable[PrefixRule]] = None,
        default: Optional[UpdateStrategy] = None,
    ) -> None:
        if named is None:
            named = {
                "Cheddar Cheese": AppreciatingStrategy(),
                "Instant Ramen": UnchangingStrategy(),
            }
        if prefixes is None:
            prefixes = [PrefixRule("organic", FastDegradingStrategy())]
        self._named: Dict[str, UpdateStrategy] = {}
        for name, strategy in named.items():
            key = name.lower()
            if key in self._named:
                logger.warning("Duplicate strategy entry for %r; last one wins", name)
            self._named[key] = strategy
        self._prefixes: List[PrefixRule] = list(prefixes)
        self._default: UpdateStrategy = default if default is not None else StandardStrategy()

    @classmethod
    def from_config(cls, config: "InventoryConfig") -> "StrategySelector":
        bounds = QualityBounds(config.quality_min, config.quality_max)
        cache: Dict[str, UpdateStrategy] = {}

        def build(kind: str) -> UpdateStrategy:
            if kind not in cache:
                cache[kind] = build_strategy(kind, bounds, config.rates.get(kind))
            return cache[kind]

        return cls(
            named={name: build(kind) for name, kind in config.exact_names.items()},
            prefixes=[PrefixRule(prefix, build(kind)) for prefix, kind in config.prefixes],
            default=build(config.default_kind),
        )

    def resolve(self, item: Item) -> UpdateStrategy:
        return self.resolve_name(item.name)

    def resolve_name(self, name: str) -> UpdateStrategy:
        named = self._named.get(name.lower())
        if named is not None:
            return named
        for rule in self._prefixes:
            if rule.matches(name):
                return rule.strategy
        return self._default


def build_strategy(
    kind: str,
    bounds: QualityBounds,
    rates: Optional[Mapping[str, int]] = None,
) -> UpdateStrategy:
    """Instantiate the strategy registered under ``kind`` with optional rate overrides."""
    try:
        strategy_cls = STRATEGY_KINDS[kind]
    except KeyError as exc:
        raise ConfigError(f"Unknown strategy kind: {kind!r}") from exc
    if strategy_cls is UnchangingStrategy:
        return UnchangingStrategy()
    kwargs: Dict[str, object] = {"bounds": bounds}
    if rates:
        if "fresh" in rates:
            kwargs["fresh_delta"] = int(rates["fresh"])
        if "expired" in rates:
            kwargs["expired_delta"] = int(rates["expired"])
    return strategy_cls(**kwargs)
