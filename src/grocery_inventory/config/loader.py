from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib.resources import files as resource_files
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from ..exceptions import ConfigError
from ..rules.bounds import QUALITY_MAX, QUALITY_MIN
from ..rules.strategies import STRATEGY_KINDS

logger = logging.getLogger(__name__)

DEFAULT_REMOVAL_SELL_IN = -5
RATE_KEYS = frozenset({"fresh", "expired"})


@dataclass(frozen=True)
class InventoryConfig:
    """
    Rules configuration for the ageing engine.

    - exact_names: item name -> strategy kind, matched case-insensitively.
    - prefixes: ordered (prefix, kind) pairs tried after exact names.
    - rates: optional per-kind overrides, e.g. ``{"standard": {"fresh": -1, "expired": -2}}``.
    - removal_sell_in: items whose sell_in is at or below this value are dropped.
    """

    quality_min: int = QUALITY_MIN
    quality_max: int = QUALITY_MAX
    removal_sell_in: int = DEFAULT_REMOVAL_SELL_IN
    exact_names: Dict[str, str] = field(default_factory=lambda: {
        "Cheddar Cheese": "appreciating",
        "Instant Ramen": "unchanging",
    })
    prefixes: List[Tuple[str, str]] = field(default_factory=lambda: [("organic", "fast_degrading")])
    default_kind: str = "standard"
    rates: Dict[str, Dict[str, int]] = field(default_factory=dict)


def load_inventory_config(path: Optional[str] = None) -> InventoryConfig:
    """Load the rules configuration from YAML.

    If path is None, loads the embedded default resource at
    grocery_inventory/config/rules.yaml.
    """
    if path is None:
        data = resource_files("grocery_inventory.config").joinpath("rules.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded rules config resource")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except OSError as exc:
            raise ConfigError(f"Cannot read rules config {path}: {exc}") from exc
        logger.debug("Loaded rules config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in rules config: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Rules config must be a mapping at the top level")

    config = config_from_dict(raw)
    logger.info(
        "Rules config: %d exact names, %d prefixes, default=%s, quality=[%d, %d]",
        len(config.exact_names),
        len(config.prefixes),
        config.default_kind,
        config.quality_min,
        config.quality_max,
    )
    return config


def config_from_dict(raw: Mapping[str, Any]) -> InventoryConfig:
    """Build an InventoryConfig from parsed data. Missing keys fall back to defaults."""
    defaults = InventoryConfig()
    try:
        quality_min = int(raw.get("quality_min", defaults.quality_min))
        quality_max = int(raw.get("quality_max", defaults.quality_max))
        removal_sell_in = int(raw.get("removal_sell_in", defaults.removal_sell_in))
        if "exact_names" in raw:
            exact_names = {
                str(name): _check_kind(kind)
                for name, kind in (raw.get("exact_names") or {}).items()
            }
        else:
            exact_names = dict(defaults.exact_names)
        if "prefixes" in raw:
            prefixes = [
                (str(entry["prefix"]), _check_kind(entry["kind"]))
                for entry in (raw.get("prefixes") or [])
            ]
        else:
            prefixes = list(defaults.prefixes)
        default_kind = _check_kind(raw.get("default_kind", defaults.default_kind))
        rates = {
            _check_kind(kind): _parse_rates(kind, values)
            for kind, values in (raw.get("rates") or {}).items()
        }
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ConfigError(f"Malformed rules config: {exc}") from exc

    if quality_min > quality_max:
        raise ConfigError(f"quality_min ({quality_min}) is greater than quality_max ({quality_max})")

    return InventoryConfig(
        quality_min=quality_min,
        quality_max=quality_max,
        removal_sell_in=removal_sell_in,
        exact_names=exact_names,
        prefixes=prefixes,
        default_kind=default_kind,
        rates=rates,
    )


def _check_kind(kind: Any) -> str:
    kind = str(kind)
    if kind not in STRATEGY_KINDS:
        raise ConfigError(f"Unknown strategy kind: {kind!r} (expected one of {sorted(STRATEGY_KINDS)})")
    return kind


def _parse_rates(kind: str, values: Mapping[str, Any]) -> Dict[str, int]:
    rates = {str(k): int(v) for k, v in values.items()}
    if kind == "unchanging" and rates:
        logger.warning("Rate overrides for 'unchanging' have no effect: %s", rates)
    unknown = sorted(set(rates) - RATE_KEYS)
    if unknown:
        logger.warning("Ignoring unknown rate keys for %r: %s", kind, unknown)
    return rates
