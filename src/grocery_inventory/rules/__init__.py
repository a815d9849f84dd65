'''
Rules package: quality bounds, per-category ageing strategies and the selector
that maps an item name to its strategy.
'''
from .bounds import QUALITY_MAX, QUALITY_MIN, QualityBounds, clamp
from .selector import PrefixRule, StrategySelector
from .strategies import (
    AppreciatingStrategy,
    FastDegradingStrategy,
    StandardStrategy,
    UnchangingStrategy,
    UpdateStrategy,
)

__all__ = [
    'QUALITY_MAX',
    'QUALITY_MIN',
    'QualityBounds',
    'clamp',
    'PrefixRule',
    'StrategySelector',
    'UpdateStrategy',
    'StandardStrategy',
    'FastDegradingStrategy',
    'AppreciatingStrategy',
    'UnchangingStrategy',
]
