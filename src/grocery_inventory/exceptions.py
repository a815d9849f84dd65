class GroceryInventoryError(Exception):
    """Base exception for the grocery inventory project."""


class ConfigError(GroceryInventoryError):
    """Raised when the rules configuration is malformed (unknown kind, bad bounds, etc.)."""
