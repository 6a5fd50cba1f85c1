# Core modules

from .config import Settings, get_settings
from .exceptions import (
    WineMarketError,
    NotFoundError,
    WineNotFoundError,
    CartItemNotFoundError,
    OrderNotFoundError,
    ValidationError,
    OrderStateError,
    DataLoadError,
)

__all__ = [
    "Settings",
    "get_settings",
    "WineMarketError",
    "NotFoundError",
    "WineNotFoundError",
    "CartItemNotFoundError",
    "OrderNotFoundError",
    "ValidationError",
    "OrderStateError",
    "DataLoadError",
]
