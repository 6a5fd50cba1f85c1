# Database modules

from .wines import WineCatalog, parse_wine_id
from .carts import CartDatabase
from .orders import OrderDatabase
from .profiles import ProfileDatabase

__all__ = [
    "WineCatalog",
    "parse_wine_id",
    "CartDatabase",
    "OrderDatabase",
    "ProfileDatabase",
]
