# API Routes

from .wines import router as wines_router
from .cart import router as cart_router
from .orders import router as orders_router
from .profiles import router as profiles_router

__all__ = ["wines_router", "cart_router", "orders_router", "profiles_router"]
