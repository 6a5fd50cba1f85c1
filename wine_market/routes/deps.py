"""FastAPI dependencies exposing the stores held on app.state"""

from fastapi import Request

from ..database.carts import CartDatabase
from ..database.orders import OrderDatabase
from ..database.profiles import ProfileDatabase
from ..database.wines import WineCatalog
from ..services.catalog import CatalogService


def get_wine_catalog(request: Request) -> WineCatalog:
    return request.app.state.wine_catalog


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_cart_db(request: Request) -> CartDatabase:
    return request.app.state.cart_db


def get_order_db(request: Request) -> OrderDatabase:
    return request.app.state.order_db


def get_profile_db(request: Request) -> ProfileDatabase:
    return request.app.state.profile_db
