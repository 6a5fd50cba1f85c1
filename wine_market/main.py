"""
Wine Market Application

Catalog browsing, search and filtering over a JSON wine dataset,
with per-user shopping carts, orders and profiles held in memory.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.config import Settings, get_settings
from .core.exceptions import WineMarketError
from .database import CartDatabase, OrderDatabase, ProfileDatabase, WineCatalog
from .routes import cart_router, orders_router, profiles_router, wines_router
from .services import CatalogService

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = str(first.get("loc", ["request"])[-1])
    if first.get("type") == "missing":
        return f"{field} is required"
    return f"Invalid {field}: {first.get('msg', 'invalid value')}"


async def wine_market_error_handler(request: Request, exc: WineMarketError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = _describe_validation_error(exc)
    logger.info(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(status_code=400, content={"message": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": str(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; stores are created in the lifespan handler"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        if not settings.catalog_exists:
            logger.warning(f"Catalog file not found: {settings.catalog_path}")

        wine_catalog = WineCatalog(settings.catalog_path)
        catalog_service = CatalogService(
            wine_catalog,
            default_limit=settings.default_page_limit,
            recommendation_min_points=settings.recommendation_min_points,
            recommendation_count=settings.recommendation_count,
            similar_wines_count=settings.similar_wines_count,
        )
        cart_db = CartDatabase(
            catalog_service,
            tax_rate=settings.tax_rate,
            shipping_fee=settings.shipping_fee,
        )

        app.state.settings = settings
        app.state.wine_catalog = wine_catalog
        app.state.catalog_service = catalog_service
        app.state.cart_db = cart_db
        app.state.order_db = OrderDatabase(cart_db)
        app.state.profile_db = ProfileDatabase(catalog_service)
        yield
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Wine catalog, shopping cart, orders and user profile API",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WineMarketError, wine_market_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Include API routers
    app.include_router(wines_router)
    app.include_router(cart_router)
    app.include_router(orders_router)
    app.include_router(profiles_router)

    @app.get("/")
    async def home():
        """API index"""
        return {
            "message": f"Welcome to {settings.app_name} API",
            "docs": "/docs",
            "endpoints": {
                "wines": "/api/wines",
                "cart": "/api/cart/{userId}",
                "orders": "/api/orders/{userId}",
                "users": "/api/users/{userId}/profile",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "wine-market"}

    return app


configure_logging(get_settings().log_level)

app = create_app()


def run() -> None:
    """Run the server with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wine_market.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
