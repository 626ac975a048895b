# storefront/main.py
from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.config import Settings, get_settings
from storefront.core.errors import ApiError, api_error_handler, store_error_handler
from storefront.database import Database

# Import models so SQLModel metadata is populated before create_all()
from storefront.models import user as _user_models  # noqa: F401
from storefront.models import ticket as _ticket_models  # noqa: F401
from storefront.models import cart as _cart_models  # noqa: F401
from storefront.models import category as _category_models  # noqa: F401
from storefront.models import product as _product_models  # noqa: F401

# Routers
from storefront.routers.auth import router as auth_router
from storefront.routers.users import router as users_router
from storefront.routers.categories import router as categories_router
from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router
from storefront.routers.tickets import router as tickets_router

logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Open the store and create tables. On failure, release the
        engine and abort startup so no route serves a broken store.

    Shutdown:
      - Dispose the engine (closes pooled connections).
    """
    settings: Settings = app.state.settings
    db = Database(settings.DATABASE_URL)

    logger.info("Startup: connecting to the store...")
    try:
        db.create_all()
    except Exception as e:
        logger.error(f"Startup: store connection FAILED: {e}")
        db.dispose()
        raise
    logger.info("Startup: store connection OK, tables verified.")

    app.state.db = db
    try:
        yield
    finally:
        logger.info("Shutdown: releasing store connections.")
        db.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the API.

    Run with:

        uvicorn storefront.main:create_app --factory
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    for router in (
        auth_router,
        users_router,
        categories_router,
        products_router,
        cart_router,
        tickets_router,
    ):
        app.include_router(router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "storefront-api"}

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "storefront.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )
