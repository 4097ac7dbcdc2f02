from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from sqlalchemy.engine import Engine

from storefront.config import Settings, get_settings
from storefront.database.database import create_db_engine, create_session_factory
from storefront.models.database_models import Base
from storefront.routes import admin, auth, cart, orders, product, users
from storefront.routes.responses import validation_error_response
from storefront.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """Build the application.

    The database engine is created at startup unless one is passed in, and its
    session factory is kept on ``app.state`` for the ``get_db`` dependency.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_engine = engine or create_db_engine(settings.database_url)
        app.state.session_factory = create_session_factory(db_engine)
        if settings.CREATE_TABLES:
            Base.metadata.create_all(db_engine)
        logger.info("Connected to database {}", settings.database_target)
        logger.info("Listening on port {}", settings.PORT)

        yield

        if engine is None:
            db_engine.dispose()

    app = FastAPI(title="Storefront API", lifespan=lifespan)

    app.add_exception_handler(RequestValidationError, validation_error_response)

    app.add_middleware(GZipMiddleware, minimum_size=settings.GZIP_MINIMUM_SIZE)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(product.router)
    app.include_router(users.router)
    app.include_router(cart.router)
    app.include_router(admin.router)
    app.include_router(orders.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Hello World!"

    return app


app = create_app()
