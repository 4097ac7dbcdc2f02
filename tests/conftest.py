"""Shared test fixtures"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from storefront.config import Settings
from storefront.database.database import create_session_factory
from storefront.main import create_app
from storefront.models.database_models import Base
from storefront.services.product import ProductService


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every session of a test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def service(db):
    return ProductService(db)


@pytest.fixture
def mug():
    """Arguments for creating a sample product"""
    return {
        "name": "Mug",
        "description": "Ceramic mug",
        "price": 9.99,
        "category_id": 3,
        "image_url": "http://x/mug.png",
    }


@pytest.fixture
def settings():
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING", LOG_TO_FILE=False)


@pytest.fixture
def client(settings, engine):
    app = create_app(settings, engine=engine)
    with TestClient(app) as client:
        yield client
