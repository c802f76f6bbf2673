import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from shorty.core.config import Settings
from shorty.db.Models.models import Base
from shorty.db.memory import InMemoryURLStore
from shorty.db.repository import SQLURLStore
from shorty.main import create_app


# Create in-memory SQLite database for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def sql_store():
    """SQLURLStore over a fresh in-memory SQLite database."""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    store = SQLURLStore(engine)
    try:
        yield store
    finally:
        Base.metadata.drop_all(bind=engine)
        store.close()


@pytest.fixture
def memory_store():
    return InMemoryURLStore()


@pytest.fixture(params=["sql", "memory"])
def store(request):
    """Runs a test once per URLStore implementation."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def settings():
    return Settings(_env_file=None, DATABASE_URL="memory://", HTTP_USER=None)


@pytest.fixture
def client(settings, sql_store):
    """Creates a test client backed by the SQLite test store."""
    app = create_app(settings, store=sql_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "https://github.com/user/repo",
    ]
