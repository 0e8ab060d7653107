import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from civiltech.core.config import Settings
from civiltech.db.base import create_schema
from civiltech.db.session import build_session_factory
from civiltech.main import create_app


def make_engine():
    # One shared in-memory connection so every session sees the same data
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(
        DATABASE_URL=None,
        USE_SQLITE=True,
        UPLOAD_DIR=str(upload_dir),
        LOG_JSON=False,
    )


@pytest.fixture
def engine():
    engine = make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def client(settings, engine):
    app = create_app(settings=settings, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def core_only_client(settings, engine):
    """A deployment whose schema predates the GIS and documents tables."""
    create_schema(engine, include_optional=False)
    core_settings = settings.model_copy(update={"AUTO_CREATE_DB": False})
    app = create_app(settings=core_settings, engine=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(engine):
    create_schema(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def company_id(client):
    res = client.post("/api/companies", json={"company_name": "Tower Builders", "type": "Contractor"})
    return res.json()["id"]
