import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from app.config.database_config import Base, get_db
from app.config.env_config import settings
from app.main import app
from app.utils.auth_utils import generate_jwt


def make_token(user_id: str) -> str:
    return generate_jwt(
        data={"sub": user_id},
        expire_minutes=15,
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'forms.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )

    # Writers take the lock up front so concurrent sessions queue instead of deadlocking
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {make_token(user_id)}"}

    return _headers
