import pytest
from fastapi.testclient import TestClient

from readcoach.config import settings
from readcoach.db import init_engine, create_tables, SessionLocal


@pytest.fixture
def db_engine(tmp_path):
    engine = init_engine(str(tmp_path / "readcoach_test.db"))
    create_tables()
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_engine):
    from readcoach.main import app
    return TestClient(app)


@pytest.fixture
def sequence_mode(monkeypatch):
    monkeypatch.setattr(settings, "ALIGNMENT_MODE", "sequence")
