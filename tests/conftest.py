# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from ticketdesk.core.config import Settings
from ticketdesk.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(_env_file=None, DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def drop_table(client):
    def _drop(name: str):
        with client.app.state.db.engine.begin() as connection:
            connection.exec_driver_sql(f"DROP TABLE {name}")

    return _drop
