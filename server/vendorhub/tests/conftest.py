import pytest
from fastapi.testclient import TestClient

from vendorhub.auth import CurrentUser, get_current_user
from vendorhub.config import Settings
from vendorhub.db import Database
from vendorhub.main import create_app


@pytest.fixture()
def app(request):
    database = Database("sqlite+pysqlite://")
    application = create_app(settings=Settings(database_url="sqlite+pysqlite://", env="test"), database=database)
    if not request.node.get_closest_marker("real_auth"):
        application.dependency_overrides[get_current_user] = lambda: CurrentUser(
            id=1,
            name="Test Admin",
            email="admin@vendorhub.local",
        )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
