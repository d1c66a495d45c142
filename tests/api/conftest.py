"""
API test fixtures: the FastAPI app bound to the in-memory database.
"""

import pytest
from fastapi.testclient import TestClient

from timetrack.infrastructure.auth.dependencies import get_jwt_handler, get_user_directory
from timetrack.infrastructure.auth.jwt_handler import JWTHandler
from timetrack.infrastructure.db.database import get_db
from timetrack.infrastructure.web.dependencies import get_clock, get_task_directory
from timetrack.main import create_application


@pytest.fixture
def jwt():
    return JWTHandler(secret="api-test-secret", algorithm="HS256")


@pytest.fixture
def app(session, directory, clock, jwt):
    app = create_application()

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_task_directory] = lambda: directory
    app.dependency_overrides[get_user_directory] = lambda: directory
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_jwt_handler] = lambda: jwt
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth(jwt):
    """Authorization header for an actor."""

    def headers(actor):
        return {"Authorization": f"Bearer {jwt.create_token(actor.user_id)}"}

    return headers
