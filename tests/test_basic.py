# Basic tests
from fastapi.testclient import TestClient

from jotter.main import app

client = TestClient(app)


def test_root_endpoint():
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Jotter API"}


def test_health_endpoint():
    """Liveness probe doesn't need the database."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_routes_registered():
    paths = {route.path for route in app.routes}
    for expected in (
        "/api/auth/register",
        "/api/auth/login",
        "/api/auth/me",
        "/api/notes/",
        "/api/notes/{note_id}",
        "/api/health/",
        "/api/health/database",
    ):
        assert expected in paths


def test_models_import():
    """Test that models can be imported."""
    from jotter.core.models import Note, User

    assert User.__tablename__ == "users"
    assert Note.__tablename__ == "notes"
