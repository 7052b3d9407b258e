"""End-to-end tests for the error envelope."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from qanda.domain.error import NotFoundError
from qanda.interface.api.app import create_app
from tests.di import build_test_container


async def fail_unexpectedly():
    raise RuntimeError("SELECT secret FROM users")


async def fail_missing():
    raise NotFoundError("Question", "42")


async def fail_duplicate():
    raise IntegrityError("INSERT INTO topics", {}, Exception("duplicate key"))


@pytest.fixture
def client():
    """Client that turns unhandled errors into responses instead of raising."""
    app = create_app(container=build_test_container())
    app.add_api_route("/failing/unexpected", fail_unexpectedly)
    app.add_api_route("/failing/missing", fail_missing)
    app.add_api_route("/failing/duplicate", fail_duplicate)
    return TestClient(app, raise_server_exceptions=False)


class TestErrorEnvelope:
    """Errors raised by handlers are reported in the envelope."""

    def test_unexpected_error_hides_internals(self, client):
        response = client.get("/failing/unexpected")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}
        assert "secret" not in response.text

    def test_domain_error_keeps_its_message(self, client):
        response = client.get("/failing/missing")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Question not found"}

    def test_uniqueness_violation_is_conflict(self, client):
        response = client.get("/failing/duplicate")

        assert response.status_code == 409
        assert response.json() == {"success": False, "error": "Resource already exists"}

    def test_unknown_route_uses_envelope(self, client):
        response = client.get("/no-such-route")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}
