"""End-to-end tests for the topics API and service endpoints."""

import pytest
from fastapi.testclient import TestClient

from qanda.interface.api.app import create_app
from tests.conftest import auth_header, make_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    return TestClient(create_app(container=build_test_container()))


def create_topic(client, **body) -> dict:
    response = client.post("/topics", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestTopicsApi:
    """Topic creation, listing and lookup."""

    def test_create_normalizes_name_and_slug(self, client):
        topic = create_topic(client, name="  Machine Learning  ")

        assert topic["name"] == "machine learning"
        assert topic["slug"] == "machine-learning"
        assert topic["questionCount"] == 0

    def test_duplicate_is_conflict(self, client):
        create_topic(client, name="Physics")

        response = client.post("/topics", json={"name": "physics"})

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "error": "Topic with this name or slug already exists",
        }

    def test_description_too_long_is_rejected(self, client):
        response = client.post("/topics", json={"name": "Physics", "description": "x" * 201})

        assert response.status_code == 400

    def test_list_with_counts_and_search(self, client, jwt_service):
        # Arrange
        physics = create_topic(client, name="Physics")
        create_topic(client, name="Poetry")
        client.post(
            "/questions",
            json={
                "title": "What is entropy?",
                "content": "Intuition beyond the textbook formula.",
                "topicIds": [physics["id"]],
            },
            headers=auth_header(jwt_service, make_user()),
        )

        # Act
        listed = client.get("/topics").json()["data"]
        searched = client.get("/topics", params={"search": "PHY"}).json()["data"]

        # Assert
        assert [(t["slug"], t["questionCount"]) for t in listed] == [
            ("physics", 1),
            ("poetry", 0),
        ]
        assert [t["slug"] for t in searched] == ["physics"]

    def test_get_topic_with_questions(self, client, jwt_service):
        # Arrange
        topic = create_topic(client, name="Arts & Culture", slug="arts-culture")
        client.post(
            "/questions",
            json={
                "title": "Who painted the Night Watch?",
                "content": "And why is it so famous today?",
                "topicIds": [topic["id"]],
            },
            headers=auth_header(jwt_service, make_user()),
        )

        # Act
        response = client.get("/topics/arts-culture")

        # Assert
        body = response.json()
        assert response.status_code == 200
        assert body["message"] == "Topic and questions retrieved successfully"
        assert body["data"]["topic"]["questionCount"] == 1
        assert body["data"]["questions"][0]["topics"] == ["arts & culture"]
        assert body["pagination"]["total"] == 1

    def test_unknown_topic_is_not_found(self, client):
        response = client.get("/topics/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Topic not found"}

    def test_unknown_topic_id_on_question_is_rejected(self, client, jwt_service):
        response = client.post(
            "/questions",
            json={
                "title": "What is entropy?",
                "content": "Intuition beyond the textbook formula.",
                "topicIds": ["00000000-0000-0000-0000-000000000001"],
            },
            headers=auth_header(jwt_service, make_user()),
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Topics not found")


class TestServiceEndpoints:
    """Health check and the error envelope for unknown routes."""

    def test_health(self, client):
        response = client.get("/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["version"] == "0.1.0"
        assert "timestamp" in body

    def test_unknown_route_uses_error_envelope(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    @pytest.mark.parametrize("path", ["/questions/not-a-uuid", "/answers/not-a-uuid"])
    def test_malformed_path_id_is_bad_request(self, client, path):
        response = client.get(path)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request data"
