"""End-to-end tests for asking, answering and voting."""

import pytest
from fastapi.testclient import TestClient

from qanda.interface.api.app import create_app
from tests.conftest import auth_header, make_user
from tests.di import build_test_container


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    return TestClient(create_app(container=build_test_container()))


@pytest.fixture
def alice(jwt_service):
    return auth_header(jwt_service, make_user("Alice"))


@pytest.fixture
def bob(jwt_service):
    return auth_header(jwt_service, make_user("Bob"))


def ask_question(client, headers, **overrides) -> dict:
    body = {
        "title": "Why is the sky blue?",
        "content": "Rayleigh scattering, but why exactly?",
        **overrides,
    }
    response = client.post("/questions", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestQuestionVoteFlow:
    """End-to-end tests for the question and vote lifecycle."""

    def test_upvote_then_toggle_off(self, client, alice, bob):
        """Upvoting twice records the vote and then removes it."""
        # Arrange
        question = ask_question(client, alice)
        vote = {"itemId": question["id"], "itemType": "question", "voteType": "upvote"}

        # Act
        first = client.post("/votes", json=vote, headers=bob)
        second = client.post("/votes", json=vote, headers=bob)

        # Assert
        assert first.status_code == 200
        first_body = first.json()
        assert first_body["success"] is True
        assert first_body["message"] == "Vote recorded successfully"
        assert first_body["data"]["voteCounts"] == {"upvotes": 1, "downvotes": 0, "net": 1}
        assert first_body["data"]["userVoteType"] == "upvote"
        assert first_body["data"]["vote"]["voteType"] == "upvote"

        assert second.status_code == 200
        second_body = second.json()
        assert second_body["message"] == "Vote removed successfully"
        assert second_body["data"]["voteCounts"] == {"upvotes": 0, "downvotes": 0, "net": 0}
        assert second_body["data"]["userVoteType"] is None
        assert second_body["data"]["vote"] is None

    def test_viewer_sees_own_vote(self, client, alice, bob):
        # Arrange
        question = ask_question(client, alice)
        client.post(
            "/votes",
            json={"itemId": question["id"], "itemType": "question", "voteType": "downvote"},
            headers=bob,
        )

        # Act
        as_bob = client.get(f"/questions/{question['id']}", headers=bob).json()["data"]
        anonymous = client.get(f"/questions/{question['id']}").json()["data"]

        # Assert
        assert as_bob["userVote"] == "downvote"
        assert as_bob["voteCounts"]["net"] == -1
        assert anonymous["userVote"] is None
        assert anonymous["voteCounts"]["downvotes"] == 1

    def test_question_shows_registered_author(self, client, alice):
        question = ask_question(client, alice)

        assert question["author"]["name"] == "Alice"
        assert question["topics"] == []
        assert question["answerCount"] == 0
        assert question["voteCounts"] == {"upvotes": 0, "downvotes": 0, "net": 0}

    def test_answer_and_list_answers(self, client, alice, bob):
        # Arrange
        question = ask_question(client, alice)

        # Act
        created = client.post(
            f"/questions/{question['id']}/answers",
            json={"content": "Shorter wavelengths scatter more."},
            headers=bob,
        )
        listed = client.get(f"/questions/{question['id']}/answers")

        # Assert
        assert created.status_code == 201
        assert created.json()["message"] == "Answer created successfully"
        body = listed.json()
        assert [a["id"] for a in body["data"]] == [created.json()["data"]["id"]]
        assert body["pagination"] == {"page": 1, "limit": 20, "total": 1, "totalPages": 1}

    def test_question_detail_includes_answers(self, client, alice, bob):
        question = ask_question(client, alice)
        client.post(
            f"/questions/{question['id']}/answers",
            json={"content": "Shorter wavelengths scatter more."},
            headers=bob,
        )

        detail = client.get(f"/questions/{question['id']}").json()["data"]

        assert detail["answerCount"] == 1
        assert detail["answers"][0]["author"]["name"] == "Bob"

    def test_only_author_can_edit(self, client, alice, bob):
        # Arrange
        question = ask_question(client, alice)

        # Act
        forbidden = client.put(
            f"/questions/{question['id']}", json={"title": "Hijacked title"}, headers=bob
        )
        allowed = client.put(
            f"/questions/{question['id']}",
            json={"title": "Why is the sky blue at noon?"},
            headers=alice,
        )

        # Assert
        assert forbidden.status_code == 403
        assert forbidden.json() == {
            "success": False,
            "error": "You can only edit your own questions",
        }
        assert allowed.status_code == 200
        assert allowed.json()["data"]["title"] == "Why is the sky blue at noon?"
        assert allowed.json()["data"]["content"] == question["content"]

    def test_delete_cascades(self, client, alice, bob):
        # Arrange
        question = ask_question(client, alice)
        answer = client.post(
            f"/questions/{question['id']}/answers",
            json={"content": "Shorter wavelengths scatter more."},
            headers=bob,
        ).json()["data"]

        # Act
        deleted = client.delete(f"/questions/{question['id']}", headers=alice)

        # Assert
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Question deleted successfully"
        missing = client.get(f"/questions/{question['id']}")
        assert missing.status_code == 404
        assert missing.json() == {"success": False, "error": "Question not found"}
        assert client.get(f"/answers/{answer['id']}").status_code == 404

    def test_list_questions_paginates(self, client, alice):
        # Arrange
        for i in range(3):
            ask_question(client, alice, title=f"Question number {i}")

        # Act
        response = client.get("/questions", params={"page": 2, "limit": 2})

        # Assert
        body = response.json()
        assert response.status_code == 200
        assert len(body["data"]) == 1
        assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "totalPages": 2}

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 51}])
    def test_list_questions_rejects_bad_pagination(self, client, params):
        response = client.get("/questions", params=params)

        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_create_requires_authentication(self, client):
        response = client.post(
            "/questions",
            json={
                "title": "Why is the sky blue?",
                "content": "Rayleigh scattering, but why exactly?",
            },
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Authentication required"}

    def test_anonymous_invalid_body_is_unauthenticated(self, client):
        response = client.post("/questions", json={"title": "Hi", "content": "short"})

        assert response.status_code == 401

    def test_invalid_body_is_reported_per_field(self, client, alice):
        response = client.post(
            "/questions", json={"title": "Hi", "content": "short"}, headers=alice
        )

        body = response.json()
        assert response.status_code == 400
        assert body["error"] == "Invalid request data"
        fields = {d["field"] for d in body["details"]}
        assert {"body.title", "body.content"} <= fields

    def test_answer_edit_requires_content(self, client, alice, bob):
        question = ask_question(client, alice)
        answer = client.post(
            f"/questions/{question['id']}/answers",
            json={"content": "Shorter wavelengths scatter more."},
            headers=bob,
        ).json()["data"]

        response = client.put(f"/answers/{answer['id']}", json={}, headers=bob)

        assert response.status_code == 400
        assert {d["field"] for d in response.json()["details"]} == {"body.content"}
