"""End-to-end tests for the votes API."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from qanda.interface.api.app import create_app
from tests.conftest import auth_header, make_user
from tests.di import build_test_container

SOME_ID = "00000000-0000-0000-0000-000000000001"


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory container."""
    return TestClient(create_app(container=build_test_container()))


@pytest.fixture
def voter(jwt_service):
    user = make_user("Voter")
    return user, auth_header(jwt_service, user)


@pytest.fixture
def question_id(client, jwt_service):
    response = client.post(
        "/questions",
        json={
            "title": "Is light a wave?",
            "content": "Or a particle, or both at once?",
        },
        headers=auth_header(jwt_service, make_user("Author")),
    )
    return response.json()["data"]["id"]


def upvote(client, headers, item_id, item_type="question"):
    return client.post(
        "/votes",
        json={"itemId": item_id, "itemType": item_type, "voteType": "upvote"},
        headers=headers,
    )


class TestCastVote:
    """POST /votes."""

    def test_requires_authentication(self, client, question_id):
        response = client.post(
            "/votes",
            json={"itemId": question_id, "itemType": "question", "voteType": "upvote"},
        )

        assert response.status_code == 401
        assert response.json()["success"] is False

    def test_anonymous_invalid_body_is_unauthenticated(self, client):
        response = client.post(
            "/votes", json={"itemId": SOME_ID, "itemType": "poll", "voteType": "upvote"}
        )

        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Authentication required"}

    def test_token_in_cookie_is_accepted(self, client, question_id, jwt_service):
        user = make_user("Cookie Voter")
        cookie_client = TestClient(
            client.app, cookies={"auth_token": jwt_service.create_token(user.user_id)}
        )

        response = cookie_client.post(
            "/votes",
            json={"itemId": question_id, "itemType": "question", "voteType": "upvote"},
        )

        assert response.status_code == 200
        assert response.json()["data"]["vote"]["userId"] == str(user.user_id)

    def test_unknown_item_is_not_found(self, client, voter):
        _, headers = voter

        response = upvote(client, headers, str(uuid4()), item_type="answer")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Answer not found"}

    @pytest.mark.parametrize(
        "body",
        [
            {"itemType": "question", "voteType": "upvote"},
            {"itemId": "not-a-uuid", "itemType": "question", "voteType": "upvote"},
            {"itemId": SOME_ID, "itemType": "comment", "voteType": "upvote"},
            {"itemId": SOME_ID, "itemType": "question", "voteType": "sideways"},
        ],
    )
    def test_malformed_body_is_rejected(self, client, voter, body):
        _, headers = voter

        response = client.post("/votes", json=body, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request data"

    def test_switching_direction_keeps_one_vote(self, client, voter, question_id):
        # Arrange
        user, headers = voter
        upvote(client, headers, question_id)

        # Act
        response = client.post(
            "/votes",
            json={"itemId": question_id, "itemType": "question", "voteType": "downvote"},
            headers=headers,
        )

        # Assert
        assert response.json()["data"]["voteCounts"] == {
            "upvotes": 0,
            "downvotes": 1,
            "net": -1,
        }
        votes = client.get("/votes", params={"userId": str(user.user_id)}).json()
        assert len(votes["data"]["votes"]) == 1


class TestRemoveVote:
    """DELETE /votes."""

    def test_remove_held_vote(self, client, voter, question_id):
        # Arrange
        _, headers = voter
        upvote(client, headers, question_id)

        # Act
        response = client.delete(
            "/votes",
            params={"itemId": question_id, "itemType": "question"},
            headers=headers,
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Vote removed successfully"
        assert body["data"]["voteCounts"]["net"] == 0
        assert body["data"]["userVoteType"] is None

    def test_remove_without_vote_is_not_found(self, client, voter, question_id):
        _, headers = voter

        response = client.delete(
            "/votes",
            params={"itemId": question_id, "itemType": "question"},
            headers=headers,
        )

        assert response.status_code == 404
        assert response.json()["error"] == "No vote found for this item"

    def test_remove_requires_item(self, client, voter):
        _, headers = voter

        response = client.delete("/votes", params={"itemType": "question"}, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"] == (
            "itemId and itemType (question/answer) are required"
        )

    def test_non_uuid_item_is_invalid(self, client, voter):
        _, headers = voter

        response = client.delete(
            "/votes", params={"itemId": "42", "itemType": "answer"}, headers=headers
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid itemId"


class TestListVotes:
    """GET /votes."""

    def test_requires_a_filter(self, client):
        response = client.get("/votes")

        assert response.status_code == 400
        assert response.json()["error"] == "Either itemId or userId must be provided"

    def test_lists_votes_on_item_with_voters(self, client, voter, question_id):
        # Arrange
        user, headers = voter
        upvote(client, headers, question_id)

        # Act
        response = client.get(
            "/votes", params={"itemId": question_id, "itemType": "question"}
        )

        # Assert
        data = response.json()["data"]
        assert response.status_code == 200
        assert data["voteCounts"] == {"upvotes": 1, "downvotes": 0, "net": 1}
        assert data["votes"][0]["user"]["name"] == "Voter"
        assert data["votes"][0]["itemType"] == "question"
