"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from qanda.config import Settings
from qanda.domain.model import Answer, Question, Topic
from qanda.domain.service import JWTService
from qanda.domain.value import (
    AnswerId,
    AuthenticatedUser,
    QuestionId,
    TopicId,
    TopicName,
    TopicSlug,
    UserId,
)

# Local console only, nothing leaves the test run
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_question(
    author_id: UserId | None = None,
    title: str = "How do I test async code?",
    content: str = "Looking for patterns that work with pytest.",
    topic_ids: list[TopicId] | None = None,
    minutes: int = 0,
) -> Question:
    """Build a question created `minutes` after a fixed base time."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        content=content,
        author_id=author_id or UserId(uuid4()),
        topic_ids=topic_ids or [],
        created_at=created,
        updated_at=created,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId | None = None,
    content: str = "Use pytest-asyncio and mark the tests.",
    minutes: int = 0,
) -> Answer:
    """Build an answer created `minutes` after a fixed base time."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        content=content,
        author_id=author_id or UserId(uuid4()),
        created_at=created,
        updated_at=created,
    )


def make_topic(name: str, slug: str | None = None) -> Topic:
    """Build a topic from display text."""
    return Topic(
        id=TopicId(uuid4()),
        name=TopicName.from_text(name),
        slug=TopicSlug.from_text(slug or name),
    )


def make_user(name: str | None = "Test User") -> AuthenticatedUser:
    """A verified caller with a fresh ID."""
    return AuthenticatedUser(user_id=UserId(uuid4()), name=name)


@pytest.fixture
def jwt_service() -> JWTService:
    """JWT service using the same settings as the app under test."""
    return JWTService(auth_settings=Settings().auth)


def auth_header(jwt_service: JWTService, user: AuthenticatedUser) -> dict[str, str]:
    """Authorization header carrying a token for `user`."""
    token = jwt_service.create_token(user.user_id, name=user.name)
    return {"Authorization": f"Bearer {token}"}
