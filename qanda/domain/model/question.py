"""Question aggregate root."""

from datetime import datetime

from pydantic import Field

from qanda.domain.model.common import DomainModel, utcnow
from qanda.domain.value import QuestionId, TopicId, UserId

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 300
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 5000


class Question(DomainModel):
    """Question aggregate root.

    Owns its answers and its topic associations: deleting a question
    removes both, together with every vote on the question or its answers.
    Vote tallies are never stored here, they are computed from the ledger.
    """

    id: QuestionId
    title: str = Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    author_id: UserId
    topic_ids: list[TopicId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
