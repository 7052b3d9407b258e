"""Answer entity."""

from datetime import datetime

from pydantic import Field

from qanda.domain.model.common import DomainModel, utcnow
from qanda.domain.model.question import CONTENT_MAX_LENGTH, CONTENT_MIN_LENGTH
from qanda.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question."""

    id: AnswerId
    question_id: QuestionId
    content: str = Field(min_length=CONTENT_MIN_LENGTH, max_length=CONTENT_MAX_LENGTH)
    author_id: UserId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
