"""PostgreSQL repository implementations."""

from qanda.persistence.repository.answer import PostgresAnswerRepository
from qanda.persistence.repository.question import PostgresQuestionRepository
from qanda.persistence.repository.topic import PostgresTopicRepository
from qanda.persistence.repository.user import PostgresUserRepository
from qanda.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTopicRepository",
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
]
