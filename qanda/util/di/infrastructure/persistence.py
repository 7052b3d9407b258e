"""Providers for the PostgreSQL-backed repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from qanda.config import Settings
from qanda.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from qanda.persistence.database import create_engine, create_session_factory
from qanda.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresTopicRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from qanda.util.di.base import ProviderBase
from qanda.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable "persistence" component; tests replace it with the in-memory store."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Engine and session live for the app, repositories for one request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: commit on success, roll back on error."""
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Request transaction committed")
            except Exception as e:
                logfire.warn("Request transaction rolled back", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)
