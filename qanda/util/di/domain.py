"""Domain layer DI providers."""

from dishka import Scope, provide

from qanda.config import AuthSettings, FeedSettings
from qanda.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
    VoteRepository,
)
from qanda.domain.service import (
    AggregationService,
    AnswerService,
    FeedService,
    JWTService,
    QuestionService,
    TopicService,
    UserService,
    VoteService,
)
from qanda.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_question_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        topic_service: TopicService,
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            vote_repository=vote_repository,
            topic_service=topic_service,
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        vote_repository: VoteRepository,
        question_service: QuestionService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            vote_repository=vote_repository,
            question_service=question_service,
        )

    @provide
    def get_aggregation_service(
        self, vote_repository: VoteRepository
    ) -> AggregationService:
        """Provide vote aggregation domain service."""
        return AggregationService(vote_repository=vote_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
        aggregation_service: AggregationService,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_service=question_service,
            answer_service=answer_service,
            aggregation_service=aggregation_service,
            user_service=user_service,
        )

    @provide
    def get_feed_service(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        topic_repository: TopicRepository,
        question_service: QuestionService,
        aggregation_service: AggregationService,
        vote_service: VoteService,
        user_service: UserService,
        feed_settings: FeedSettings,
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            question_repository=question_repository,
            answer_repository=answer_repository,
            topic_repository=topic_repository,
            question_service=question_service,
            aggregation_service=aggregation_service,
            vote_service=vote_service,
            user_service=user_service,
            feed_settings=feed_settings,
        )
