"""Application layer DI providers."""

from dishka import Scope, provide

from qanda.application.usecase.answer import (
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    GetAnswerUseCase,
    ListAnswersUseCase,
    UpdateAnswerUseCase,
)
from qanda.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
)
from qanda.application.usecase.topic import (
    CreateTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
)
from qanda.application.usecase.vote import (
    CastVoteUseCase,
    ListVotesUseCase,
    RemoveVoteUseCase,
)
from qanda.config import FeedSettings
from qanda.domain.service import (
    AggregationService,
    AnswerService,
    FeedService,
    QuestionService,
    TopicService,
    UserService,
    VoteService,
)
from qanda.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        feed_service: FeedService,
        user_service: UserService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            feed_service=feed_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(self, feed_service: FeedService) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, feed_service: FeedService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, feed_service: FeedService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, feed_service=feed_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        feed_service: FeedService,
        user_service: UserService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            feed_service=feed_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_answer_use_case(
        self, answer_service: AnswerService, feed_service: FeedService
    ) -> GetAnswerUseCase:
        """Provide get answer use case."""
        return GetAnswerUseCase(answer_service=answer_service, feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_list_answers_use_case(self, feed_service: FeedService) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_update_answer_use_case(
        self, answer_service: AnswerService, feed_service: FeedService
    ) -> UpdateAnswerUseCase:
        """Provide update answer use case."""
        return UpdateAnswerUseCase(
            answer_service=answer_service, feed_service=feed_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(
        self, vote_service: VoteService, aggregation_service: AggregationService
    ) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(
            vote_service=vote_service, aggregation_service=aggregation_service
        )

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_list_topics_use_case(
        self, topic_service: TopicService, feed_settings: FeedSettings
    ) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service, feed_settings=feed_settings)

    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(self, topic_service: TopicService) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(topic_service=topic_service)

    @provide(scope=Scope.REQUEST)
    def get_get_topic_use_case(
        self, topic_service: TopicService, feed_service: FeedService
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(topic_service=topic_service, feed_service=feed_service)
