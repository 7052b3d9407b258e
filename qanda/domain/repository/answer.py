"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qanda.domain.model.answer import Answer
from qanda.domain.value import AnswerId, QuestionId, SortOrder


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        pass

    @abstractmethod
    async def find_by_question(
        self,
        question_id: QuestionId,
        sort: SortOrder = SortOrder.MOST_VOTED,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Answer]:
        """Find answers to a question.

        Args:
            question_id: Parent question ID
            sort: Ordering, same semantics as the question feed
            limit: Maximum number of answers, None for all
            offset: Number of answers to skip

        Returns:
            List of answers in the requested order
        """
        pass

    @abstractmethod
    async def find_ids_by_question(self, question_id: QuestionId) -> List[AnswerId]:
        """List the IDs of every answer to a question."""
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count answers to a question."""
        pass

    @abstractmethod
    async def count_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, int]:
        """Count answers for several questions in one query.

        Args:
            question_ids: Question IDs

        Returns:
            Mapping of question ID to answer count; questions without
            answers are absent from the mapping
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update)."""
        pass

    @abstractmethod
    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer. Votes are removed by the caller."""
        pass
