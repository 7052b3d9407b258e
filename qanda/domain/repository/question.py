"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from qanda.domain.model.question import Question
from qanda.domain.value import QuestionId, SortOrder, TopicSlug


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID, including its topic IDs.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists.

        Args:
            question_id: The question's unique identifier

        Returns:
            True if the question exists
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        sort: SortOrder = SortOrder.RECENT,
        topic: Optional[TopicSlug] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Question]:
        """Find one page of questions.

        Args:
            sort: RECENT orders by creation time descending; MOST_VOTED by
                net score descending with creation time descending as tie-break
            topic: Only questions linked to the topic with this exact slug
            limit: Maximum number of questions
            offset: Number of questions to skip

        Returns:
            List of questions in feed order
        """
        pass

    @abstractmethod
    async def count(self, topic: Optional[TopicSlug] = None) -> int:
        """Count questions matching the same filter as find_page.

        Args:
            topic: Only questions linked to the topic with this exact slug

        Returns:
            Number of questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        The question's topic associations are replaced by ``topic_ids``.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question with its answers and topic associations.

        Votes are not touched here, callers remove them first.

        Args:
            question_id: The question ID to delete
        """
        pass
