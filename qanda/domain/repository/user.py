"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from qanda.domain.model.user import User
from qanda.domain.value import UserId


class UserRepository(ABC):
    """Local copies of authors known from the identity provider.

    Rows are written the first time a user posts; they exist so listings
    can show author names without calling out to the provider.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Batch lookup for listings. Unknown IDs are skipped, order is not kept."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user or refresh the stored profile fields."""
        pass
