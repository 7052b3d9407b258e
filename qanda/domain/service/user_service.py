"""User domain service."""

from typing import Sequence

import logfire

from qanda.domain.model import User
from qanda.domain.model.common import utcnow
from qanda.domain.repository import UserRepository
from qanda.domain.value import AuthenticatedUser, Author, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_authors(self, user_ids: Sequence[UserId]) -> dict[UserId, Author]:
        """Resolve display identities for several users.

        Users that cannot be found get the "Unknown User" placeholder, so
        the result always has an entry for every requested ID.

        Args:
            user_ids: User IDs to resolve

        Returns:
            Mapping of user ID to author identity
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.resolve_authors", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            found = {user.id: user.to_author() for user in users}

            missing = [uid for uid in unique_ids if uid not in found]
            if missing:
                logfire.info(
                    "Unresolved authors, using placeholder",
                    user_ids=[str(uid) for uid in missing],
                )

            return {uid: found.get(uid) or Author.placeholder(uid) for uid in unique_ids}

    async def register_author(self, user: AuthenticatedUser) -> None:
        """Record the display name carried by a verified identity.

        Known users keep their stored profile unless the name changed.
        Identities without a name are not recorded and resolve to the
        placeholder.

        Args:
            user: Verified caller
        """
        if not user.name:
            return

        with logfire.span("user_service.register_author", user_id=str(user.user_id)):
            existing = await self.user_repository.find_by_id(user.user_id)
            if existing and existing.name == user.name:
                return

            if existing:
                profile = existing.model_copy(
                    update={"name": user.name, "updated_at": utcnow()}
                )
            else:
                profile = User(id=user.user_id, name=user.name)

            await self.user_repository.save(profile)
            logfire.info("Author registered", user_id=str(user.user_id))
