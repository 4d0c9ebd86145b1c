"""User domain service."""

from typing import Iterable

import logfire

from blog.domain.error import ForbiddenError, NotFoundError
from blog.domain.model import User
from blog.domain.repository import UserRepository
from blog.domain.value import UserId

from .base import Service


class UserService(Service):
    """Read-side access to users for the comment subsystem."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_active_user(self, user_id: UserId) -> User:
        """Get a user that exists and is not deactivated.

        Raises:
            NotFoundError: If the user is missing or deactivated
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None or user.is_deactivated:
            logfire.warn("Active user not found", user_id=str(user_id))
            raise NotFoundError("User not found")
        return user

    async def require_active_actor(self, user_id: UserId) -> User:
        """Load the user behind a request that changes state.

        Session tokens stay valid after deactivation, so the account is
        read on each mutation.

        Raises:
            NotFoundError: If the user does not exist
            ForbiddenError: If the account has been deactivated
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        if user.is_deactivated:
            logfire.warn("Deactivated account attempted a change", user_id=str(user_id))
            raise ForbiddenError("Account has been deactivated")
        return user

    async def get_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch load users, including deactivated ones."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        return await self.user_repository.find_by_ids(unique_ids)
