"""
User service — CRUD orchestration for the User aggregate.

Every operation that needs an existing user looks it up first and raises
``UserNotFoundError`` when the repository reports absence.  Errors raised by
the repository itself are never caught here.

Users are not cached: each call reads from or writes to the repository.
"""
import logging

from app.exceptions import UserNotFoundError
from app.models import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Stateless service; the repository is injected at construction."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def get_all_users(self) -> list[User]:
        """Return all users in the order the repository yields them."""
        return await self.repository.find_all()

    async def get_user_by_id(self, user_id: int) -> User:
        """
        Return the user identified by *user_id*.

        Raises ``UserNotFoundError`` when it does not exist; never returns
        None.
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            logger.info("User lookup missed: id=%s", user_id)
            raise UserNotFoundError(user_id)
        return user

    async def create_user(self, user: User) -> User:
        """
        Persist a new user and return the repository's result.

        No existence check is made: saving the same name/email twice creates
        two users.
        """
        saved = await self.repository.save(user)
        logger.info("Created user id=%s", saved.id)
        return saved

    async def update_user(self, user_id: int, details: User) -> User:
        """
        Overwrite ``name`` and ``email`` of an existing user with the values
        from *details*.

        The instance loaded from the repository is the one mutated and
        saved, so its id and session identity are preserved.  *details* is
        only read from and may be any object with ``name`` and ``email``.
        """
        user = await self.get_user_by_id(user_id)
        user.name = details.name
        user.email = details.email
        saved = await self.repository.save(user)
        logger.info("Updated user id=%s", user_id)
        return saved

    async def delete_user(self, user_id: int) -> None:
        """Delete the user identified by *user_id*."""
        user = await self.get_user_by_id(user_id)
        await self.repository.delete(user)
        logger.info("Deleted user id=%s", user_id)
