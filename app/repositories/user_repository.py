"""
User repository — the persistence contract behind ``UserService``.

``UserRepository`` is an ABC rather than a Protocol so a test double that
forgets one of the four operations fails at construction time instead of
mid-test.
"""
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import User


class UserRepository(ABC):
    """Persistence interface for User records."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Return the user with *user_id*, or None when no row matches.

        Absence is a normal result, not an error.
        """

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Return every stored user."""

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert *user* if it is new, otherwise persist its current field
        values.  Returns the persisted user with ``id`` populated.
        """

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Remove a previously loaded *user*."""


class SqlAlchemyUserRepository(UserRepository):
    """``UserRepository`` over a request-scoped ``AsyncSession``."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        # session.get consults the identity map first, so an object loaded
        # earlier in the same request is returned as the same instance.
        return await self.session.get(User, user_id)

    async def find_all(self) -> list[User]:
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def save(self, user: User) -> User:
        self.session.add(user)
        await self.session.flush()
        return user

    async def delete(self, user: User) -> None:
        await self.session.delete(user)
        await self.session.flush()
