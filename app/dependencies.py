from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.repositories.user_repository import SqlAlchemyUserRepository, UserRepository
from app.services.user_service import UserService


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """
    Reusable FastAPI dependency returning the repository bound to the
    request session.

    Override it in ``app.dependency_overrides`` to run the HTTP layer
    against another store.
    """
    return SqlAlchemyUserRepository(db)


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """Build a ``UserService`` around the request's repository."""
    return UserService(repository)
