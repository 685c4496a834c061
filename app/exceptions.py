"""Domain exceptions raised by services and translated by the HTTP layer.

Only not-found conditions originate here.  Database errors raised by the
repository are not wrapped; they propagate as SQLAlchemy exceptions.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found with id {identifier}")


class UserNotFoundError(NotFoundError):
    """No persisted user has the requested id."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__("User", user_id)
