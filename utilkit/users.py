"""User lookup services and a processor built on them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

__all__ = [
    "User",
    "UserService",
    "RealUserService",
    "MockUserService",
    "UserProcessor",
    "new_user_service",
]


@dataclass
class User:
    """Basic user information."""

    id: int
    name: str


class UserService(ABC):
    """Something that can look a user up by id."""

    @abstractmethod
    def get_user(self, user_id: int) -> User | None:
        """Return the user with ``user_id``, or ``None`` if unknown."""


class RealUserService(UserService):
    """A service that answers every lookup with a fixed name."""

    def get_user(self, user_id: int) -> User | None:
        return User(id=user_id, name="John Doe")


@dataclass
class MockUserService(UserService):
    """A service that answers from a prepared dict of users."""

    mock_data: dict[int, User] = field(default_factory=dict)

    def get_user(self, user_id: int) -> User | None:
        return self.mock_data.get(user_id)


class UserProcessor:
    """Builds display titles for users fetched from a service."""

    def __init__(self, service: UserService) -> None:
        self._service = service

    def process_user_title(self, user_id: int) -> str:
        """Return ``"Mr. <name>"`` for the user; raise :class:`LookupError` if unknown."""
        user = self._service.get_user(user_id)
        if user is None:
            raise LookupError(f"user {user_id} not found")
        return "Mr. " + user.name


def new_user_service() -> UserService:
    """Return a fresh, empty :class:`MockUserService`."""
    return MockUserService()