"""
User Repository - data access for user profiles.

Only the lookups the settings widgets need: fetching a user and checking
whether a username is already claimed.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from models.entities import User


class UserRepository(ABC):
    """Interface for user persistence."""

    @abstractmethod
    def get_by_id(self, user_id: Any) -> Optional[User]:
        pass

    @abstractmethod
    def is_username_taken(self, username: str, exclude_user_id: Any = None) -> bool:
        """
        Check whether a username belongs to someone.

        Comparison is case-insensitive. exclude_user_id skips the user who
        is editing their own profile.
        """
        pass


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository for local runs and tests."""

    def __init__(self, users: Optional[list[User]] = None):
        self.users: dict[Any, User] = {u.id: u for u in users or []}

    def add(self, user: User):
        self.users[user.id] = user

    def get_by_id(self, user_id: Any) -> Optional[User]:
        return self.users.get(user_id)

    def is_username_taken(self, username: str, exclude_user_id: Any = None) -> bool:
        wanted = username.lower()
        return any(
            u.username and u.username.lower() == wanted and u.id != exclude_user_id
            for u in self.users.values()
        )
