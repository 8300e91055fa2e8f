"""
Username Service - validation and availability for profile usernames.

Usernames appear in profile URLs, so they are limited to URL-safe
characters and may not shadow app routes.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from models.repositories import UserRepository

logger = logging.getLogger(__name__)

MIN_LENGTH = 3
MAX_LENGTH = 30
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

RESERVED_USERNAMES = frozenset({
    "about", "admin", "api", "app", "auth", "dashboard", "events", "groups",
    "help", "login", "logout", "me", "new", "null", "people", "polls",
    "register", "root", "settings", "signup", "static", "support", "system",
    "undefined", "user", "users", "www",
})


@dataclass
class UsernameCheckResult:
    """Outcome of an availability check."""
    status: str  # idle, invalid, available, taken, error
    username: str
    message: Optional[str] = None

    @property
    def is_available(self) -> bool:
        return self.status == "available"


class UsernameService:
    """Service for username validation and lookup."""

    def __init__(self, user_repository: UserRepository):
        self.users = user_repository

    def validate_username(self, username: str) -> tuple[bool, str]:
        """
        Check the format of a username.

        Returns (is_valid, normalized_username_or_error)
        """
        cleaned = (username or "").strip()

        if len(cleaned) < MIN_LENGTH:
            return False, f"Username must be at least {MIN_LENGTH} characters"
        if len(cleaned) > MAX_LENGTH:
            return False, f"Username must be at most {MAX_LENGTH} characters"
        if not USERNAME_PATTERN.match(cleaned):
            return False, "Only letters, numbers, underscores and hyphens are allowed"
        if cleaned.lower() in RESERVED_USERNAMES:
            return False, "This username is reserved"

        return True, cleaned

    def check_availability(self, username: str, current_user_id: Any = None) -> UsernameCheckResult:
        """Validate and look up a username."""
        if not (username or "").strip():
            return UsernameCheckResult(status="idle", username="")

        is_valid, value = self.validate_username(username)
        if not is_valid:
            return UsernameCheckResult(status="invalid", username=username.strip(), message=value)

        try:
            taken = self.users.is_username_taken(value, exclude_user_id=current_user_id)
        except Exception as e:
            logger.error(f"Username lookup failed for {value!r}: {e}")
            return UsernameCheckResult(
                status="error",
                username=value,
                message="Could not check username. Please try again."
            )

        if taken:
            return UsernameCheckResult(status="taken", username=value, message="Username is already taken")
        return UsernameCheckResult(status="available", username=value, message="Username is available")
