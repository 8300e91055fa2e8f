"""
Username Controller - availability feedback for the profile settings form.

Streamlit text inputs submit on Enter or blur, so each submitted value is
checked once; re-submitting the last checked value reuses its result.
"""

import logging
from typing import Any, MutableMapping, Optional

import streamlit as st

from services.username_service import UsernameCheckResult, UsernameService

logger = logging.getLogger(__name__)


class UsernameController:
    """Controller for the username field."""

    def __init__(
        self,
        service: UsernameService,
        current_user_id: Any = None,
        current_username: Optional[str] = None,
        state: Optional[MutableMapping] = None
    ):
        self.service = service
        self.current_user_id = current_user_id
        self.current_username = current_username
        self._state = state if state is not None else st.session_state
        self.key = "username_check"
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if self.key not in self._state:
            self._state[self.key] = {
                "value": self.current_username or "",
                "status": "idle",
                "message": None,
                "last_checked": None,
            }

    @property
    def data(self) -> dict:
        return self._state[self.key]

    def get_value(self) -> str:
        return self.data["value"]

    def get_status(self) -> str:
        return self.data["status"]

    def get_message(self) -> Optional[str]:
        return self.data["message"]

    def can_save(self) -> bool:
        """Saving is allowed for an available name or the unchanged current one."""
        return self.get_status() == "available"

    def check(self, username: str) -> str:
        """Check a submitted username and return the new status."""
        value = (username or "").strip()
        self.data["value"] = value

        if value and value == self.data["last_checked"]:
            return self.get_status()

        if self.current_username and value.lower() == self.current_username.lower():
            self._apply(UsernameCheckResult(
                status="available",
                username=value,
                message="This is your current username"
            ))
            return self.get_status()

        self.data["status"] = "checking"
        result = self.service.check_availability(value, current_user_id=self.current_user_id)
        self._apply(result)
        return self.get_status()

    def reset(self):
        self.data.update(
            value=self.current_username or "",
            status="idle",
            message=None,
            last_checked=None,
        )

    def _apply(self, result: UsernameCheckResult):
        self.data["status"] = result.status
        self.data["message"] = result.message
        # Errors are retried on the next submit
        self.data["last_checked"] = result.username if result.status != "error" else None
