"""
Identity for the planner pages.

The app sits behind a reverse proxy that authenticates users and forwards
their identity as headers (Azure Container Apps Easy Auth):

- X-MS-CLIENT-PRINCIPAL: Base64-encoded JSON with the user's claims
- X-MS-CLIENT-PRINCIPAL-ID: Stable user id
- X-MS-CLIENT-PRINCIPAL-NAME: Principal name (usually the email)

Locally, DEV_USER_* environment variables stand in for the proxy.
Anonymous visitors are allowed on most pages; widgets that need a user
(voting, connecting) switch to their anonymous behaviour instead.
"""

import base64
import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import streamlit as st

from models.entities import User

logger = logging.getLogger(__name__)


@dataclass
class UserContext:
    """The signed-in user."""
    user_id: str
    name: str
    email: Optional[str] = None
    username: Optional[str] = None

    def to_user(self) -> User:
        """Convert to the display model used by widgets."""
        return User(
            id=self.user_id,
            name=self.name,
            username=self.username,
            email=self.email,
        )


def _email_from_principal(principal_b64: str) -> Optional[str]:
    """Pull the email claim out of the encoded principal, if present."""
    try:
        principal = json.loads(base64.b64decode(principal_b64).decode("utf-8"))
    except (ValueError, json.JSONDecodeError):
        logger.warning("Could not decode client principal header")
        return None

    for claim in principal.get("claims", []):
        if claim.get("typ") in ("email", "preferred_username"):
            return claim.get("val")
    return None


def user_from_headers(headers: Mapping[str, str]) -> Optional[UserContext]:
    """Build a UserContext from proxy headers (lowercase keys)."""
    user_id = headers.get("x-ms-client-principal-id")
    if not user_id:
        return None

    name = headers.get("x-ms-client-principal-name")
    principal = headers.get("x-ms-client-principal")
    email = _email_from_principal(principal) if principal else None

    return UserContext(
        user_id=user_id,
        name=name or email or "User",
        email=email or name,
    )


def user_from_env(environ: Mapping[str, str] = os.environ) -> Optional[UserContext]:
    """Build a UserContext from DEV_USER_* variables (local development)."""
    user_id = environ.get("DEV_USER_ID")
    if not user_id:
        return None
    return UserContext(
        user_id=user_id,
        name=environ.get("DEV_USER_NAME", "Dev User"),
        email=environ.get("DEV_USER_EMAIL"),
        username=environ.get("DEV_USER_USERNAME"),
    )


def get_current_user() -> Optional[UserContext]:
    """Return the current user, or None for anonymous visitors."""
    try:
        headers = st.context.headers
    except AttributeError:
        # Older Streamlit without st.context
        headers = None

    if headers:
        user = user_from_headers({k.lower(): v for k, v in headers.items()})
        if user:
            return user

    return user_from_env()


def is_authenticated() -> bool:
    return get_current_user() is not None
