"""
Config Package - Application settings, logging and authentication.
"""

from config.settings import Settings, get_settings
from config.logging_setup import configure_logging
from config.auth import (
    UserContext,
    get_current_user,
    is_authenticated,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "configure_logging",
    # Authentication
    "UserContext",
    "get_current_user",
    "is_authenticated",
]
