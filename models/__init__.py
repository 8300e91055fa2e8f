"""
Models layer - display entities and widget payloads.
"""

from models.entities import (
    User,
    Event,
    Poll,
    PollOption,
    VoteData,
    Relationship,
    ConnectPermission,
)
from models.option_data import OptionData, ExternalImageData

__all__ = [
    "User",
    "Event",
    "Poll",
    "PollOption",
    "VoteData",
    "Relationship",
    "ConnectPermission",
    "OptionData",
    "ExternalImageData",
]
