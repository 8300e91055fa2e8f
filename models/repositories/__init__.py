"""
Repositories - Data access interfaces and in-memory implementations.
"""

from models.repositories.relationship_repository import (
    RelationshipRepository,
    InMemoryRelationshipRepository,
    RelationshipError,
)
from models.repositories.user_repository import UserRepository, InMemoryUserRepository

__all__ = [
    "RelationshipRepository",
    "InMemoryRelationshipRepository",
    "RelationshipError",
    "UserRepository",
    "InMemoryUserRepository",
]
