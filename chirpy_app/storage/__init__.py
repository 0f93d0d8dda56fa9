"""
Persistence layer for Chirpy.
Implements Strategy Pattern so services don't depend on the storage technology.
"""

from .strategies import ChirpyRepository, SQLAlchemyRepository, InMemoryRepository

__all__ = [
    "ChirpyRepository",
    "SQLAlchemyRepository",
    "InMemoryRepository",
]
