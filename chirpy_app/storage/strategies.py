"""
Persistence strategies using Strategy Pattern.

The service layer only sees ChirpyRepository, which exposes exactly the
writes the API needs:
- create_user
- delete_all_users
- create_chirp

SQLAlchemyRepository is what the server uses. InMemoryRepository keeps
everything in dicts and is handy for service tests and local experiments.
"""

import logging
import threading
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chirpy_app.exceptions import StorageError
from chirpy_app.models import Chirp, User

logger = logging.getLogger(__name__)


class ChirpyRepository(ABC):
    """
    Abstract base class for Chirpy persistence.

    Every method is a single write. Failures are reported as StorageError
    carrying a message that is safe to send to clients.
    """

    @abstractmethod
    def create_user(self, user_id: UUID, email: str, now: datetime) -> User:
        """
        Insert a user.

        Args:
            user_id: Identifier generated by the caller
            email: Unique email address
            now: Used for both created_at and updated_at

        Returns:
            The stored User

        Raises:
            StorageError: if the insert fails (e.g. duplicate email)
        """
        pass

    @abstractmethod
    def delete_all_users(self) -> int:
        """
        Delete every user.

        Returns:
            Number of users removed
        """
        pass

    @abstractmethod
    def create_chirp(self, chirp_id: UUID, body: str, user_id: UUID, now: datetime) -> Chirp:
        """Insert a chirp whose body has already been cleaned."""
        pass


class SQLAlchemyRepository(ChirpyRepository):
    """
    Repository backed by a SQLAlchemy session (SQLite or PostgreSQL).

    Each write is committed on its own; there are no multi-statement
    transactions.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, user_id: UUID, email: str, now: datetime) -> User:
        user = User(id=user_id, created_at=now, updated_at=now, email=email)
        self._commit(user, "Failed to create user")
        return user

    def delete_all_users(self) -> int:
        try:
            result = self.db.execute(delete(User))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Deleting users failed")
            raise StorageError("Failed to delete users") from e
        return result.rowcount

    def create_chirp(self, chirp_id: UUID, body: str, user_id: UUID, now: datetime) -> Chirp:
        chirp = Chirp(
            id=chirp_id,
            created_at=now,
            updated_at=now,
            body=body,
            user_id=user_id,
        )
        self._commit(chirp, "Failed to create chirp")
        return chirp

    def _commit(self, instance, error_message: str) -> None:
        """Insert one row, commit and reload it (RETURNING * equivalent)."""
        try:
            self.db.add(instance)
            self.db.commit()
            self.db.refresh(instance)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("%s: %s", error_message, e.__class__.__name__)
            raise StorageError(error_message) from e


class InMemoryRepository(ChirpyRepository):
    """
    In-memory repository using Python dicts.

    Enforces the same email uniqueness as the database schema.
    Chirps are kept when their user is deleted (no cascade here).

    Used in development/testing.
    """

    def __init__(self):
        self._users: Dict[UUID, User] = {}
        self._chirps: Dict[UUID, Chirp] = {}
        self._lock = threading.Lock()

    def create_user(self, user_id: UUID, email: str, now: datetime) -> User:
        with self._lock:
            if user_id in self._users or any(u.email == email for u in self._users.values()):
                raise StorageError("Failed to create user")
            user = User(id=user_id, created_at=now, updated_at=now, email=email)
            self._users[user_id] = user
            return user

    def delete_all_users(self) -> int:
        with self._lock:
            count = len(self._users)
            self._users.clear()
            return count

    def create_chirp(self, chirp_id: UUID, body: str, user_id: UUID, now: datetime) -> Chirp:
        with self._lock:
            if chirp_id in self._chirps:
                raise StorageError("Failed to create chirp")
            chirp = Chirp(
                id=chirp_id,
                created_at=now,
                updated_at=now,
                body=body,
                user_id=user_id,
            )
            self._chirps[chirp_id] = chirp
            return chirp

    @property
    def users(self) -> Dict[UUID, User]:
        return dict(self._users)

    @property
    def chirps(self) -> Dict[UUID, Chirp]:
        return dict(self._chirps)
