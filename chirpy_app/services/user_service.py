import logging
import uuid
from datetime import datetime, timezone

from chirpy_app.models.user import User
from chirpy_app.storage.strategies import ChirpyRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    User operations on top of an injected repository.

    The service owns identifier and timestamp generation so every
    repository implementation stores the same values.
    """

    def __init__(self, repository: ChirpyRepository):
        self.repository = repository

    def create_user(self, email: str) -> User:
        """Create a user. Duplicate emails surface as StorageError."""
        now = datetime.now(timezone.utc)
        return self.repository.create_user(uuid.uuid4(), email, now)

    def reset_users(self) -> int:
        """Delete every user. Returns how many were removed."""
        deleted = self.repository.delete_all_users()
        logger.info("Deleted %d users", deleted)
        return deleted
