"""
Test the service layer directly, without HTTP.
"""
import uuid
from datetime import timezone

import pytest

from chirpy_app.exceptions import ChirpTooLongError, StorageError
from chirpy_app.services.chirp_service import ChirpService
from chirpy_app.services.user_service import UserService
from chirpy_app.storage.strategies import SQLAlchemyRepository


class TestUserService:
    """UserService over the in-memory repository"""

    def test_create_user(self, memory_repository):
        service = UserService(memory_repository)

        user = service.create_user("walt@breakingbad.com")

        assert isinstance(user.id, uuid.UUID)
        assert user.email == "walt@breakingbad.com"
        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo == timezone.utc
        assert user.id in memory_repository.users

    def test_ids_are_unique(self, memory_repository):
        service = UserService(memory_repository)

        first = service.create_user("a@example.com")
        second = service.create_user("b@example.com")

        assert first.id != second.id

    def test_duplicate_email_fails(self, memory_repository):
        service = UserService(memory_repository)
        service.create_user("saul@bettercall.com")

        with pytest.raises(StorageError) as exc_info:
            service.create_user("saul@bettercall.com")
        assert exc_info.value.message == "Failed to create user"

    def test_reset_users(self, memory_repository):
        service = UserService(memory_repository)
        service.create_user("a@example.com")
        service.create_user("b@example.com")

        assert service.reset_users() == 2
        assert memory_repository.users == {}

        # The email can be reused after a reset
        service.create_user("a@example.com")


class TestChirpService:

    def test_create_chirp_cleans_body(self, memory_repository):
        user_id = uuid.uuid4()
        service = ChirpService(memory_repository)

        chirp = service.create_chirp("what a Kerfuffle today", user_id)

        assert chirp.body == "what a **** today"
        assert chirp.user_id == user_id
        assert chirp.created_at == chirp.updated_at
        assert memory_repository.chirps[chirp.id].body == "what a **** today"

    def test_too_long_chirp_is_not_stored(self, memory_repository):
        service = ChirpService(memory_repository)

        with pytest.raises(ChirpTooLongError):
            service.create_chirp("a" * 141, uuid.uuid4())

        assert memory_repository.chirps == {}


class TestSQLAlchemyRepository:
    """Same operations against the SQLite test database"""

    def test_create_user_and_chirp(self, db_session):
        repository = SQLAlchemyRepository(db_session)
        user = UserService(repository).create_user("jesse@example.com")

        chirp = ChirpService(repository).create_chirp("yo fornax", user.id)

        assert chirp.body == "yo ****"
        assert chirp.user_id == user.id

    def test_duplicate_email_rolls_back(self, db_session):
        repository = SQLAlchemyRepository(db_session)
        service = UserService(repository)
        service.create_user("dup@example.com")

        with pytest.raises(StorageError):
            service.create_user("dup@example.com")

        # Session is still usable after the failed insert
        other = service.create_user("other@example.com")
        assert other.email == "other@example.com"

    def test_delete_all_users(self, db_session):
        repository = SQLAlchemyRepository(db_session)
        service = UserService(repository)
        service.create_user("a@example.com")
        service.create_user("b@example.com")

        assert repository.delete_all_users() == 2
        assert repository.delete_all_users() == 0
