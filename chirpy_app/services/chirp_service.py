import uuid
from datetime import datetime, timezone
from uuid import UUID

from chirpy_app.models.chirp import Chirp
from chirpy_app.services.profanity import clean_chirp_body
from chirpy_app.storage.strategies import ChirpyRepository


class ChirpService:
    """Chirp creation: validate, clean, persist."""

    def __init__(self, repository: ChirpyRepository):
        self.repository = repository

    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        """
        Create a chirp for user_id.

        Flow:
        1. Reject bodies over the length limit (ChirpTooLongError)
        2. Mask profane words
        3. Store with a fresh id and the current UTC time

        The user is not looked up first; a dangling user_id is left to the
        database foreign key.
        """
        cleaned = clean_chirp_body(body)
        now = datetime.now(timezone.utc)
        return self.repository.create_chirp(uuid.uuid4(), cleaned, user_id, now)
