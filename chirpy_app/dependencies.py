"""
FastAPI dependencies for dependency injection.

Routes ask for services; services get a repository; the repository gets the
request's database session. Tests override get_db (or get_repository) to
swap the storage underneath.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from chirpy_app.config import Settings, settings
from chirpy_app.database.connection import get_db
from chirpy_app.metrics.hit_counter import HitCounter, hit_counter
from chirpy_app.services.chirp_service import ChirpService
from chirpy_app.services.user_service import UserService
from chirpy_app.storage.strategies import ChirpyRepository, SQLAlchemyRepository


def get_settings() -> Settings:
    return settings


def get_hit_counter() -> HitCounter:
    """The process-wide static file hit counter."""
    return hit_counter


def get_repository(db: Session = Depends(get_db)) -> ChirpyRepository:
    """Repository bound to the current request's session."""
    return SQLAlchemyRepository(db)


def get_user_service(repository: ChirpyRepository = Depends(get_repository)) -> UserService:
    return UserService(repository)


def get_chirp_service(repository: ChirpyRepository = Depends(get_repository)) -> ChirpService:
    return ChirpService(repository)
