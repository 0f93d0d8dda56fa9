from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from chirpy_app.schemas.types import UTCDateTime


class UserCreate(BaseModel):
    email: str = Field(..., description="Email address of the new user")


class UserResponse(BaseModel):
    """Serializes the SQLAlchemy User model (from_attributes=True)."""
    id: UUID
    created_at: UTCDateTime
    updated_at: UTCDateTime
    email: str

    model_config = ConfigDict(from_attributes=True)
