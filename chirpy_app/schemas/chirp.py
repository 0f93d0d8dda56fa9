from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from chirpy_app.schemas.types import UTCDateTime


class ChirpCreate(BaseModel):
    body: str = Field(..., description="Chirp text, at most 140 bytes of UTF-8")
    user_id: UUID = Field(..., description="Author of the chirp")


class ChirpResponse(BaseModel):
    id: UUID
    created_at: UTCDateTime
    updated_at: UTCDateTime
    body: str
    user_id: UUID

    model_config = ConfigDict(from_attributes=True)
