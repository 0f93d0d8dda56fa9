from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx JSON response."""
    error: str

    model_config = {
        "json_schema_extra": {
            "example": {"error": "Chirp is too long"}
        }
    }
