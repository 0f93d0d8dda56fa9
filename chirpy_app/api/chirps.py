from fastapi import APIRouter, Depends, status

from chirpy_app.dependencies import get_chirp_service
from chirpy_app.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy_app.schemas.error import ErrorResponse
from chirpy_app.services.chirp_service import ChirpService

router = APIRouter(prefix="/chirps", tags=["chirps"])


@router.post(
    "",
    response_model=ChirpResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def create_chirp(
    chirp_data: ChirpCreate,
    chirp_service: ChirpService = Depends(get_chirp_service)
):
    """
    Post a chirp.

    Bodies over 140 characters are rejected with 400; profane words are
    masked before the chirp is stored.
    """
    return chirp_service.create_chirp(chirp_data.body, chirp_data.user_id)
