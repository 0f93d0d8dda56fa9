import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import HTMLResponse

from chirpy_app.config import Settings
from chirpy_app.dependencies import get_hit_counter, get_settings, get_user_service
from chirpy_app.metrics.hit_counter import HitCounter
from chirpy_app.schemas.error import ErrorResponse
from chirpy_app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

METRICS_TEMPLATE = """<html>
  <body>
    <h1>Welcome, Chirpy Admin</h1>
    <p>Chirpy has been visited {hits} times!</p>
  </body>
</html>"""


@router.get("/metrics", response_class=HTMLResponse)
def metrics(counter: HitCounter = Depends(get_hit_counter)):
    """Render the static file hit count"""
    return METRICS_TEMPLATE.format(hits=counter.value)


@router.post(
    "/reset",
    responses={403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def reset(
    counter: HitCounter = Depends(get_hit_counter),
    user_service: UserService = Depends(get_user_service),
    app_settings: Settings = Depends(get_settings)
):
    """
    Zero the hit counter and delete every user.

    Only allowed when PLATFORM=dev. Outside dev mode nothing is touched.
    """
    if not app_settings.is_dev:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Reset endpoint only available in dev mode"
        )

    counter.reset()
    user_service.reset_users()
    logger.warning("Admin reset: hit counter zeroed, users deleted")
    return Response(status_code=status.HTTP_200_OK)
