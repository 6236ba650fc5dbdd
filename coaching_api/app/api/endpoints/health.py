"""Liveness endpoint."""

from fastapi import APIRouter

from coaching_api.app.schemas.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Report that the server is up.  Never touches the data file."""
    return HealthResponse()
