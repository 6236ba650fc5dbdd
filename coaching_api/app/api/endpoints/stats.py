"""Statistics endpoint for the admin dashboard."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from coaching_api.app.core.store import InquiryStore, get_store
from coaching_api.app.schemas.inquiry import StatsResponse
from coaching_api.app.services.statistics_service import StatisticsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(store: InquiryStore = Depends(get_store)) -> StatsResponse:
    """Return inquiry counts by status and by certification."""
    try:
        stats = await StatisticsService.overview(store)
    except OSError:
        logger.exception("Error fetching stats")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error fetching statistics",
        )
    return StatsResponse(stats=stats)
