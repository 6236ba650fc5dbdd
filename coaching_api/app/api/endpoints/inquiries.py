"""
Inquiry endpoints.

These routes expose listing, lookup, status updates and deletion of
the inquiries submitted through the contact form.  They are meant for
the admin dashboard but are not gated: login does not issue a token,
so there is nothing to check here yet.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from coaching_api.app.core.store import InquiryStore, get_store
from coaching_api.app.schemas.common import MessageResponse
from coaching_api.app.schemas.inquiry import (
    InquiryListResponse,
    InquiryResponse,
    InquiryStatus,
    InquiryStatusUpdate,
)
from coaching_api.app.services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Inquiry not found")


def _server_error(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


@router.get("", response_model=InquiryListResponse, response_model_exclude_none=True)
async def list_inquiries(
    status_filter: Optional[InquiryStatus] = Query(None, alias="status"),
    store: InquiryStore = Depends(get_store),
) -> InquiryListResponse:
    """Return all inquiries, newest first.

    ``?status=`` restricts the result to one status; an unknown value
    is rejected with HTTP 400.
    """
    try:
        inquiries = await InquiryService.list_inquiries(
            store, status=status_filter.value if status_filter else None
        )
    except OSError:
        logger.exception("Error fetching inquiries")
        raise _server_error("Error fetching inquiries")
    return InquiryListResponse(inquiries=inquiries)


@router.get("/{inquiry_id}", response_model=InquiryResponse, response_model_exclude_none=True)
async def get_inquiry(inquiry_id: str, store: InquiryStore = Depends(get_store)) -> InquiryResponse:
    """Retrieve a single inquiry by ID.

    Returns HTTP 404 if the inquiry is not found.
    """
    try:
        inquiry = await InquiryService.get_inquiry(store, inquiry_id)
    except OSError:
        logger.exception("Error fetching inquiry %s", inquiry_id)
        raise _server_error("Error fetching inquiry")
    if inquiry is None:
        raise _not_found()
    return InquiryResponse(inquiry=inquiry)


@router.patch("/{inquiry_id}", response_model=InquiryResponse, response_model_exclude_none=True)
async def update_inquiry(
    inquiry_id: str,
    update: InquiryStatusUpdate,
    store: InquiryStore = Depends(get_store),
) -> InquiryResponse:
    """Change the status of an inquiry.

    The status must be one of ``new``, ``active`` or ``completed``.
    ``updatedAt`` is set to the current time.  Returns HTTP 400 for a
    missing or unknown status and HTTP 404 for an unknown ID.
    """
    if not update.status:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Status is required")
    if update.status not in InquiryStatus.values():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid status; expected one of: {', '.join(InquiryStatus.values())}",
        )
    try:
        inquiry = await InquiryService.update_status(store, inquiry_id, InquiryStatus(update.status))
    except OSError:
        logger.exception("Error updating inquiry %s", inquiry_id)
        raise _server_error("Error updating inquiry")
    if inquiry is None:
        raise _not_found()
    return InquiryResponse(message="Inquiry updated successfully", inquiry=inquiry)


@router.delete("/{inquiry_id}", response_model=MessageResponse)
async def delete_inquiry(inquiry_id: str, store: InquiryStore = Depends(get_store)) -> MessageResponse:
    """Delete an inquiry.  Returns HTTP 404 if it does not exist."""
    try:
        deleted = await InquiryService.delete_inquiry(store, inquiry_id)
    except OSError:
        logger.exception("Error deleting inquiry %s", inquiry_id)
        raise _server_error("Error deleting inquiry")
    if not deleted:
        raise _not_found()
    return MessageResponse(message="Inquiry deleted successfully")
