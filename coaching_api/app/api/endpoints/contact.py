"""
Contact form endpoint.

Submissions are validated (all fields present, email well formed)
and stored as new inquiries.  No notification is sent; the admin sees
new inquiries through ``GET /api/inquiries``.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from coaching_api.app.core.store import InquiryStore, get_store
from coaching_api.app.schemas.inquiry import ContactResponse, InquiryCreate
from coaching_api.app.services.inquiry_service import InquiryService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/contact", response_model=ContactResponse)
async def submit_contact(
    payload: InquiryCreate,
    store: InquiryStore = Depends(get_store),
) -> ContactResponse:
    """Store a contact form submission and return the new inquiry ID."""
    if not payload.is_complete():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="All fields are required")
    if not payload.has_valid_email():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid email address")
    try:
        inquiry = await InquiryService.create_inquiry(store, payload)
    except OSError:
        logger.exception("Error saving inquiry")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error processing your request. Please try again.",
        )
    return ContactResponse(inquiry_id=inquiry.id)
