"""
Pydantic schemas for inquiries submitted through the contact form.

An inquiry is created with status ``new`` and moves through
``active`` to ``completed`` as the coach works with the client.  The
stored JSON uses camelCase for ``updatedAt``; the Python attribute is
``updated_at`` and the alias takes care of the translation in both
directions.

Timestamps are kept as ISO‑8601 strings, exactly as they are written
to the data file.
"""

import re
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, field_validator

from .common import ApiModel

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class InquiryStatus(str, Enum):
    """Allowed values for ``Inquiry.status`` on write."""

    NEW = "new"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


class InquiryCreate(ApiModel):
    """Contact form payload.

    All four fields are required and must be non‑empty; ``email`` must
    look like ``local@domain.tld``.  Presence is checked by the endpoint
    so that the client receives a single "All fields are required"
    message rather than one error per field.
    """

    name: Optional[str] = Field(None, description="Full name of the prospective client")
    email: Optional[str] = Field(None, description="Contact email address")
    certification: Optional[str] = Field(None, description="Certification the client is interested in")
    message: Optional[str] = Field(None, description="Free text message")

    def is_complete(self) -> bool:
        return all([self.name, self.email, self.certification, self.message])

    def has_valid_email(self) -> bool:
        return bool(self.email) and EMAIL_PATTERN.fullmatch(self.email) is not None


class InquiryStatusUpdate(ApiModel):
    """Body of ``PATCH /api/inquiries/{id}``."""

    status: Optional[str] = Field(None, description="One of: new, active, completed")


class Inquiry(ApiModel):
    """A stored inquiry as persisted and returned by the API.

    Reading is lenient so that older records in the data file stay
    visible: ``status`` is a plain string (legacy free‑form values are
    kept), scalar values of another type are rendered as strings and
    missing text fields become empty strings.  A record without a
    ``timestamp`` sorts as the oldest.  Only a record without an ``id``
    or with a non‑scalar value is rejected.
    """

    id: str
    name: str = ""
    email: str = ""
    certification: str = ""
    message: str = ""
    timestamp: str = ""
    status: str = InquiryStatus.NEW.value
    updated_at: Optional[str] = Field(None, alias="updatedAt")

    @field_validator(
        "id", "name", "email", "certification", "message", "timestamp", "status", "updated_at",
        mode="before",
    )
    @classmethod
    def stringify_scalars(cls, value, info):
        if value is None and info.field_name not in ("id", "updated_at"):
            return ""
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    def to_record(self) -> Dict[str, str]:
        """Return the JSON‑ready dict written to the data file."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ContactResponse(ApiModel):
    success: bool = True
    message: str = "Inquiry submitted successfully"
    inquiry_id: str = Field(..., alias="inquiryId")


class InquiryListResponse(ApiModel):
    success: bool = True
    inquiries: List[Inquiry]


class InquiryResponse(ApiModel):
    success: bool = True
    message: Optional[str] = None
    inquiry: Inquiry


class InquiryStats(ApiModel):
    """Aggregated counts over all stored inquiries."""

    total_inquiries: int = Field(0, alias="totalInquiries")
    new_inquiries: int = Field(0, alias="newInquiries")
    active_clients: int = Field(0, alias="activeClients")
    completed_clients: int = Field(0, alias="completedClients")
    certification_breakdown: Dict[str, int] = Field(default_factory=dict, alias="certificationBreakdown")


class StatsResponse(ApiModel):
    success: bool = True
    stats: InquiryStats
