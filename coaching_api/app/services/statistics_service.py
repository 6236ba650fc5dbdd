"""
Service layer for inquiry statistics.

Counts are computed in Python over the same records the inquiry
listing shows: the total, one count per known status and a breakdown
of inquiries per certification.  Inquiries whose status is outside
the known set (for example legacy records) only contribute to the
total and the certification breakdown.
"""

from __future__ import annotations

from collections import Counter

from coaching_api.app.core.store import InquiryStore
from coaching_api.app.schemas.inquiry import InquiryStats, InquiryStatus
from coaching_api.app.services.inquiry_service import load_inquiries


class StatisticsService:
    """Service providing aggregated inquiry metrics for the admin dashboard."""

    @classmethod
    async def overview(cls, store: InquiryStore) -> InquiryStats:
        inquiries = load_inquiries(await store.read())
        statuses = Counter(inquiry.status for inquiry in inquiries)
        certifications = Counter(inquiry.certification for inquiry in inquiries)
        return InquiryStats(
            total_inquiries=len(inquiries),
            new_inquiries=statuses[InquiryStatus.NEW.value],
            active_clients=statuses[InquiryStatus.ACTIVE.value],
            completed_clients=statuses[InquiryStatus.COMPLETED.value],
            certification_breakdown=dict(certifications),
        )
