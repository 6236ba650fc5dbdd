"""
Service layer for contact‑form inquiries.

This module implements the inquiry lifecycle on top of
``InquiryStore``: creation from a contact form submission, listing
(newest first), lookup, status updates and deletion.  Every mutating
operation holds the store lock for its whole read‑modify‑write cycle,
so two requests cannot both start from the same snapshot and lose each
other's changes.

Identifiers are the creation time in milliseconds since the epoch,
rendered as a decimal string.  When that value is already taken (two
submissions within the same millisecond) it is bumped until it is
unique in the collection.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from coaching_api.app.core.store import InquiryStore
from coaching_api.app.schemas.inquiry import Inquiry, InquiryCreate, InquiryStatus

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def utc_now_iso() -> str:
    """Current UTC time as ISO‑8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO‑8601 timestamp; unparseable values sort as oldest."""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _next_id(records: List[Any]) -> str:
    taken = {str(record.get("id")) for record in records if isinstance(record, dict)}
    candidate = int(time.time() * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)


def _to_inquiry(record: Any) -> Optional[Inquiry]:
    try:
        return Inquiry.model_validate(record)
    except ValidationError as exc:
        logger.warning("Skipping malformed inquiry record: %s", exc.errors()[:1])
        return None


def load_inquiries(document: Dict[str, Any]) -> List[Inquiry]:
    """Parse every usable record of ``document`` in file order.

    This is the single definition of which stored records exist: list,
    lookup, update, delete and statistics all go through it.
    """
    return [inq for inq in map(_to_inquiry, document["inquiries"]) if inq is not None]


def _locate(records: List[Any], inquiry_id: str) -> Optional[Tuple[int, Inquiry]]:
    for index, record in enumerate(records):
        if not isinstance(record, dict) or record.get("id") is None:
            continue
        inquiry = _to_inquiry(record)
        if inquiry is not None and inquiry.id == inquiry_id:
            return index, inquiry
    return None


class InquiryService:
    """Service class for managing inquiries."""

    @classmethod
    async def create_inquiry(cls, store: InquiryStore, data: InquiryCreate) -> Inquiry:
        """Persist a new inquiry with status ``new`` and return it.

        The caller is expected to have validated ``data`` (all fields
        present, email well formed).  Storage errors propagate.
        """
        async with store.lock:
            document = await store.read()
            records = document["inquiries"]
            inquiry = Inquiry(
                id=_next_id(records),
                name=data.name,
                email=data.email,
                certification=data.certification,
                message=data.message,
                timestamp=utc_now_iso(),
                status=InquiryStatus.NEW.value,
            )
            records.append(inquiry.to_record())
            await store.write(document)
        logger.info("Created inquiry %s for %s", inquiry.id, inquiry.certification)
        return inquiry

    @classmethod
    async def list_inquiries(cls, store: InquiryStore, status: Optional[str] = None) -> List[Inquiry]:
        """Return all inquiries sorted by ``timestamp``, newest first.

        When ``status`` is given only inquiries with exactly that status
        are returned.  Records without an ``id`` are skipped.
        """
        inquiries = load_inquiries(await store.read())
        if status is not None:
            inquiries = [inq for inq in inquiries if inq.status == status]
        inquiries.sort(key=lambda inq: parse_timestamp(inq.timestamp), reverse=True)
        return inquiries

    @classmethod
    async def get_inquiry(cls, store: InquiryStore, inquiry_id: str) -> Optional[Inquiry]:
        """Retrieve a single inquiry by its ID."""
        document = await store.read()
        found = _locate(document["inquiries"], inquiry_id)
        return found[1] if found else None

    @classmethod
    async def update_status(cls, store: InquiryStore, inquiry_id: str, status: InquiryStatus) -> Optional[Inquiry]:
        """Set the status of an inquiry and stamp ``updatedAt``.

        Returns the updated inquiry or ``None`` if no inquiry has that ID;
        nothing is written in the latter case.  Other fields of the stored
        record are left untouched.
        """
        async with store.lock:
            document = await store.read()
            records = document["inquiries"]
            found = _locate(records, inquiry_id)
            if found is None:
                return None
            index, inquiry = found
            changes = {"status": InquiryStatus(status).value, "updatedAt": utc_now_iso()}
            records[index].update(changes)
            await store.write(document)
        logger.info("Updated inquiry %s to status %s", inquiry_id, changes["status"])
        return inquiry.model_copy(update={"status": changes["status"], "updated_at": changes["updatedAt"]})

    @classmethod
    async def delete_inquiry(cls, store: InquiryStore, inquiry_id: str) -> bool:
        """Delete an inquiry by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        async with store.lock:
            document = await store.read()
            records = document["inquiries"]
            found = _locate(records, inquiry_id)
            if found is None:
                return False
            del records[found[0]]
            await store.write(document)
        logger.info("Deleted inquiry %s", inquiry_id)
        return True
