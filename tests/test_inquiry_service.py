"""Tests for the inquiry and statistics services."""

import asyncio
import json
from pathlib import Path

from coaching_api.app.core.store import InquiryStore
from coaching_api.app.schemas.inquiry import InquiryCreate, InquiryStatus
from coaching_api.app.services.inquiry_service import InquiryService, parse_timestamp, utc_now_iso
from coaching_api.app.services.statistics_service import StatisticsService

from .conftest import make_record, seed


def _payload(name: str = "Jane Doe", certification: str = "PMP") -> InquiryCreate:
    return InquiryCreate(
        name=name,
        email="jane@example.com",
        certification=certification,
        message="I would like coaching.",
    )


def test_utc_now_iso_format():
    value = utc_now_iso()
    assert value.endswith("Z")
    # YYYY-MM-DDTHH:MM:SS.mmmZ
    assert len(value) == 24
    assert parse_timestamp(value).tzinfo is not None


def test_create_inquiry_persists_new_record(store: InquiryStore, data_file: Path):
    inquiry = asyncio.run(InquiryService.create_inquiry(store, _payload()))

    assert inquiry.id.isdigit()
    assert inquiry.status == "new"
    assert inquiry.updated_at is None
    stored = json.loads(data_file.read_text(encoding="utf-8"))["inquiries"]
    assert len(stored) == 1
    assert stored[0]["id"] == inquiry.id
    assert stored[0]["status"] == "new"
    assert "updatedAt" not in stored[0]


def test_concurrent_creates_keep_every_record_with_unique_ids(store: InquiryStore):
    async def create_many():
        return await asyncio.gather(
            *(InquiryService.create_inquiry(store, _payload(name=f"Client {i}")) for i in range(20))
        )

    created = asyncio.run(create_many())
    ids = {inquiry.id for inquiry in created}
    assert len(ids) == 20

    listed = asyncio.run(InquiryService.list_inquiries(store))
    assert {inquiry.id for inquiry in listed} == ids


def test_list_sorted_newest_first(store: InquiryStore, data_file: Path):
    t1 = "2024-01-01T08:00:00.000Z"
    t2 = "2024-01-02T08:00:00.000Z"
    t3 = "2024-01-03T08:00:00.000Z"
    seed(data_file, [make_record("2", t2), make_record("3", t3), make_record("1", t1)])

    listed = asyncio.run(InquiryService.list_inquiries(store))
    assert [inquiry.timestamp for inquiry in listed] == [t3, t2, t1]


def test_list_filters_by_status_and_skips_malformed(store: InquiryStore, data_file: Path):
    seed(
        data_file,
        [
            make_record("1", "2024-01-01T08:00:00.000Z", status="active"),
            make_record("2", "2024-01-02T08:00:00.000Z"),
            {"name": "no id or timestamp"},
        ],
    )
    assert len(asyncio.run(InquiryService.list_inquiries(store))) == 2
    active = asyncio.run(InquiryService.list_inquiries(store, status="active"))
    assert [inquiry.id for inquiry in active] == ["1"]


def test_partial_records_are_read_leniently(store: InquiryStore, data_file: Path):
    seed(
        data_file,
        [
            {"id": 5, "name": None, "certification": "PMP", "status": "active"},
            make_record("6", "2024-01-02T08:00:00.000Z"),
        ],
    )
    listed = asyncio.run(InquiryService.list_inquiries(store))
    assert [inquiry.id for inquiry in listed] == ["6", "5"]
    assert listed[1].name == ""
    assert listed[1].timestamp == ""

    updated = asyncio.run(InquiryService.update_status(store, "5", InquiryStatus.COMPLETED))
    assert updated.status == "completed"
    assert updated.updated_at is not None
    assert asyncio.run(StatisticsService.overview(store)).completed_clients == 1
    assert asyncio.run(InquiryService.delete_inquiry(store, "5")) is True


def test_update_skips_write_for_unknown_id(store: InquiryStore, monkeypatch):
    async def unexpected_write(document):
        raise AssertionError("nothing should be written")

    monkeypatch.setattr(store, "write", unexpected_write)
    assert asyncio.run(InquiryService.update_status(store, "missing", InquiryStatus.ACTIVE)) is None


def test_get_inquiry(store: InquiryStore, data_file: Path):
    seed(data_file, [make_record("7", "2024-01-01T08:00:00.000Z")])
    assert asyncio.run(InquiryService.get_inquiry(store, "7")).name == "Client 7"
    assert asyncio.run(InquiryService.get_inquiry(store, "8")) is None


def test_update_status_sets_updated_at(store: InquiryStore, data_file: Path):
    seed(data_file, [make_record("7", "2024-01-01T08:00:00.000Z")])

    updated = asyncio.run(InquiryService.update_status(store, "7", InquiryStatus.ACTIVE))
    assert updated.status == "active"
    assert updated.updated_at is not None
    assert parse_timestamp(updated.updated_at) > parse_timestamp(updated.timestamp)

    stored = json.loads(data_file.read_text(encoding="utf-8"))["inquiries"][0]
    assert stored["status"] == "active"
    assert stored["updatedAt"] == updated.updated_at
    assert stored["message"] == "Hello"


def test_update_status_unknown_id(store: InquiryStore):
    assert asyncio.run(InquiryService.update_status(store, "missing", InquiryStatus.ACTIVE)) is None


def test_delete_inquiry(store: InquiryStore, data_file: Path):
    seed(data_file, [make_record("1", "2024-01-01T08:00:00.000Z"), make_record("2", "2024-01-02T08:00:00.000Z")])

    assert asyncio.run(InquiryService.delete_inquiry(store, "1")) is True
    assert [inquiry.id for inquiry in asyncio.run(InquiryService.list_inquiries(store))] == ["2"]
    assert asyncio.run(InquiryService.delete_inquiry(store, "1")) is False


def test_statistics_overview(store: InquiryStore, data_file: Path):
    seed(
        data_file,
        [
            make_record("1", "2024-01-01T08:00:00.000Z", status="new", certification="PMP"),
            make_record("2", "2024-01-02T08:00:00.000Z", status="active", certification="CISSP"),
            make_record("3", "2024-01-03T08:00:00.000Z", status="active", certification="PMP"),
            make_record("4", "2024-01-04T08:00:00.000Z", status="completed", certification="AWS SAA"),
        ],
    )
    stats = asyncio.run(StatisticsService.overview(store))
    assert stats.total_inquiries == 4
    assert stats.new_inquiries == 1
    assert stats.active_clients == 2
    assert stats.completed_clients == 1
    assert stats.certification_breakdown == {"PMP": 2, "CISSP": 1, "AWS SAA": 1}


def test_statistics_legacy_status_only_counts_in_total(store: InquiryStore, data_file: Path):
    seed(data_file, [make_record("1", "2024-01-01T08:00:00.000Z", status="on-hold")])
    stats = asyncio.run(StatisticsService.overview(store))
    assert stats.total_inquiries == 1
    assert stats.new_inquiries == stats.active_clients == stats.completed_clients == 0


def test_statistics_empty_store(store: InquiryStore):
    stats = asyncio.run(StatisticsService.overview(store))
    assert stats.total_inquiries == 0
    assert stats.certification_breakdown == {}
