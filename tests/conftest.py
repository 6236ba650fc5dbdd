"""Pytest configuration for the Certification Coaching API tests."""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from coaching_api.app.core.config import Settings
from coaching_api.app.core.store import InquiryStore
from coaching_api.app.main import create_app

ADMIN_USERNAME = "Admin"
ADMIN_PASSWORD = "correct horse battery"
ADMIN_SALT = "test-salt"


def make_record(inquiry_id: str, timestamp: str, status: str = "new", certification: str = "PMP") -> Dict[str, Any]:
    return {
        "id": inquiry_id,
        "name": f"Client {inquiry_id}",
        "email": f"client{inquiry_id}@example.com",
        "certification": certification,
        "message": "Hello",
        "timestamp": timestamp,
        "status": status,
    }


def seed(path: Path, records: List[Dict[str, Any]]) -> None:
    path.write_text(json.dumps({"inquiries": records}), encoding="utf-8")


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "inquiries.json"


@pytest.fixture
def settings(data_file: Path) -> Settings:
    return Settings(
        data_file=str(data_file),
        cors_origins="*",
        admin_username=ADMIN_USERNAME,
        admin_salt=ADMIN_SALT,
        admin_password_hash=hashlib.sha256((ADMIN_PASSWORD + ADMIN_SALT).encode("utf-8")).hexdigest(),
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def store(data_file: Path) -> InquiryStore:
    """A standalone store for service level tests."""
    inquiry_store = InquiryStore(data_file)
    inquiry_store.initialize()
    return inquiry_store
