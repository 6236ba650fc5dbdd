"""
JSON file persistence for inquiries.

All inquiries live in one JSON document of the form
``{"inquiries": [...]}``.  Every operation loads or replaces the whole
document; there is no indexing and no partial update.  To keep
concurrent requests from overwriting each other's changes, callers
hold ``InquiryStore.lock`` around each read‑modify‑write cycle, and
``write`` replaces the file atomically so that a reader never sees a
half‑written document.

File I/O runs in a worker thread so that the event loop keeps serving
other requests while the disk is busy.
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from fastapi import Request

from .config import Settings

logger = logging.getLogger(__name__)


def empty_document() -> Dict[str, Any]:
    return {"inquiries": []}


def get_data_path(settings: Settings) -> Path:
    """Compute the path to the JSON data file.

    If ``settings.data_file`` is an absolute path, use it directly.
    Otherwise resolve it relative to the ``coaching_api`` package
    directory.
    """
    data_file = Path(settings.data_file)
    if data_file.is_absolute():
        return data_file
    base_dir = Path(__file__).resolve().parent.parent.parent  # coaching_api/
    return (base_dir / data_file).resolve()


class InquiryStore:
    """Whole‑document JSON store guarded by an asyncio lock."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.lock = asyncio.Lock()

    def initialize(self) -> None:
        """Create the data file with an empty collection if it is missing."""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write_sync(empty_document())
        logger.info("Created data file %s", self.path)

    async def read(self) -> Dict[str, Any]:
        """Load the whole document.

        Any failure (missing file, permissions, invalid JSON, unexpected
        shape) yields an empty collection; the cause is only logged.
        """
        return await asyncio.to_thread(self._read_sync)

    async def write(self, document: Dict[str, Any]) -> None:
        """Serialize ``document`` and replace the data file with it."""
        await asyncio.to_thread(self._write_sync, document)

    def _read_sync(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, treating it as empty: %s", self.path, exc)
            return empty_document()
        if not isinstance(document, dict) or not isinstance(document.get("inquiries"), list):
            logger.warning("Unexpected document shape in %s, treating it as empty", self.path)
            return empty_document()
        return document

    def _write_sync(self, document: Dict[str, Any]) -> None:
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            # Leave no stray temp file behind; the original file is untouched.
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise


def get_store(request: Request) -> InquiryStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the application was built with."""
    return request.app.state.settings
