"""
Service for the single admin account.

The admin identity is not stored with the inquiries; it comes from
``Settings`` (``admin_username``, ``admin_salt`` and
``admin_password_hash``).  Authentication only answers whether the
credentials match; no session or token is created.
"""

from __future__ import annotations

import logging
from typing import Optional

from coaching_api.app.core.config import Settings
from coaching_api.app.core.security import verify_password, verify_username
from coaching_api.app.schemas.auth import AdminUser

logger = logging.getLogger(__name__)


class AuthService:
    """Service checking admin credentials."""

    @classmethod
    async def authenticate(cls, username: str, password: str, settings: Settings) -> Optional[AdminUser]:
        """Return the admin user if the credentials match, else ``None``.

        The username comparison is exact and case sensitive; the password
        is verified against the configured salted SHA‑256 digest.
        """
        if not verify_username(username, settings.admin_username):
            logger.info("Login rejected: unknown username")
            return None
        if not verify_password(password, settings.admin_salt, settings.admin_password_hash):
            logger.info("Login rejected: wrong password for %s", username)
            return None
        logger.info("Admin %s logged in", username)
        return AdminUser(username=settings.admin_username)
