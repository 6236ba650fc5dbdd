"""Tests for the admin password helpers and the auth service."""

import asyncio

from coaching_api.app.core.security import hash_password, verify_password, verify_username
from coaching_api.app.services.auth_service import AuthService

from .conftest import ADMIN_PASSWORD, ADMIN_USERNAME

# sha256("abc")
ABC_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_hash_password_appends_salt():
    assert hash_password("ab", "c") == ABC_DIGEST


def test_hash_password_is_lowercase_hex():
    digest = hash_password("anything", "salt")
    assert len(digest) == 64
    assert digest == digest.lower()
    int(digest, 16)


def test_verify_password():
    assert verify_password("ab", "c", ABC_DIGEST)
    assert not verify_password("abc", "", ABC_DIGEST.upper())
    assert not verify_password("ab", "d", ABC_DIGEST)


def test_verify_username_is_case_sensitive():
    assert verify_username("Admin", "Admin")
    assert not verify_username("admin", "Admin")
    assert not verify_username("Admin ", "Admin")


def test_authenticate(settings):
    user = asyncio.run(AuthService.authenticate(ADMIN_USERNAME, ADMIN_PASSWORD, settings))
    assert user is not None
    assert user.username == ADMIN_USERNAME
    assert asyncio.run(AuthService.authenticate(ADMIN_USERNAME, "wrong", settings)) is None
    assert asyncio.run(AuthService.authenticate("root", ADMIN_PASSWORD, settings)) is None


def test_default_settings_accept_hash_of_configured_salt():
    from coaching_api.app.core.config import Settings

    custom = Settings(admin_salt="pepper", admin_password_hash=hash_password("hunter2", "pepper"))
    assert asyncio.run(AuthService.authenticate(custom.admin_username, "hunter2", custom)) is not None
