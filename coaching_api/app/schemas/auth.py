"""
Pydantic schemas for the admin login.

Both fields of ``LoginRequest`` are optional at the schema level so
that a missing or empty value produces the endpoint's own 400 message
instead of a generic validation error.
"""

from typing import Optional

from pydantic import Field

from .common import ApiModel


class LoginRequest(ApiModel):
    username: Optional[str] = Field(None, description="Admin username (case sensitive)")
    password: Optional[str] = Field(None, description="Plain text password")


class AdminUser(ApiModel):
    """The authenticated admin identity echoed back on login."""

    username: str


class LoginResponse(ApiModel):
    success: bool = True
    message: str = "Login successful"
    user: AdminUser
