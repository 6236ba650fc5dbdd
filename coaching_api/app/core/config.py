"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a production
deployment you should at least override the admin credentials via
``ADMIN_USERNAME``, ``ADMIN_SALT`` and ``ADMIN_PASSWORD_HASH``
(see ``hash_admin_password.py`` for generating the digest).
"""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Certification Coaching API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Address uvicorn binds to when started through ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path of the JSON document holding all inquiries.  A relative path
    # is resolved against the ``coaching_api`` package directory by the
    # ``store`` module.
    data_file: str = os.getenv("DATA_FILE", "inquiries.json")

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # The single admin identity checked by ``POST /api/login``.  The
    # digest is ``sha256(password + salt)`` in lowercase hex.
    admin_username: str = os.getenv("ADMIN_USERNAME", "Admin")
    admin_salt: str = os.getenv("ADMIN_SALT", "MiloIsAAwesomeCat")
    admin_password_hash: str = os.getenv(
        "ADMIN_PASSWORD_HASH",
        "8ebc456b7a9dc1bb25b7b2fa76f33d6043f71a8f4033d2e12720c1934daf4027",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
