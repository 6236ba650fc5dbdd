"""Entry point for the Certification Coaching API.

This script starts the FastAPI application under Uvicorn.  It is
intended to be executed from the project root, for example under
Docker or a process manager, where you only specify a single Python
file to run.

Configuration such as PORT, DATA_FILE and the admin credentials is
read from environment variables; see ``coaching_api/app/core/config.py``
for the full list.

Usage:
    PORT=3000 python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from coaching_api.app.core.config import settings
from coaching_api.app.core.store import get_data_path
from coaching_api.app.main import app

ENDPOINTS = (
    ("GET", "/api/health", "Health check"),
    ("POST", "/api/login", "Admin login"),
    ("POST", "/api/contact", "Submit contact form"),
    ("GET", "/api/inquiries", "Get all inquiries"),
    ("GET", "/api/inquiries/{id}", "Get one inquiry"),
    ("PATCH", "/api/inquiries/{id}", "Update inquiry status"),
    ("DELETE", "/api/inquiries/{id}", "Delete inquiry"),
    ("GET", "/api/stats", "Get statistics"),
)


def log_banner() -> None:
    """Log where the server listens, the admin username and the routes."""
    logger = logging.getLogger("coaching_api")
    logger.info("%s running on http://%s:%s", settings.project_name, settings.host, settings.port)
    logger.info("Admin username: %s (password checked against a salted SHA-256 digest)", settings.admin_username)
    for method, path, description in ENDPOINTS:
        logger.info("  %-6s %-22s %s", method, path, description)
    logger.info("Data stored in: %s", get_data_path(settings))


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    log_banner()
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
