"""
Top‑level router for the API.

This router aggregates the concern‑specific routers under a unified
prefix (``/api``, applied in ``main.create_app``).  When new endpoints
are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, contact, health, inquiries, stats

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(contact.router, tags=["contact"])
router.include_router(inquiries.router, prefix="/inquiries", tags=["inquiries"])
router.include_router(stats.router, tags=["statistics"])
