"""Certification Coaching API: admin login, contact form intake and inquiry management."""

__all__ = []
