"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one concern
(health, login, contact form, inquiries, statistics).  The routers
are aggregated in ``api/router.py`` and then included in the main
application.
"""
