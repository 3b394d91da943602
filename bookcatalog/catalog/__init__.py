"""
HTTP routes for the book catalog.

The router is mounted by ``bookcatalog.main.create_app`` and reads the
application's ``BookStore`` from ``app.state``.
"""

from .router import router as catalog_router  # noqa: F401
