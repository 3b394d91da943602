"""
In-memory book catalog exposed over a small REST API.

``BookStore`` holds the books; ``main.create_app`` serves a store over
HTTP under ``/api/books``.
"""

from .errors import CatalogError, ValidationError  # noqa: F401
from .models import Book, BookCreate  # noqa: F401
from .storage import BookStore  # noqa: F401
