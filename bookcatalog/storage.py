# bookcatalog/storage.py
"""
In-memory store for the catalogue.

``BookStore`` owns a dict of ``Book`` records keyed by id, plus the
counter used to assign ids. One instance is created per application
(see ``main.create_app``) and handed to the routes through
``app.state``; there is no module-level collection.

All access goes through a single ``threading.Lock``. Writers hold it
for the whole mutation (including id assignment). Readers only hold it
long enough to copy the current values, then filter the copy, so they
never observe a half-applied write.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

import pydantic

from .errors import ValidationError
from .models import Book


logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").casefold()


def _check_book(book: Book) -> None:
    if not book.title or not book.title.strip():
        raise ValidationError("title must not be empty")
    if not book.authors:
        raise ValidationError("authors must contain at least one name")
    if any(not a or not a.strip() for a in book.authors):
        raise ValidationError("author names must not be empty")
    if book.id is not None and book.id <= 0:
        raise ValidationError("id must be a positive integer")


class BookStore:
    """Thread-safe, in-memory collection of books."""

    def __init__(self) -> None:
        self._books: Dict[int, Book] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # writes

    def create(self, book: Book) -> Book:
        """Store ``book`` and return the stored record.

        When ``book.id`` is ``None`` the next unused id is assigned. Ids
        are never handed out twice, even after the book holding one has
        been deleted. A caller-supplied id is kept as is and the counter
        moves past it.

        Raises
        ------
        ValidationError
            If the title or authors are empty, or the supplied id is not
            positive or already taken.
        """
        _check_book(book)
        with self._lock:
            if book.id is None:
                stored = book.model_copy(update={"id": self._next_id})
            elif book.id in self._books:
                raise ValidationError(f"a book with id {book.id} already exists")
            else:
                stored = book
            self._books[stored.id] = stored
            self._next_id = max(self._next_id, stored.id + 1)
        logger.info("Created book %s (%r)", stored.id, stored.title)
        return stored

    def delete_by_id(self, book_id: int) -> bool:
        """Remove the book with ``book_id``. Returns ``False`` if absent."""
        with self._lock:
            removed = self._books.pop(book_id, None)
        if removed is None:
            return False
        logger.info("Deleted book %s", book_id)
        return True

    def clear(self) -> None:
        """Drop every book. The id counter is left untouched."""
        with self._lock:
            self._books.clear()

    # ------------------------------------------------------------------
    # reads

    def _snapshot(self) -> List[Book]:
        with self._lock:
            return list(self._books.values())

    def _filter(self, predicate: Callable[[Book], bool]) -> List[Book]:
        return [b for b in self._snapshot() if predicate(b)]

    def find_all(self) -> List[Book]:
        return self._snapshot()

    def find_by_id(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return self._books.get(book_id)

    def exists_by_id(self, book_id: int) -> bool:
        with self._lock:
            return book_id in self._books

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def find_by_title_containing_ignore_case(self, fragment: str) -> List[Book]:
        """Books whose title contains ``fragment``, ignoring case.

        An empty fragment matches every book.
        """
        nq = _norm(fragment)
        logger.debug("Title search for %r", fragment)
        return self._filter(lambda b: nq in _norm(b.title))

    def find_by_author_containing_ignore_case(self, fragment: str) -> List[Book]:
        """Books where any author name contains ``fragment``, ignoring case."""
        nq = _norm(fragment)
        logger.debug("Author search for %r", fragment)
        return self._filter(lambda b: any(nq in _norm(a) for a in b.authors))

    # ------------------------------------------------------------------
    # sample data

    def load_sample_books(self, path: Union[str, Path]) -> List[Book]:
        """Create every book listed in a JSON file.

        The file holds an array of objects shaped like the API's book
        payload. Entries that do not parse or fail validation are logged
        and skipped. A missing or malformed file loads nothing.

        Returns
        -------
        List[Book]
            The books that were stored.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read sample books from %s: %s", path, exc)
            return []
        if not isinstance(raw, list):
            logger.warning("Sample file %s does not contain a JSON array", path)
            return []
        return self._create_many(raw, source=str(path))

    def _create_many(self, entries: Iterable[dict], source: str) -> List[Book]:
        loaded: List[Book] = []
        for index, entry in enumerate(entries):
            try:
                book = Book.model_validate(entry)
                loaded.append(self.create(book))
            except (pydantic.ValidationError, ValidationError) as exc:
                logger.warning("Skipping entry %d from %s: %s", index, source, exc)
        logger.info("Loaded %d sample books from %s", len(loaded), source)
        return loaded
