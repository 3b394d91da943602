"""
Route definitions for the book catalog API.

Endpoints under /api/books:
- GET    ""                 : list every book
- GET    /search?title=     : books whose title contains ``title``
- GET    /author/{author}   : books with an author matching ``author``
- GET    /{book_id}         : one book, 404 if absent
- POST   ""                 : create a book (201), 400 on invalid input
- DELETE /{book_id}         : delete a book (204), 404 if absent

The routes never touch storage directly: they receive the application's
``BookStore`` through the ``get_store`` dependency and map its results
to status codes. ``/search`` and ``/author`` are declared before
``/{book_id}`` so they are not captured by the id route.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from ..models import Book, BookCreate
from ..storage import BookStore


router = APIRouter(prefix="/api/books", tags=["books"])


def get_store(request: Request) -> BookStore:
    return request.app.state.book_store


@router.get("", response_model=List[Book])
def list_books(store: BookStore = Depends(get_store)) -> List[Book]:
    return store.find_all()


@router.get("/search", response_model=List[Book])
def search_by_title(
    title: str = Query(default="", description="Fragment of the title, case-insensitive"),
    store: BookStore = Depends(get_store),
) -> List[Book]:
    return store.find_by_title_containing_ignore_case(title)


@router.get("/author/{author}", response_model=List[Book])
def search_by_author(author: str, store: BookStore = Depends(get_store)) -> List[Book]:
    """Books where at least one author contains ``author``, ignoring case."""
    return store.find_by_author_containing_ignore_case(author)


@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, store: BookStore = Depends(get_store)) -> Book:
    book = store.find_by_id(book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(req: BookCreate, store: BookStore = Depends(get_store)) -> Book:
    """Create a book. The id is always assigned by the store.

    A ``ValidationError`` raised by the store is turned into a 400 by the
    handler registered in ``main.create_app``.
    """
    return store.create(Book.from_create(req))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, store: BookStore = Depends(get_store)) -> Response:
    if not store.exists_by_id(book_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    if not store.delete_by_id(book_id):
        # removed by a concurrent request after the existence check
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
