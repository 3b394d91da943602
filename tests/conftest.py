from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from bookcatalog.config import Settings
from bookcatalog.main import create_app
from bookcatalog.models import Book
from bookcatalog.storage import BookStore


@pytest.fixture
def store() -> BookStore:
    return BookStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(load_sample_data=False)


@pytest.fixture
def client(store: BookStore, settings: Settings) -> TestClient:
    return TestClient(create_app(settings=settings, store=store))


@pytest.fixture
def fundamentals() -> Book:
    return Book(
        title="Fundamentals of Software Engineering",
        authors=["Nathaniel Schutta", "Dan Vega"],
        isbn="978-1098143237",
        published_year=2025,
    )


@pytest.fixture
def effective_java() -> Book:
    return Book(title="Effective Java", authors="Joshua Bloch", isbn="978-0134685991", published_year=2018)
