# bookcatalog/main.py
"""
Application factory for the book catalog API.

``create_app`` configures logging, builds (or accepts) the
``BookStore`` the routes will use, mounts the catalog router and
registers the error handlers. A module-level ``app`` is created so the
service can be served directly::

    uvicorn bookcatalog.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .config import Settings, settings as default_settings
from .errors import ValidationError
from .logging_config import setup_logging
from .storage import BookStore


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    store : Optional[BookStore]
        Store to serve. A new empty one is created when omitted.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        description="Catalogue de livres en mémoire : création, lecture, suppression et recherche.",
        version=settings.api_version,
    )

    if store is None:
        store = BookStore()
    if settings.load_sample_data:
        store.load_sample_books(settings.sample_data_path)
    app.state.book_store = store

    app.include_router(catalog_router)

    # 🔹 Route de base pour tester rapidement
    @app.get("/")
    def health_check():
        return {"status": "ok", "books": store.count()}

    @app.exception_handler(ValidationError)
    async def catalog_validation_handler(request: Request, exc: ValidationError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid request %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    return app


app = create_app()
