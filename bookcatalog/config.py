"""
Configuration for the book catalog service.

``Settings`` reads its values from environment variables, with a
default for every field. ``settings`` is built once at import time, so
variables must be set before this module is imported; tests that need
other values build their own ``Settings`` and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


DEFAULT_SAMPLE_DATA = Path(__file__).resolve().parent / "data" / "sample_books.json"


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Book Catalog API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # When enabled, the store is filled from ``sample_data_path`` at
    # application start.
    load_sample_data: bool = field(default_factory=lambda: _env_bool("LOAD_SAMPLE_DATA"))
    sample_data_path: str = field(
        default_factory=lambda: os.getenv("SAMPLE_DATA_PATH", str(DEFAULT_SAMPLE_DATA))
    )

    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


settings = Settings()
