"""Exceptions raised by the catalog store.

Absence of a record is never an error: lookups return ``None`` and
deletes return ``False``. Only structurally invalid input raises.
"""


class CatalogError(Exception):
    """Base exception for catalog errors."""


class ValidationError(CatalogError):
    """A book cannot be stored because a required field is missing or invalid."""
