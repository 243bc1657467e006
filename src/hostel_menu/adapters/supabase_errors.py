"""Translate Supabase client failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from hostel_menu.errors import StoreError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise PostgREST API errors and transport failures as StoreError."""
    try:
        yield
    except APIError as exc:
        raise StoreError(
            f"Failed to {operation}",
            details={"code": exc.code, "message": exc.message},
        ) from exc
    except httpx.HTTPError as exc:
        raise StoreError(
            f"Failed to {operation}",
            details={"code": type(exc).__name__, "message": str(exc)},
        ) from exc
