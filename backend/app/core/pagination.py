"""Pagination — 1-based page arithmetic shared by listing and match queries.

Invariants:
    - page >= 1 and size >= 1, otherwise ProfileValidationError
    - start = (page - 1) * size; start >= total raises PageOutOfRangeError
      (an empty collection therefore has no valid page)
    - Returned slice is [start, min(start + size, total))
"""

from typing import Sequence, TypeVar

from app.core.errors import PageOutOfRangeError, ProfileValidationError

T = TypeVar("T")


def validate_page_params(page: int, size: int) -> None:
    if page < 1:
        raise ProfileValidationError(
            "Page number must be greater than 0", field="page",
        )
    if size < 1:
        raise ProfileValidationError(
            "Page size must be greater than 0", field="size",
        )


def paginate(items: Sequence[T], page: int, size: int) -> list[T]:
    """Slice one page out of items. Pure."""
    validate_page_params(page, size)
    total = len(items)
    start = (page - 1) * size
    if start >= total:
        raise PageOutOfRangeError(page, total)
    end = min(start + size, total)
    return list(items[start:end])
