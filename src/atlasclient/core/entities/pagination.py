"""Pagination entities."""

from dataclasses import asdict, dataclass
from typing import Any

DEFAULT_PAGE_LIMIT = 10


@dataclass
class PaginationOptions:
    """Pagination input accepted by list operations.

    ``page`` is 1-indexed and wins over ``offset`` when both are given.
    """

    limit: int | None = None
    page: int | None = None
    offset: int | None = None

    def to_params(self) -> dict[str, Any]:
        """Return the options that were actually set."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class PaginationInfo:
    """Normalized pagination: always a positive limit and both representations."""

    limit: int
    offset: int
    page: int
