"""Pagination helpers bridging page-based and offset-based queries.

The API pages with ``limit``/``offset``; callers may ask for a 1-indexed
``page`` instead. Responses only carry ``total``, ``limit`` and ``offset``
so the remaining metadata is derived here.
"""

import math
from collections.abc import Mapping
from typing import Any

from atlasclient.core.entities.pagination import (
    DEFAULT_PAGE_LIMIT,
    PaginationInfo,
    PaginationOptions,
)


def _is_usable_limit(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value >= 1


def _positive_limit(limit: Any) -> int:
    return int(limit) if _is_usable_limit(limit) else DEFAULT_PAGE_LIMIT


def page_to_offset(page: int | None, limit: int = DEFAULT_PAGE_LIMIT) -> int:
    """Convert a 1-indexed page to an offset; pages below 1 map to 0."""
    if not page or page < 1:
        return 0
    return (page - 1) * _positive_limit(limit)


def offset_to_page(offset: int, limit: int = DEFAULT_PAGE_LIMIT) -> int:
    """Convert an offset to the 1-indexed page that contains it."""
    return max(0, offset) // _positive_limit(limit) + 1


def normalize_pagination(
    options: PaginationOptions | Mapping[str, Any] | None,
) -> PaginationInfo:
    """Reconcile page-based and offset-based pagination input.

    ``page`` wins over ``offset``; with neither, the first page is used.
    A missing or non-positive limit falls back to 10.

    Args:
        options: Pagination options, or any mapping holding
            ``limit``/``page``/``offset`` among other filters.

    Returns:
        The normalized limit, offset and page.
    """
    if options is None:
        options = PaginationOptions()
    if isinstance(options, PaginationOptions):
        limit_in, page, offset = options.limit, options.page, options.offset
    else:
        limit_in = options.get("limit")
        page = options.get("page")
        offset = options.get("offset")

    limit = _positive_limit(limit_in)

    if page is not None:
        return PaginationInfo(limit=limit, offset=page_to_offset(page, limit), page=page)

    if offset is not None:
        offset = max(0, offset)
        return PaginationInfo(limit=limit, offset=offset, page=offset_to_page(offset, limit))

    return PaginationInfo(limit=limit, offset=0, page=1)


def enrich_pagination(
    response: Any,
    requested_limit: int,
    requested_page: int | None = None,
) -> Any:
    """Fill in page metadata the backend did not compute.

    Adds ``page``, ``totalPages``, ``hasMore`` and ``hasPrevious`` to the
    response's ``pagination`` block. The input is left untouched.

    Args:
        response: Decoded API response.
        requested_limit: Limit the caller asked for; used when the server
            did not echo a usable one.
        requested_page: Page the caller asked for; otherwise derived from
            the server's offset.

    Returns:
        A new response with the enriched block, or ``response`` itself
        when it carries no pagination block.
    """
    if not isinstance(response, Mapping):
        return response
    pagination = response.get("pagination")
    if not isinstance(pagination, Mapping):
        return response

    total = max(0, int(pagination.get("total") or 0))
    server_limit = pagination.get("limit")
    limit = _positive_limit(server_limit if _is_usable_limit(server_limit) else requested_limit)
    offset = int(pagination.get("offset") or 0)

    current_page = requested_page or offset_to_page(offset, limit)
    total_pages = math.ceil(total / limit)

    enriched = dict(response)
    enriched["pagination"] = {
        **pagination,
        "page": current_page,
        "totalPages": total_pages,
        "hasMore": current_page < total_pages,
        "hasPrevious": current_page > 1,
    }
    return enriched
