"""
Pagination utilities.
Provides consistent pagination across all list endpoints.
"""
import math
from typing import List, TypeVar

T = TypeVar("T")


def create_paginated_response(
    items: List[T],
    total: int,
    page: int,
    limit: int
) -> dict:
    """
    Create a paginated response dictionary.

    Args:
        items: List of items for current page
        total: Total count of all items
        page: Current page number
        limit: Items per page

    Returns:
        Dictionary with the items and the pagination block
    """
    pages = math.ceil(total / limit) if limit > 0 else 0

    return {
        "items": items,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "pages": pages,
        }
    }
