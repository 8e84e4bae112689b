"""
Pagination utilities for django-ninja endpoints.
"""

from typing import Any

from django.db.models import QuerySet
from ninja import Schema


class PaginatedResponse(Schema):
    count: int
    page: int
    page_size: int
    results: list[Any]


def paginate_queryset(
    queryset: QuerySet,
    page: int = 1,
    page_size: int = 25,
    max_page_size: int = 100,
) -> tuple[QuerySet, int, int, int]:
    """
    Apply offset pagination to a queryset.

    Out-of-range values are clamped rather than rejected.
    Returns (sliced_queryset, total_count, page, page_size).
    """
    page_size = max(1, min(page_size, max_page_size))
    page = max(page, 1)
    offset = (page - 1) * page_size

    total = queryset.count()
    sliced = queryset[offset : offset + page_size]

    return sliced, total, page, page_size
