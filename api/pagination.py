from __future__ import annotations

from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """Page-number pagination shared by every list endpoint.

    `?page_size=` is honoured up to 100 rows; the activity feed is the
    only list that uses its own `limit` instead.
    """

    page_size = 20
    page_size_query_param = "page_size"
    max_page_size = 100
