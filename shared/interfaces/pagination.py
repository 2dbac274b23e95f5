"""
Page-number query parameter parsing.
"""
from typing import Optional

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def parse_int(value: Optional[str], fallback: int) -> int:
    """Parse a signed 64-bit integer query parameter, falling back on anything unparseable."""
    if value is None or value == '':
        return fallback
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return fallback
    if not INT64_MIN <= parsed <= INT64_MAX:
        return fallback
    return parsed


class QueryParamPagination:
    """
    Reads paging options from the query string.

    Invalid or overflowing text falls back to the defaults; negative and
    zero values are left to the gateway.
    """
    page_query_param = 'page'
    page_size_query_param = 'per_page'
    default_page = 1
    default_page_size = 10

    def get_page(self, request) -> int:
        return parse_int(request.query_params.get(self.page_query_param), self.default_page)

    def get_page_size(self, request) -> int:
        return parse_int(request.query_params.get(self.page_size_query_param), self.default_page_size)
