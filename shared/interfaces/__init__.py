# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .pagination import QueryParamPagination, parse_int

__all__ = ['custom_exception_handler', 'QueryParamPagination', 'parse_int']
