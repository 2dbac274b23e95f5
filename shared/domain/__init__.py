# Shared domain module
from .base_entity import BaseEntity, utc_now
from .base_value_object import ValueObject
from .exceptions import (
    DomainException,
    InvalidIdentifierError,
    StorageError,
    ValidationError,
    ValidationErrors,
)
from .pagination import Pagination

__all__ = [
    'BaseEntity',
    'utc_now',
    'ValueObject',
    'DomainException',
    'InvalidIdentifierError',
    'StorageError',
    'ValidationError',
    'ValidationErrors',
    'Pagination',
]
