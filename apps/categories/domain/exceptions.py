"""
Category domain exceptions.
"""
from shared.domain.exceptions import StorageError, ValidationError


class CategoryNameBlankError(ValidationError):
    """Raised when a category name is empty or whitespace only."""

    def __init__(self):
        super().__init__(
            message="category validation error: name cannot be empty or blank",
            field="name",
        )


class CategoryNameTooShortError(ValidationError):
    """Raised when a trimmed category name is shorter than the minimum."""

    def __init__(self, min_length: int):
        super().__init__(
            message=f"category validation error: name must have at least {min_length} characters",
            field="name",
        )
        self.min_length = min_length


class CategoryNotFoundError(StorageError):
    """Raised by the store when no category row matches an identifier."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"category '{identifier}' not found",
            code="CATEGORY_NOT_FOUND",
        )
        self.identifier = identifier


__all__ = [
    'CategoryNameBlankError',
    'CategoryNameTooShortError',
    'CategoryNotFoundError',
]
