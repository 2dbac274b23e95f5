"""
Domain exceptions.
"""
from typing import List, Optional


class DomainException(Exception):
    """Base exception for domain layer."""

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """A single violated validation rule."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message=message, code="VALIDATION_ERROR")
        self.field = field


class ValidationErrors(DomainException):
    """
    Composite validation failure.

    Carries every violated rule in the order it was detected; the message is
    the individual messages joined by newlines.
    """

    def __init__(self, errors: List[ValidationError]):
        super().__init__(
            message="\n".join(error.message for error in errors),
            code="VALIDATION_ERROR",
        )
        self.errors = list(errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)


class InvalidIdentifierError(DomainException):
    """Raised when an identifier string cannot be parsed."""

    def __init__(self, value: str, reason: Optional[str] = None):
        message = f"invalid identifier '{value}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, code="INVALID_IDENTIFIER")
        self.value = value


class StorageError(DomainException):
    """Raised when the backing store fails; the driver message is kept as-is."""

    def __init__(self, message: str, code: str = "STORAGE_ERROR"):
        super().__init__(message=message, code=code)
