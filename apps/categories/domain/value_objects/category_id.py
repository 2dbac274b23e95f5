"""
CategoryID value object.
"""
from dataclasses import dataclass
from uuid import UUID

from uuid6 import uuid7

from shared.domain import InvalidIdentifierError, ValueObject


@dataclass(frozen=True)
class CategoryID(ValueObject):
    """Time-orderable (UUIDv7) category identifier."""
    value: UUID

    @classmethod
    def generate(cls) -> 'CategoryID':
        """Create a fresh identifier with the current time as prefix."""
        return cls(value=UUID(int=uuid7().int))

    @classmethod
    def parse(cls, value: str) -> 'CategoryID':
        """Parse the canonical textual form."""
        try:
            return cls(value=UUID(str(value)))
        except (TypeError, ValueError) as e:
            raise InvalidIdentifierError(value, str(e)) from e

    def __str__(self) -> str:
        return str(self.value)
