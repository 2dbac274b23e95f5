"""
Category DTOs.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...domain.entities.category import Category


@dataclass
class CategoryCreateDTO:
    """DTO for creating a category."""
    name: str
    description: str = ""
    is_active: bool = False


@dataclass
class CategoryUpdateDTO:
    """DTO for updating a category."""
    id: str
    name: str
    description: str = ""
    is_active: bool = False


@dataclass
class CategoryLookupDTO:
    """DTO carrying the raw identifier of a single category."""
    id: str


@dataclass
class CategoryListDTO:
    """DTO for listing categories."""
    page: int = 1
    per_page: int = 10
    terms: str = ""
    sort: str = ""
    direction: str = ""


@dataclass
class CategoryIdDTO:
    """DTO returned by write operations."""
    id: str


@dataclass
class CategoryDTO:
    """DTO for category output."""
    id: str
    name: str
    description: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime]

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryDTO':
        """Create DTO from entity."""
        return cls(
            id=str(category.id),
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
            updated_at=category.updated_at,
            deleted_at=category.deleted_at,
        )
