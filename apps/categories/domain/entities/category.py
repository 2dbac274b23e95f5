"""
Category entity.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from shared.domain import BaseEntity, ValidationError, ValidationErrors, utc_now
from ..exceptions import CategoryNameBlankError, CategoryNameTooShortError
from ..value_objects.category_id import CategoryID

NAME_MIN_LENGTH = 3


@dataclass(kw_only=True, eq=False)
class Category(BaseEntity[CategoryID]):
    """
    Category entity.

    ``deleted_at`` is the soft-delete marker and follows ``is_active``: it is
    set while the category is inactive and cleared while it is active. Only
    ``activate`` and ``deactivate`` change either field.
    """
    id: CategoryID = field(default_factory=CategoryID.generate)
    name: str
    description: str = ""
    is_active: bool = True
    deleted_at: Optional[datetime] = None

    @classmethod
    def create(cls, name: str, description: str = "", is_active: bool = True) -> 'Category':
        """Factory method to create a new category. Does not validate."""
        now = utc_now()
        category = cls(
            name=name,
            description=description,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
        if not is_active:
            category.deleted_at = now
        return category

    def validate(self) -> None:
        """Check every rule and raise them all together."""
        errors: List[ValidationError] = []
        trimmed = self.name.strip()

        if trimmed == "":
            errors.append(CategoryNameBlankError())

        # Blank names fail this rule too.
        if len(trimmed) < NAME_MIN_LENGTH:
            errors.append(CategoryNameTooShortError(NAME_MIN_LENGTH))

        if errors:
            raise ValidationErrors(errors)

    def update(self, name: str, description: str, is_active: bool) -> None:
        """Update category information."""
        if is_active:
            self.activate()
        else:
            self.deactivate()
        self.name = name
        self.description = description
        self.touch()

    def activate(self) -> None:
        """Activate the category."""
        self.deleted_at = None
        self.is_active = True
        self.touch()

    def deactivate(self) -> None:
        """Deactivate the category, keeping an earlier deletion time."""
        now = utc_now()
        if self.deleted_at is None:
            self.deleted_at = now
        self.is_active = False
        self.updated_at = now
