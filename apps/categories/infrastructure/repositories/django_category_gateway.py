"""
Django ORM implementation of CategoryGateway.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

from django.db import DatabaseError
from django.db.models import Q

from shared.domain import Pagination, StorageError
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_gateway import CategoryGateway, SearchCategoryQuery
from ...domain.value_objects.category_id import CategoryID
from ..models.category_model import CategoryModel

logger = logging.getLogger(__name__)

# Largest OFFSET a signed 64-bit SQL integer can carry
MAX_OFFSET = 2 ** 63 - 1

SORTABLE_FIELDS = ('name', 'created_at', 'updated_at')
DEFAULT_SORT = 'created_at'


def resolve_sort(sort: str) -> str:
    """Map a caller-supplied sort field onto the allow-list."""
    if sort in SORTABLE_FIELDS:
        return sort
    return DEFAULT_SORT


def resolve_direction(direction: str) -> str:
    """Return ``DESC`` for "desc" in any case, ``ASC`` for everything else."""
    if (direction or '').lower() == 'desc':
        return 'DESC'
    return 'ASC'


def resolve_ordering(sort: str, direction: str) -> Tuple[str, ...]:
    """ORM ordering for a search; ``id`` breaks ties between equal keys."""
    prefix = '-' if resolve_direction(direction) == 'DESC' else ''
    return (f"{prefix}{resolve_sort(sort)}", f"{prefix}id")


class DjangoCategoryGateway(CategoryGateway):
    """Django ORM based category gateway implementation."""

    def create_category(self, category: Category) -> Category:
        """Insert a new category row."""
        with self._storage_errors('create'):
            CategoryModel.objects.create(
                id=str(category.id),
                created_at=category.created_at,
                **self._to_row(category),
            )
        return category

    def get_category_by_id(self, category_id: CategoryID) -> Category:
        """Find a category by ID."""
        with self._storage_errors('get'):
            try:
                model = CategoryModel.objects.get(id=str(category_id))
            except CategoryModel.DoesNotExist:
                raise CategoryNotFoundError(str(category_id))
        return self._to_entity(model)

    def update_category(self, category: Category) -> Category:
        """Overwrite the mutable columns of a category row."""
        with self._storage_errors('update'):
            CategoryModel.objects.filter(id=str(category.id)).update(**self._to_row(category))
        return category

    def delete_category(self, category_id: CategoryID) -> None:
        """Delete a category row; an unknown ID affects nothing."""
        with self._storage_errors('delete'):
            CategoryModel.objects.filter(id=str(category_id)).delete()

    def find_all(self, query: SearchCategoryQuery) -> Pagination[Category]:
        """Filter, order and slice categories, counting matches first."""
        # Non-positive pages read as the first page
        page = max(query.page, 1)
        per_page = max(query.per_page, 0)
        offset = (page - 1) * per_page

        queryset = CategoryModel.objects.all()
        if query.terms:
            queryset = queryset.filter(
                Q(name__icontains=query.terms) | Q(description__icontains=query.terms)
            )

        with self._storage_errors('find_all'):
            total = queryset.count()
            ordered = queryset.order_by(*resolve_ordering(query.sort, query.direction))
            models = list(ordered[offset:offset + per_page]) if offset <= MAX_OFFSET else []

        return Pagination(
            current_page=page,
            per_page=per_page,
            total=total,
            items=[self._to_entity(model) for model in models],
        )

    @contextmanager
    def _storage_errors(self, operation: str) -> Iterator[None]:
        """Re-raise driver failures as StorageError with the driver message."""
        try:
            yield
        except DatabaseError as e:
            logger.error(f"Category {operation} failed: {e}", exc_info=True)
            raise StorageError(str(e)) from e

    def _to_row(self, category: Category) -> dict:
        """Mutable column values shared by INSERT and UPDATE."""
        return {
            'name': category.name,
            'description': category.description,
            'is_active': category.is_active,
            'updated_at': category.updated_at,
            'deleted_at': category.deleted_at,
        }

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=CategoryID.parse(model.id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
