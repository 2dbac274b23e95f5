"""
Category gateway interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from shared.domain import Pagination
from ..entities.category import Category
from ..value_objects.category_id import CategoryID


@dataclass(frozen=True)
class SearchCategoryQuery:
    """Paging, free-text and ordering options for a category search."""
    page: int = 1
    per_page: int = 10
    terms: str = ""
    sort: str = ""
    direction: str = ""


class CategoryGateway(ABC):
    """
    Abstract gateway for Category persistence.

    Implementations raise ``StorageError`` (or a subclass) when the backing
    store fails or a lookup finds nothing.
    """

    @abstractmethod
    def create_category(self, category: Category) -> Category:
        """Persist a new category."""
        pass

    @abstractmethod
    def get_category_by_id(self, category_id: CategoryID) -> Category:
        """Load a category by ID."""
        pass

    @abstractmethod
    def update_category(self, category: Category) -> Category:
        """Persist changes to an existing category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: CategoryID) -> None:
        """Physically remove a category."""
        pass

    @abstractmethod
    def find_all(self, query: SearchCategoryQuery) -> Pagination[Category]:
        """Search, sort and paginate categories."""
        pass
