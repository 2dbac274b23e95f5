"""
Generic page-result container.
"""
from dataclasses import dataclass, field
from typing import Callable, Generic, List, TypeVar

T = TypeVar('T')
R = TypeVar('R')


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """One page of results plus the total count of matching rows."""
    current_page: int
    per_page: int
    total: int
    items: List[T] = field(default_factory=list)

    def map(self, func: Callable[[T], R]) -> 'Pagination[R]':
        """Convert every item, keeping the page counters."""
        return Pagination(
            current_page=self.current_page,
            per_page=self.per_page,
            total=self.total,
            items=[func(item) for item in self.items],
        )
