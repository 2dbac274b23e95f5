# DTOs
from .category_dto import (
    CategoryCreateDTO,
    CategoryDTO,
    CategoryIdDTO,
    CategoryListDTO,
    CategoryLookupDTO,
    CategoryUpdateDTO,
)

__all__ = [
    'CategoryCreateDTO',
    'CategoryDTO',
    'CategoryIdDTO',
    'CategoryListDTO',
    'CategoryLookupDTO',
    'CategoryUpdateDTO',
]
