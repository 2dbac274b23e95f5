# ORM models
from .category_model import CategoryModel

__all__ = ['CategoryModel']
