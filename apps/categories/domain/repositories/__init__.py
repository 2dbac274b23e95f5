# Repository interfaces
from .category_gateway import CategoryGateway, SearchCategoryQuery

__all__ = ['CategoryGateway', 'SearchCategoryQuery']
