"""
List categories use case.
"""
from dataclasses import dataclass

from shared.application import UseCase
from shared.domain import Pagination
from ...domain.repositories.category_gateway import CategoryGateway, SearchCategoryQuery
from ..dtos.category_dto import CategoryDTO, CategoryListDTO


@dataclass
class ListCategoriesUseCase(UseCase[CategoryListDTO, Pagination[CategoryDTO]]):
    """Use case for searching categories page by page."""

    category_gateway: CategoryGateway

    def execute(self, input_dto: CategoryListDTO) -> Pagination[CategoryDTO]:
        query = SearchCategoryQuery(
            page=input_dto.page,
            per_page=input_dto.per_page,
            terms=input_dto.terms,
            sort=input_dto.sort,
            direction=input_dto.direction,
        )
        result = self.category_gateway.find_all(query)
        return result.map(CategoryDTO.from_entity)
