"""
Get category by ID use case.
"""
from dataclasses import dataclass

from shared.application import UseCase
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID
from ..dtos.category_dto import CategoryDTO, CategoryLookupDTO


@dataclass
class GetCategoryUseCase(UseCase[CategoryLookupDTO, CategoryDTO]):
    """Use case for loading a single category."""

    category_gateway: CategoryGateway

    def execute(self, input_dto: CategoryLookupDTO) -> CategoryDTO:
        category_id = CategoryID.parse(input_dto.id)
        category = self.category_gateway.get_category_by_id(category_id)
        return CategoryDTO.from_entity(category)
