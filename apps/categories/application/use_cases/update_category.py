"""
Update category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID
from ..dtos.category_dto import CategoryIdDTO, CategoryUpdateDTO

logger = logging.getLogger(__name__)


@dataclass
class UpdateCategoryUseCase(UseCase[CategoryUpdateDTO, CategoryIdDTO]):
    """Use case for replacing a category's fields and activation state."""

    category_gateway: CategoryGateway

    def execute(self, input_dto: CategoryUpdateDTO) -> CategoryIdDTO:
        category_id = CategoryID.parse(input_dto.id)
        category = self.category_gateway.get_category_by_id(category_id)

        category.update(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )
        category.validate()

        saved = self.category_gateway.update_category(category)

        logger.info(f"Updated category: {saved.name} ({saved.id})")
        return CategoryIdDTO(id=str(saved.id))
