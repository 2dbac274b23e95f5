"""
Create category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase
from ...domain.entities.category import Category
from ...domain.repositories.category_gateway import CategoryGateway
from ..dtos.category_dto import CategoryCreateDTO, CategoryIdDTO

logger = logging.getLogger(__name__)


@dataclass
class CreateCategoryUseCase(UseCase[CategoryCreateDTO, CategoryIdDTO]):
    """Use case for creating a new category."""

    category_gateway: CategoryGateway

    def execute(self, input_dto: CategoryCreateDTO) -> CategoryIdDTO:
        category = Category.create(
            name=input_dto.name,
            description=input_dto.description,
            is_active=input_dto.is_active,
        )

        # Nothing reaches the store unless every rule passes
        category.validate()

        saved = self.category_gateway.create_category(category)

        logger.info(f"Created category: {saved.name} ({saved.id})")
        return CategoryIdDTO(id=str(saved.id))
