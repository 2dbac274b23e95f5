"""
Delete category use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase
from ...domain.repositories.category_gateway import CategoryGateway
from ...domain.value_objects.category_id import CategoryID
from ..dtos.category_dto import CategoryLookupDTO

logger = logging.getLogger(__name__)


@dataclass
class DeleteCategoryUseCase(UseCase[CategoryLookupDTO, None]):
    """
    Use case for hard-deleting a category.

    There is no existence check: removing an unknown identifier is left to
    the gateway, which treats zero affected rows as success.
    """

    category_gateway: CategoryGateway

    def execute(self, input_dto: CategoryLookupDTO) -> None:
        category_id = CategoryID.parse(input_dto.id)
        self.category_gateway.delete_category(category_id)
        logger.info(f"Deleted category: {category_id}")
