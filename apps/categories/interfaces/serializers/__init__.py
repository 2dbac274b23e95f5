# Serializers
from .category_serializer import (
    CategoryIdSerializer,
    CategoryPageSerializer,
    CategorySerializer,
    CategoryWriteSerializer,
)

__all__ = [
    'CategoryIdSerializer',
    'CategoryPageSerializer',
    'CategorySerializer',
    'CategoryWriteSerializer',
]
