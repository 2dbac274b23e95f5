# Shared application module
from .base_use_case import UseCase

__all__ = ['UseCase']
