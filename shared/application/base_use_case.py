"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """
    Base use case class.

    Use cases return their output directly and let domain and storage
    exceptions propagate to the caller unchanged.
    """

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> OutputDTO:
        """Execute the use case."""
        pass
