"""
Base command for encapsulating business operations.

The Command pattern encapsulates business logic as objects, making it
reusable across HTTP handlers, the CLI and tests.

Example:
    ```python
    class CreateLubricantCommand(
        BaseCommand[LubricantCreateInput, MutationResponse[LubricantRead]]
    ):
        def __init__(self, repository: LubricantRepository):
            self.repository = repository

        async def execute(self, input_data):
            lubricant = Lubricant(**input_data.model_dump())
            created = await self.repository.create(lubricant)
            return MutationResponse.ok(LubricantRead.model_validate(created))
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands depend on repositories for data access and never touch the
    session directly.

    Type Parameters:
        TInput: Input data type (usually a Pydantic model).
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.

        Raises:
            ValidationError: For malformed list arguments.
            StorageError: For database failures.
        """
        pass
