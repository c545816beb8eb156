"""
Commands for Lubricant business operations.

Example:
    ```python
    repo = LubricantRepository(session, max_per_page=settings.MAX_PAGE_SIZE)
    page = await ListLubricantsCommand(repo).execute(
        LubricantPaginateArgs(sort=[LubricantSort.BRAND_ASC])
    )
    ```
"""

from pydantic import BaseModel, Field

from oillab.commands.base import BaseCommand
from oillab.exceptions import NotFoundError
from oillab.models.lubricant import Lubricant
from oillab.repositories.lubricant_repository import LubricantRepository
from oillab.schemas.lubricant import (
    LubricantCreateInput,
    LubricantPaginateArgs,
    LubricantRead,
    LubricantUpdateInput,
)
from oillab.schemas.response import MutationResponse, PaginatedResponse


class UpdateLubricantInput(BaseModel):  # type: ignore[misc]
    """Input model for updating a lubricant."""

    id: int = Field(..., description="Lubricant ID to update")
    data: LubricantUpdateInput


class ListLubricantsCommand(
    BaseCommand[LubricantPaginateArgs, PaginatedResponse[LubricantRead]]
):
    """Command to list one page of lubricants."""

    def __init__(self, repository: LubricantRepository):
        self.repository = repository

    async def execute(
        self, input_data: LubricantPaginateArgs
    ) -> PaginatedResponse[LubricantRead]:
        page = await self.repository.paginate(input_data)
        return page.map_items(LubricantRead.model_validate)


class CreateLubricantCommand(
    BaseCommand[LubricantCreateInput, MutationResponse[LubricantRead]]
):
    """Command to create a new lubricant."""

    def __init__(self, repository: LubricantRepository):
        self.repository = repository

    async def execute(
        self, input_data: LubricantCreateInput
    ) -> MutationResponse[LubricantRead]:
        lubricant = Lubricant(**input_data.model_dump())
        created = await self.repository.create(lubricant)
        return MutationResponse.ok(LubricantRead.model_validate(created))


class UpdateLubricantCommand(
    BaseCommand[UpdateLubricantInput, MutationResponse[LubricantRead]]
):
    """
    Command to update an existing lubricant.

    Only fields present in the update payload are changed. A missing
    lubricant yields ``success=False`` rather than an exception.
    """

    def __init__(self, repository: LubricantRepository):
        self.repository = repository

    async def execute(
        self, input_data: UpdateLubricantInput
    ) -> MutationResponse[LubricantRead]:
        try:
            lubricant = await self._apply(input_data)
        except NotFoundError as ex:
            return MutationResponse.fail(ex.message)
        return MutationResponse.ok(LubricantRead.model_validate(lubricant))

    async def _apply(self, input_data: UpdateLubricantInput) -> Lubricant:
        lubricant = await self.repository.get_by_id(input_data.id)
        if not lubricant:
            raise NotFoundError(f"Lubricant with ID {input_data.id} not found")

        for key, value in input_data.data.model_dump(exclude_unset=True).items():
            setattr(lubricant, key, value)

        return await self.repository.update(lubricant)
