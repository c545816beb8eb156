"""
Commands for Report business operations.

Form numbers are unique across reports and a report may only reference an
existing lubricant. Both rules are checked here so that the caller gets a
readable error in the mutation envelope instead of a constraint violation.
"""

from pydantic import BaseModel, Field

from oillab.commands.base import BaseCommand
from oillab.exceptions import ConflictError, NotFoundError
from oillab.models.report import Report
from oillab.repositories.lubricant_repository import LubricantRepository
from oillab.repositories.report_repository import ReportRepository
from oillab.schemas.report import (
    ReportCreateInput,
    ReportPaginateArgs,
    ReportRead,
    ReportUpdateInput,
)
from oillab.schemas.response import MutationResponse, PaginatedResponse


class UpdateReportInput(BaseModel):  # type: ignore[misc]
    """Input model for updating a report."""

    id: int = Field(..., description="Report ID to update")
    data: ReportUpdateInput


class ListReportsCommand(
    BaseCommand[ReportPaginateArgs, PaginatedResponse[ReportRead]]
):
    """Command to list one page of reports."""

    def __init__(self, repository: ReportRepository):
        self.repository = repository

    async def execute(
        self, input_data: ReportPaginateArgs
    ) -> PaginatedResponse[ReportRead]:
        page = await self.repository.paginate(input_data)
        return page.map_items(ReportRead.model_validate)


class _ReportMutation:
    def __init__(
        self,
        repository: ReportRepository,
        lubricant_repository: LubricantRepository,
    ):
        self.repository = repository
        self.lubricant_repository = lubricant_repository

    async def _check_form_number(
        self, form_number: str | None, report_id: int | None = None
    ) -> None:
        if form_number is None:
            return
        existing = await self.repository.get_by_form_number(form_number)
        if existing and existing.id != report_id:
            raise ConflictError(
                f"Report with form number '{form_number}' already exists"
            )

    async def _check_lubricant(self, lubricant_id: int | None) -> None:
        if lubricant_id is None:
            return
        if not await self.lubricant_repository.get_by_id(lubricant_id):
            raise NotFoundError(f"Lubricant with ID {lubricant_id} not found")

    async def _collect_errors(
        self,
        form_number: str | None,
        lubricant_id: int | None,
        report_id: int | None = None,
    ) -> list[str]:
        errors: list[str] = []
        try:
            await self._check_form_number(form_number, report_id)
        except ConflictError as ex:
            errors.append(ex.message)
        try:
            await self._check_lubricant(lubricant_id)
        except NotFoundError as ex:
            errors.append(ex.message)
        return errors


class CreateReportCommand(
    _ReportMutation,
    BaseCommand[ReportCreateInput, MutationResponse[ReportRead]],
):
    """Command to register a new report."""

    async def execute(
        self, input_data: ReportCreateInput
    ) -> MutationResponse[ReportRead]:
        errors = await self._collect_errors(
            input_data.form_number, input_data.lubricant_id
        )
        if errors:
            return MutationResponse.fail(*errors)

        report = Report(**input_data.model_dump())
        created = await self.repository.create(report)
        return MutationResponse.ok(ReportRead.model_validate(created))


class UpdateReportCommand(
    _ReportMutation,
    BaseCommand[UpdateReportInput, MutationResponse[ReportRead]],
):
    """
    Command to update an existing report.

    Only fields present in the update payload are changed; nullable fields
    can be cleared by sending ``null``.
    """

    async def execute(
        self, input_data: UpdateReportInput
    ) -> MutationResponse[ReportRead]:
        report = await self.repository.get_by_id(input_data.id)
        if not report:
            return MutationResponse.fail(
                f"Report with ID {input_data.id} not found"
            )

        changes = input_data.data.model_dump(exclude_unset=True)
        errors = await self._collect_errors(
            changes.get("form_number"),
            changes.get("lubricant_id"),
            report_id=report.id,
        )
        if errors:
            return MutationResponse.fail(*errors)

        for key, value in changes.items():
            setattr(report, key, value)

        updated = await self.repository.update(report)
        return MutationResponse.ok(ReportRead.model_validate(updated))
