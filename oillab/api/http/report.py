from fastapi import APIRouter, status

from oillab.commands.report_commands import (
    CreateReportCommand,
    ListReportsCommand,
    UpdateReportCommand,
    UpdateReportInput,
)
from oillab.dependencies import LubricantRepoDep, ReportRepoDep
from oillab.schemas.report import (
    ReportCreateInput,
    ReportPaginateArgs,
    ReportRead,
    ReportUpdateInput,
)
from oillab.schemas.response import MutationResponse, PaginatedResponse
from oillab.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post(
    "/list",
    response_model=PaginatedResponse[ReportRead],
    summary="Get paginated list of reports",
)
@handle_http_errors
async def list_reports(
    args: ReportPaginateArgs,
    repo: ReportRepoDep,
) -> PaginatedResponse[ReportRead]:
    return await ListReportsCommand(repo).execute(args)


@router.post(
    "",
    response_model=MutationResponse[ReportRead],
    status_code=status.HTTP_201_CREATED,
    summary="Register a new report",
)
@handle_http_errors
async def create_report(
    data: ReportCreateInput,
    repo: ReportRepoDep,
    lubricant_repo: LubricantRepoDep,
) -> MutationResponse[ReportRead]:
    """
    Register a new report.

    Duplicate form numbers and unknown lubricant IDs yield
    ``{"success": false, "errors": [...]}``.
    """
    return await CreateReportCommand(repo, lubricant_repo).execute(data)


@router.patch(
    "/{report_id}",
    response_model=MutationResponse[ReportRead],
    summary="Update a report",
)
@handle_http_errors
async def update_report(
    report_id: int,
    data: ReportUpdateInput,
    repo: ReportRepoDep,
    lubricant_repo: LubricantRepoDep,
) -> MutationResponse[ReportRead]:
    command = UpdateReportCommand(repo, lubricant_repo)
    return await command.execute(UpdateReportInput(id=report_id, data=data))
