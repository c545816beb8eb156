"""
Lubricant endpoints using Repository + Command + Dependency Injection.

Listing takes its arguments in the request body because filters and sort
directives are nested structures:

    POST /lubricants/list
    {
        "page": 1,
        "perPage": 12,
        "sort": ["brand_ASC", "model_DESC"],
        "filter": {"brand": {"equals": "Shell"}, "model": {"contains": "5W"}}
    }
"""

from fastapi import APIRouter, status

from oillab.commands.lubricant_commands import (
    CreateLubricantCommand,
    ListLubricantsCommand,
    UpdateLubricantCommand,
    UpdateLubricantInput,
)
from oillab.dependencies import LubricantRepoDep
from oillab.schemas.lubricant import (
    LubricantCreateInput,
    LubricantPaginateArgs,
    LubricantRead,
    LubricantUpdateInput,
)
from oillab.schemas.response import MutationResponse, PaginatedResponse
from oillab.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/lubricants", tags=["lubricants"])


@router.post(
    "/list",
    response_model=PaginatedResponse[LubricantRead],
    summary="Get paginated list of lubricants",
)
@handle_http_errors
async def list_lubricants(
    args: LubricantPaginateArgs,
    repo: LubricantRepoDep,
) -> PaginatedResponse[LubricantRead]:
    """
    Get one page of lubricants.

    Args:
        args: Page, page size, sort directives and filter.
        repo: Lubricant repository (injected via dependency).

    Returns:
        Paginated response with items and metadata, or a 400 response
        naming the offending field for invalid page bounds or filters.
    """
    return await ListLubricantsCommand(repo).execute(args)


@router.post(
    "",
    response_model=MutationResponse[LubricantRead],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new lubricant",
)
@handle_http_errors
async def create_lubricant(
    data: LubricantCreateInput,
    repo: LubricantRepoDep,
) -> MutationResponse[LubricantRead]:
    return await CreateLubricantCommand(repo).execute(data)


@router.patch(
    "/{lubricant_id}",
    response_model=MutationResponse[LubricantRead],
    summary="Update a lubricant",
)
@handle_http_errors
async def update_lubricant(
    lubricant_id: int,
    data: LubricantUpdateInput,
    repo: LubricantRepoDep,
) -> MutationResponse[LubricantRead]:
    """
    Update an existing lubricant.

    Only fields present in the body are changed. An unknown ID yields
    ``{"success": false, "errors": [...]}``.
    """
    command = UpdateLubricantCommand(repo)
    return await command.execute(
        UpdateLubricantInput(id=lubricant_id, data=data)
    )
