"""
Dependency injection configuration for FastAPI.

Settings, database sessions and repositories are provided through
FastAPI's ``Depends()`` so tests can swap any of them with
``app.dependency_overrides``.

Example:
    ```python
    @router.post("/lubricants/list")
    async def list_lubricants(
        args: LubricantPaginateArgs, repo: LubricantRepoDep
    ) -> PaginatedResponse[LubricantRead]:
        return await ListLubricantsCommand(repo).execute(args)
    ```
"""

from typing import Annotated

from fastapi import Depends, Request
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.repositories.lubricant_repository import LubricantRepository
from oillab.repositories.report_repository import ReportRepository
from oillab.settings import Settings
from oillab.storage.db import get_session


def get_app_settings(request: Request) -> Settings:
    """
    Return the settings the application was built with.

    Returns:
        The ``Settings`` instance stored on ``app.state`` by the factory.
    """
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_lubricant_repository(
    session: SessionDep, settings: SettingsDep
) -> LubricantRepository:
    """
    Get lubricant repository with injected database session.

    Args:
        session: Database session injected by FastAPI.
        settings: Application settings (page size limit).

    Returns:
        LubricantRepository instance with session.
    """
    return LubricantRepository(
        session,
        max_per_page=settings.MAX_PAGE_SIZE,
        default_per_page=settings.DEFAULT_PAGE_SIZE,
    )


def get_report_repository(
    session: SessionDep, settings: SettingsDep
) -> ReportRepository:
    """
    Get report repository with injected database session.

    Args:
        session: Database session injected by FastAPI.
        settings: Application settings (page size limit).

    Returns:
        ReportRepository instance with session.
    """
    return ReportRepository(
        session,
        max_per_page=settings.MAX_PAGE_SIZE,
        default_per_page=settings.DEFAULT_PAGE_SIZE,
    )


LubricantRepoDep = Annotated[
    LubricantRepository, Depends(get_lubricant_repository)
]
ReportRepoDep = Annotated[ReportRepository, Depends(get_report_repository)]
