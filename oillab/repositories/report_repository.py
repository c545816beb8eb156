"""
Repository for Report entity with specialized query methods.

Example:
    ```python
    async with session_factory() as session:
        repo = ReportRepository(session, max_per_page=100)
        report = await repo.get_by_form_number("A-0042")
    ```
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.exceptions import StorageError
from oillab.logging import logger
from oillab.models.report import Report
from oillab.query import DEFAULT_PER_PAGE, QueryTranslator
from oillab.repositories.base import BaseRepository
from oillab.schemas.report import report_sort


class ReportRepository(BaseRepository[Report]):
    """
    Repository for Report entity operations.

    Provides CRUD operations inherited from BaseRepository plus the form
    number lookup used to keep form numbers unique.
    """

    def __init__(
        self,
        session: AsyncSession,
        max_per_page: int,
        default_per_page: int = DEFAULT_PER_PAGE,
    ):
        """
        Initialize Report repository.

        Args:
            session: Database session for executing queries.
            max_per_page: Configured upper bound for list page size.
            default_per_page: Page size used when ``perPage`` is omitted.
        """
        super().__init__(
            session,
            Report,
            QueryTranslator(report_sort, max_per_page, default_per_page),
        )

    async def get_by_form_number(self, form_number: str) -> Report | None:
        """
        Get report by exact form number.

        Args:
            form_number: Form number to look up.

        Returns:
            Report if found, None otherwise.
        """
        stmt = select(Report).where(Report.form_number == form_number)
        try:
            result = await self.session.exec(stmt)
            return result.first()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving Report by form number: {e}")
            raise StorageError("Database error occurred") from e
