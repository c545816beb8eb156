from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.models.lubricant import Lubricant
from oillab.query import DEFAULT_PER_PAGE, QueryTranslator
from oillab.repositories.base import BaseRepository
from oillab.schemas.lubricant import lubricant_sort


class LubricantRepository(BaseRepository[Lubricant]):
    """Repository for Lubricant entity operations."""

    def __init__(
        self,
        session: AsyncSession,
        max_per_page: int,
        default_per_page: int = DEFAULT_PER_PAGE,
    ):
        """
        Initialize Lubricant repository.

        Args:
            session: Database session for executing queries.
            max_per_page: Configured upper bound for list page size.
            default_per_page: Page size used when ``perPage`` is omitted.
        """
        super().__init__(
            session,
            Lubricant,
            QueryTranslator(lubricant_sort, max_per_page, default_per_page),
        )
