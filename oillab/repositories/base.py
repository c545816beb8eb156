"""
Base repository with common CRUD operations and paginated listing.

Repositories encapsulate all database operations for one entity. Listing
goes through the shared ``QueryTranslator`` so every entity gets the same
filter, sort and pagination semantics.

Example:
    ```python
    class LubricantRepository(BaseRepository[Lubricant]):
        def __init__(self, session: AsyncSession, max_per_page: int):
            super().__init__(
                session,
                Lubricant,
                QueryTranslator(lubricant_sort, max_per_page),
            )
    ```
"""

from typing import Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.exceptions import StorageError
from oillab.logging import logger
from oillab.query import PaginateArgs, QueryTranslator
from oillab.schemas.response import PaginatedResponse
from oillab.storage.executor import SQLModelQueryExecutor

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
        translator: List-query translator for ``model``.
    """

    def __init__(
        self,
        session: AsyncSession,
        model: Type[T],
        translator: QueryTranslator,
    ):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
            translator: Translator configured with the model's sort set.
        """
        self.session = session
        self.model = model
        self.translator = translator

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.

        Raises:
            StorageError: If database query fails.
        """
        try:
            return await self.session.get(self.model, id)
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise StorageError("Database error occurred") from e

    async def paginate(self, args: PaginateArgs) -> PaginatedResponse[T]:
        """
        List one page of entities.

        Args:
            args: Page, page size, sort directives and filter.

        Returns:
            Page envelope with rows and pagination metadata.

        Raises:
            ValidationError: If ``args`` are invalid.
            StorageError: If database query fails.
        """
        executor = SQLModelQueryExecutor(self.session, self.model)
        return await self.translator.run(args, executor)

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.

        Raises:
            StorageError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise StorageError("Database error occurred") from e

    async def update(self, entity: T) -> T:
        """
        Update existing entity in database.

        Args:
            entity: The entity instance with updated values.

        Returns:
            The updated entity.

        Raises:
            StorageError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise StorageError("Database error occurred") from e
