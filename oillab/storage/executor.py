"""
SQLModel implementation of the list-query storage collaborator.

Compiles the backend-agnostic ``Condition``/``OrderTerm`` values into
SQLAlchemy clauses and runs the count and the row fetch in one session,
under one ``WHERE`` clause.

String matching:
- ``equals`` compares with ``=`` (exact on PostgreSQL and SQLite).
- ``contains``/``startsWith``/``endsWith`` use ``ILIKE``-style matching
  (``lower(col) LIKE lower(value)`` on backends without ``ILIKE``) with
  ``%`` and ``_`` escaped, so they are case-insensitive and literal.
  Case folding is the database's ``lower()``: ASCII-only on SQLite.
"""

from typing import Any, Generic, Sequence, Type, TypeVar

from sqlalchemy import ColumnElement
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from oillab.exceptions import StorageError, ValidationError
from oillab.logging import logger
from oillab.query.spec import Condition, FilterOp, OrderTerm, SortDirection

T = TypeVar("T", bound=SQLModel)


class SQLModelQueryExecutor(Generic[T]):
    """
    Executes translated list queries against one SQLModel table.

    Args:
        session: Session used for both statements.
        model: Table model being listed.

    Example:
        ```python
        executor = SQLModelQueryExecutor(session, Lubricant)
        rows, total = await executor.execute(
            [Condition(field="brand", op=FilterOp.EQUALS, value="Shell")],
            [OrderTerm(field="id")],
            offset=0,
            limit=12,
        )
        ```
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    def _column(self, field: str) -> Any:
        column = self.model.__table__.columns.get(field)  # type: ignore[attr-defined]
        if column is None:
            raise ValidationError(
                f"Unknown field '{field}' for {self.model.__name__}",
                field=field,
            )
        return column

    def _compile_condition(self, condition: Condition) -> ColumnElement[bool]:
        column = self._column(condition.field)
        value = condition.value

        if condition.op is FilterOp.EQUALS:
            return column == value
        if condition.op is FilterOp.CONTAINS:
            return column.icontains(value, autoescape=True)
        if condition.op is FilterOp.STARTS_WITH:
            return column.istartswith(value, autoescape=True)
        if condition.op is FilterOp.ENDS_WITH:
            return column.iendswith(value, autoescape=True)
        if condition.op is FilterOp.IN:
            return column.in_(list(value))

        raise ValidationError(
            f"Unsupported filter operator '{condition.op}'",
            field=condition.field,
        )

    def _compile_order(self, term: OrderTerm) -> Any:
        column = self._column(term.field)
        return column.desc() if term.direction is SortDirection.DESC else column.asc()

    async def execute(
        self,
        predicate: Sequence[Condition],
        ordering: Sequence[OrderTerm],
        offset: int,
        limit: int,
    ) -> tuple[list[T], int]:
        """
        Count matching rows and fetch one window of them.

        The row fetch is skipped when ``offset`` is at or past the count.

        Raises:
            ValidationError: If a condition or ordering names an unknown
                column.
            StorageError: If the database rejects either statement.
        """
        where = [self._compile_condition(c) for c in predicate]
        order_by = [self._compile_order(t) for t in ordering]

        count_query = select(func.count()).select_from(self.model).where(*where)
        data_query = (
            select(self.model)
            .where(*where)
            .order_by(*order_by)
            .offset(offset)
            .limit(limit)
        )

        try:
            total_result = await self.session.exec(count_query)
            total = total_result.one()
            if offset >= total:
                return [], total

            results = await self.session.exec(data_query)
            rows = list(results.all())
        except SQLAlchemyError as ex:
            logger.error(
                f"List query on {self.model.__name__} failed: {ex}",
                exc_info=True,
            )
            raise StorageError("Database error occurred") from ex

        return rows, total
