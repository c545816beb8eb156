"""
Translation of list arguments into a query and a page envelope.

The translator is stateless: it validates ``PaginateArgs``, builds a
``QuerySpec``, hands it to a ``QueryExecutor`` once and passes the result
to the paginator. It performs no caching and no retries.
"""

from typing import Sequence, TypeVar

from oillab.exceptions import StorageError
from oillab.logging import logger
from oillab.query.pagination import (
    DEFAULT_PER_PAGE,
    PaginateArgs,
    page_window,
)
from oillab.query.paginator import paginate
from oillab.query.protocol import QueryExecutor
from oillab.query.sorting import SortDirectiveSet
from oillab.query.spec import OrderTerm, QuerySpec, SortDirection
from oillab.schemas.response import PaginatedResponse

T = TypeVar("T")


class QueryTranslator:
    """
    Turns ``PaginateArgs`` into a ``QuerySpec`` and runs it.

    Ordering always ends with the primary key ascending, unless the caller
    already sorts on it. An empty sort sequence therefore means "primary key
    ascending", and ties left by the caller's directives are broken the
    same way on every call.

    Args:
        sort_set: Sort directives accepted for the entity.
        max_per_page: Configured upper bound for ``perPage``.
        default_per_page: Page size used when the caller omits ``perPage``.
        primary_key: Model attribute used as the final tie-breaker.

    Example:
        ```python
        translator = QueryTranslator(lubricant_sort, max_per_page=100)
        executor = SQLModelQueryExecutor(session, Lubricant)
        page = await translator.run(
            LubricantPaginateArgs(page=2, per_page=12), executor
        )
        ```
    """

    def __init__(
        self,
        sort_set: SortDirectiveSet,
        max_per_page: int,
        default_per_page: int = DEFAULT_PER_PAGE,
        primary_key: str = "id",
    ):
        self.sort_set = sort_set
        self.max_per_page = max_per_page
        self.default_per_page = default_per_page
        self.primary_key = primary_key

    def per_page(self, args: PaginateArgs) -> int:
        if args.per_page is None:
            return self.default_per_page
        return args.per_page

    def translate(self, args: PaginateArgs) -> QuerySpec:
        """
        Validate ``args`` and build the query description.

        Raises:
            ValidationError: For out-of-range pages, unknown sort directives
                or invalid filter operators.
        """
        offset, limit = page_window(
            args.page, self.per_page(args), self.max_per_page
        )

        predicate = tuple(args.filter.conditions()) if args.filter else ()

        ordering = self.sort_set.resolve(args.sort or ())
        if all(term.field != self.primary_key for term in ordering):
            ordering += (
                OrderTerm(field=self.primary_key, direction=SortDirection.ASC),
            )

        return QuerySpec(
            predicate=predicate, ordering=ordering, offset=offset, limit=limit
        )

    async def run(
        self, args: PaginateArgs, executor: QueryExecutor[T]
    ) -> PaginatedResponse[T]:
        """
        Validate, execute and assemble one page.

        Args:
            args: List arguments from the caller.
            executor: Storage collaborator for the entity.

        Returns:
            A complete, internally consistent page envelope.

        Raises:
            ValidationError: If ``args`` are invalid; the executor is not
                called in that case.
            StorageError: If execution fails or the executor breaks its
                contract.
        """
        spec = self.translate(args)

        logger.debug(
            f"List query {self.sort_set.name}: offset={spec.offset} "
            f"limit={spec.limit} conditions={len(spec.predicate)}"
        )

        rows: Sequence[T]
        rows, total_count = await executor.execute(
            spec.predicate, spec.ordering, spec.offset, spec.limit
        )

        if len(rows) > spec.limit:
            raise StorageError(
                f"Executor returned {len(rows)} rows for limit {spec.limit}"
            )

        return paginate(rows, total_count, args.page, spec.limit)
