"""
Paginated, filtered, sorted list queries.

Every listing operation goes through the same pipeline:

    PaginateArgs -> QueryTranslator.translate -> QuerySpec
                 -> QueryExecutor.execute     -> (rows, total_count)
                 -> paginate                  -> PaginatedResponse

Example:
    ```python
    from oillab.query import QueryTranslator
    from oillab.storage.executor import SQLModelQueryExecutor

    translator = QueryTranslator(lubricant_sort, max_per_page=100)
    page = await translator.run(args, SQLModelQueryExecutor(session, Lubricant))
    ```
"""

from oillab.query.filters import EntityFilter, IdFilter, StringFilter
from oillab.query.pagination import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    PaginateArgs,
    page_window,
)
from oillab.query.paginator import paginate
from oillab.query.protocol import QueryExecutor
from oillab.query.sorting import SortDirectiveSet
from oillab.query.spec import (
    Condition,
    FilterOp,
    OrderTerm,
    QuerySpec,
    SortDirection,
)
from oillab.query.translator import QueryTranslator

__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",
    "Condition",
    "EntityFilter",
    "FilterOp",
    "IdFilter",
    "OrderTerm",
    "PaginateArgs",
    "QueryExecutor",
    "QuerySpec",
    "QueryTranslator",
    "SortDirection",
    "SortDirectiveSet",
    "StringFilter",
    "page_window",
    "paginate",
]
