"""
Protocol definition for the storage collaborator driven by the translator.

Uses structural subtyping (Protocol) so that the SQLModel executor, test
doubles and any future backend only need a matching ``execute`` method.
"""

from typing import Protocol, Sequence, TypeVar

from oillab.query.spec import Condition, OrderTerm

T = TypeVar("T", covariant=True)


class QueryExecutor(Protocol[T]):
    """
    Executes one translated list query.

    Implementations MUST:
    - apply ``predicate`` identically to the row fetch and to the count
    - apply ``ordering`` to the rows only
    - return at most ``limit`` rows

    Implementations raise ``StorageError`` on connectivity or constraint
    failures and let cancellation propagate.
    """

    async def execute(
        self,
        predicate: Sequence[Condition],
        ordering: Sequence[OrderTerm],
        offset: int,
        limit: int,
    ) -> tuple[Sequence[T], int]:
        """
        Run the query.

        Args:
            predicate: Conditions combined with logical AND.
            ordering: Sort keys in priority order.
            offset: Number of matching rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            ``(rows, total_count)`` where ``total_count`` counts every row
            matching ``predicate``, ignoring offset and limit.
        """
        ...
