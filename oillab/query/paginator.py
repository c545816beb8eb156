from typing import Sequence, TypeVar

from oillab.schemas.response import PaginatedResponse

T = TypeVar("T")


def paginate(
    rows: Sequence[T], total_count: int, page: int, per_page: int
) -> PaginatedResponse[T]:
    """
    Assemble the page envelope.

    Pure function: ``rows`` are kept as given and ``page``/``per_page`` are
    trusted (validated by the translator). A page past the end simply has
    no rows; it is not clamped.

    Args:
        rows: Rows of the requested page, already ordered.
        total_count: Number of rows matching the predicate.
        page: Requested page number.
        per_page: Requested page size.

    Returns:
        PaginatedResponse with ``total_pages = ceil(total_count / per_page)``.
    """
    total_pages = -(-total_count // per_page) if total_count > 0 else 0

    return PaginatedResponse(
        items=list(rows),
        total_count=total_count,
        total_pages=total_pages,
        current_page=page,
        per_page=per_page,
    )
