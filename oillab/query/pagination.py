"""
Pagination parameters for list queries.

Bounds are checked here, not by pydantic, so that every caller (HTTP or
programmatic) gets the same ``ValidationError`` with the offending field.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from oillab.exceptions import ValidationError
from oillab.query.filters import EntityFilter

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 12


class PaginateArgs(BaseModel):  # type: ignore[misc]
    """
    Arguments of a list call.

    Entity-specific subclasses narrow ``sort`` to their sort enum and
    ``filter`` to their filter schema.

    Attributes:
        page: 1-based page number.
        per_page: Page size (``perPage`` on the wire); ``None`` means the
            configured default.
        sort: Sort directives in priority order.
        filter: Per-field constraints, AND-ed together.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    page: int = DEFAULT_PAGE
    per_page: int | None = Field(default=None, alias="perPage")
    sort: list[Any] | None = None
    filter: EntityFilter | None = None


def page_window(page: int, per_page: int, max_per_page: int) -> tuple[int, int]:
    """
    Validate page bounds and compute the row window.

    Args:
        page: Requested page (must be >= 1).
        per_page: Requested page size (must be in 1..max_per_page).
        max_per_page: Configured upper bound for ``per_page``.

    Returns:
        ``(offset, limit)`` for the storage collaborator.

    Raises:
        ValidationError: If any bound is violated. Oversized pages are
            rejected, never clamped.
    """
    if page < 1:
        raise ValidationError(
            f"page must be greater than or equal to 1, got {page}",
            field="page",
        )
    if per_page < 1:
        raise ValidationError(
            f"perPage must be greater than or equal to 1, got {per_page}",
            field="perPage",
        )
    if per_page > max_per_page:
        raise ValidationError(
            f"perPage must not exceed {max_per_page}, got {per_page}",
            field="perPage",
        )
    return (page - 1) * per_page, per_page
