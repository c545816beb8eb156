"""
Backend-agnostic query description.

A list call is reduced to a ``QuerySpec``: a conjunction of atomic
``Condition`` values, an ordered tuple of ``OrderTerm`` values, and an
offset/limit pair. Storage collaborators compile it into their own query
language; nothing in here knows about SQL.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class FilterOp(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    IN = "in"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Condition(BaseModel):  # type: ignore[misc]
    """
    One atomic constraint on one field.

    ``CONTAINS``, ``STARTS_WITH`` and ``ENDS_WITH`` are case-insensitive and
    match ``%``/``_`` literally. ``EQUALS`` is an exact comparison.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    op: FilterOp
    value: Any


class OrderTerm(BaseModel):  # type: ignore[misc]
    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection = SortDirection.ASC


class QuerySpec(BaseModel):  # type: ignore[misc]
    """
    Predicate, ordering and window of a single list call.

    Attributes:
        predicate: Conditions combined with logical AND. Empty means
            "every row".
        ordering: Sort keys in priority order, primary key last.
        offset: Number of rows to skip.
        limit: Maximum number of rows to return.
    """

    model_config = ConfigDict(frozen=True)

    predicate: tuple[Condition, ...] = ()
    ordering: tuple[OrderTerm, ...] = ()
    offset: int = 0
    limit: int
