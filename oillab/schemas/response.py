from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated

T = TypeVar("T")
U = TypeVar("U")


class CamelModel(BaseModel):  # type: ignore[misc]
    """Wire models: camelCase on the outside, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PaginatedResponse(CamelModel, Generic[T]):
    items: list[T]
    total_count: Annotated[int, Field(ge=0)]
    total_pages: Annotated[int, Field(ge=0)]
    current_page: int
    per_page: int

    def map_items(
        self, func: Callable[[T], U]
    ) -> "PaginatedResponse[U]":
        """Return the same page with every item converted, order kept."""
        return PaginatedResponse(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            total_pages=self.total_pages,
            current_page=self.current_page,
            per_page=self.per_page,
        )


class MutationResponse(CamelModel, Generic[T]):
    success: bool
    record: T | None = None
    errors: list[str] | None = None

    @classmethod
    def ok(cls, record: T) -> "MutationResponse[T]":
        return cls(success=True, record=record)

    @classmethod
    def fail(cls, *errors: str) -> "MutationResponse[T]":
        return cls(success=False, errors=list(errors))
