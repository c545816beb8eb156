from pydantic import ConfigDict, Field, field_validator

from oillab.models.lubricant import ProductType
from oillab.query import (
    EntityFilter,
    IdFilter,
    PaginateArgs,
    SortDirectiveSet,
    StringFilter,
)
from oillab.schemas.response import CamelModel

lubricant_sort = SortDirectiveSet(
    "LubricantSort",
    {"model": "model", "brand": "brand", "viscosity": "viscosity"},
)
LubricantSort = lubricant_sort.enum


class LubricantRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    product_type: ProductType | None = None
    model: str
    brand: str
    viscosity: str


class LubricantCreateInput(CamelModel):
    product_type: ProductType | None = None
    model: str = Field(min_length=1, max_length=255)
    brand: str = Field(min_length=1, max_length=255)
    viscosity: str = Field(min_length=1, max_length=255)


class LubricantUpdateInput(CamelModel):
    """Only the fields that are set are applied."""

    product_type: ProductType | None = None
    model: str | None = Field(default=None, min_length=1, max_length=255)
    brand: str | None = Field(default=None, min_length=1, max_length=255)
    viscosity: str | None = Field(default=None, min_length=1, max_length=255)

    @field_validator("model", "brand", "viscosity")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Required columns can be left out but not cleared."""
        if v is None:
            raise ValueError("must not be null")
        return v


class LubricantFilter(EntityFilter):
    id: IdFilter | None = None
    model: StringFilter | None = None
    brand: StringFilter | None = None
    viscosity: StringFilter | None = None


class LubricantPaginateArgs(PaginateArgs):
    sort: list[LubricantSort] | None = None  # type: ignore[valid-type]
    filter: LubricantFilter | None = None
