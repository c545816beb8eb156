from datetime import date, datetime

from pydantic import ConfigDict, Field, field_validator

from oillab.query import (
    EntityFilter,
    IdFilter,
    PaginateArgs,
    SortDirectiveSet,
    StringFilter,
)
from oillab.schemas.response import CamelModel

report_sort = SortDirectiveSet(
    "ReportSort",
    {
        "formNumber": "form_number",
        "client": "client",
        "sampledAt": "sampled_at",
        "createdAt": "created_at",
    },
)
ReportSort = report_sort.enum


class ReportRead(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    form_number: str | None = None
    client: str
    vehicle: str | None = None
    sampled_at: date | None = None
    lubricant_id: int | None = None
    created_at: datetime


class ReportCreateInput(CamelModel):
    form_number: str | None = Field(default=None, min_length=1, max_length=255)
    client: str = Field(min_length=1, max_length=255)
    vehicle: str | None = Field(default=None, max_length=255)
    sampled_at: date | None = None
    lubricant_id: int | None = None


class ReportUpdateInput(CamelModel):
    """Only the fields that are set are applied."""

    form_number: str | None = Field(default=None, min_length=1, max_length=255)
    client: str | None = Field(default=None, min_length=1, max_length=255)
    vehicle: str | None = Field(default=None, max_length=255)
    sampled_at: date | None = None
    lubricant_id: int | None = None

    @field_validator("client")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        """Required columns can be left out but not cleared."""
        if v is None:
            raise ValueError("must not be null")
        return v


class ReportFilter(EntityFilter):
    id: IdFilter | None = None
    lubricant_id: IdFilter | None = None
    form_number: StringFilter | None = None
    client: StringFilter | None = None
    vehicle: StringFilter | None = None


class ReportPaginateArgs(PaginateArgs):
    sort: list[ReportSort] | None = None  # type: ignore[valid-type]
    filter: ReportFilter | None = None
