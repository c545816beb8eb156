from datetime import date, datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field

from oillab.models.base import BaseModel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Report(BaseModel, table=True):
    """
    Laboratory report for one oil sample.

    Attributes:
        id: Primary key identifier
        form_number: Paper form number, unique when present
        client: Customer the sample belongs to
        vehicle: Vehicle or machine the sample was taken from
        sampled_at: Date the sample was taken
        lubricant_id: Lubricant in use, if known
        created_at: Time the report was registered
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    form_number: str | None = Field(
        default=None, max_length=255, unique=True
    )
    client: str = Field(max_length=255)
    vehicle: str | None = Field(default=None, max_length=255)
    sampled_at: date | None = None
    lubricant_id: int | None = Field(
        default=None, foreign_key="lubricant.id", index=True
    )
    created_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )
