from enum import Enum

from sqlmodel import Field

from oillab.models.base import BaseModel


class ProductType(str, Enum):
    ENGINE_OIL = "ENGINE_OIL"
    TRANSMISSION_OIL = "TRANSMISSION_OIL"
    HYDRAULIC_OIL = "HYDRAULIC_OIL"
    GEAR_OIL = "GEAR_OIL"
    INDUSTRIAL_OIL = "INDUSTRIAL_OIL"
    GREASE = "GREASE"


class Lubricant(BaseModel, table=True):
    """
    A lubricant product that samples are analysed against.

    Attributes:
        id: Primary key identifier
        product_type: Product family, unknown for legacy rows
        model: Commercial product name (e.g. "Helix Ultra 5W-40")
        brand: Manufacturer
        viscosity: Viscosity grade (e.g. "5W-40")
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    product_type: ProductType | None = Field(default=None)
    model: str = Field(max_length=255)
    brand: str = Field(max_length=255)
    viscosity: str = Field(max_length=255)
