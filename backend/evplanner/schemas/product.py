"""
EVPlanner - Product Pydantic Schemas
"""
from pydantic import AliasChoices, Field, computed_field, field_validator
from datetime import datetime
from typing import Optional, List

from evplanner.schemas.base import CamelModel


class ProductBase(CamelModel):
    """
    Base schema for Product.

    Required: category, name, cost, currency, rating, manufacturer.
    Numeric fields accept numbers or numeric strings; an empty string is
    treated as "not provided", anything else unparseable is rejected.
    """
    category: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    cost: float
    currency: str = Field(..., min_length=1, max_length=10)
    rating: str = Field(..., min_length=1, max_length=50)
    manufacturer: str = Field(..., min_length=1, max_length=255)
    origin: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("manufacturedIn", "manufactured_in", "origin"),
        description="Country or region of manufacture"
    )
    efficiency: Optional[float] = Field(default=None, description="Efficiency percentage")
    lifetime: Optional[int] = Field(default=None, description="Expected lifetime in years")
    maintenance_cost: Optional[float] = None
    footprint: Optional[str] = None
    nevi_eligible: bool = False
    documents: List[str] = Field(default_factory=list)
    description: Optional[str] = None

    @field_validator("efficiency", "lifetime", "maintenance_cost", "origin", "footprint", "description", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Empty form values mean the field was left out."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("nevi_eligible", mode="before")
    @classmethod
    def none_to_false(cls, v):
        return False if v is None else v

    @field_validator("documents", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class ProductUpdate(ProductBase):
    """Schema for updating a product (full replacement, same rules as create)."""
    pass


class ProductResponse(ProductBase):
    """Schema for product response."""
    id: int
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="manufacturedIn")
    @property
    def manufactured_in(self) -> Optional[str]:
        return self.origin


class CategoryInfo(CamelModel):
    """Category facet derived from the stored category labels."""
    id: str
    name: str
    description: str
