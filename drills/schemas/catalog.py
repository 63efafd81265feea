"""Catalog Schemas — pydantic models for raw rated items and products.

Invariants:
    - title / name: non-empty after stripping
    - rating bounded 0.0–5.0; price >= 0.0
    - to_domain() returns frozen core types

Design Decisions:
    - field_validator for the strip transform; Field constraints for bounds
"""

from pydantic import BaseModel, Field, field_validator

from drills.core.domain_types import Product, RatedItem


class RatedItemIn(BaseModel):
    """Raw rated item, e.g. {"title": "Book A", "rating": 4.5}."""
    title: str = Field(min_length=1, max_length=500)
    rating: float = Field(ge=0.0, le=5.0, allow_inf_nan=False)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_domain(self) -> RatedItem:
        return RatedItem(title=self.title, rating=self.rating)


class ProductIn(BaseModel):
    """Raw product, e.g. {"name": "Pen", "price": 10}."""
    name: str = Field(min_length=1, max_length=500)
    price: float = Field(ge=0.0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v

    def to_domain(self) -> Product:
        return Product(name=self.name, price=self.price)
