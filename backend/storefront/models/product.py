"""
Pydantic models for products and the in-progress draft.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Rating(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: float = 0.0
    count: int = 0


class Product(BaseModel):
    """A confirmed listing. Immutable once displayed."""
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    title: str = ""
    price: float = 0.0
    description: str = ""
    category: str = ""
    image: str = ""
    rating: Rating = Field(default_factory=Rating)

    @model_validator(mode="before")
    @classmethod
    def _drop_null_rating(cls, data: Any) -> Any:
        # `"rating": null` is treated the same as a missing rating
        if isinstance(data, dict) and data.get("rating", ...) is None:
            data = {k: v for k, v in data.items() if k != "rating"}
        return data

    @property
    def has_rating(self) -> bool:
        """True when the source record actually carried a rating."""
        return "rating" in self.model_fields_set


class ProductCreate(BaseModel):
    """Body of POST /products."""
    title: str
    price: float
    description: str
    category: str
    image: str


DRAFT_FIELDS = ("title", "price", "description", "category", "image")


class Draft(BaseModel):
    """Form input as typed. `price` stays text until submission."""
    title: str = ""
    price: str = ""
    description: str = ""
    category: str = ""
    image: str = ""

    def to_create(self) -> ProductCreate:
        return ProductCreate(
            title=self.title,
            price=float(self.price),
            description=self.description,
            category=self.category,
            image=self.image,
        )
