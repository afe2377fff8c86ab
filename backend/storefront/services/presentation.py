"""
Read-only view models for the dashboard table and card grid.
"""
from typing import List, Optional

from pydantic import BaseModel

from storefront.models.product import Product

NO_RATING = "N/A"


class ProductView(BaseModel):
    """What a table row or a card shows for one product."""
    id: int
    title: str
    category: str
    description: str
    price: str
    rating: str
    rating_count: Optional[int] = None
    image: Optional[str] = None


def format_price(price: float) -> str:
    return f"{price:.2f}"


def present_product(product: Product, position: int) -> ProductView:
    """`position` is 1-based and stands in for a missing id."""
    return ProductView(
        id=product.id if product.id is not None else position,
        title=product.title,
        category=product.category,
        description=product.description,
        price=format_price(product.price),
        rating=str(product.rating.rate) if product.has_rating else NO_RATING,
        rating_count=product.rating.count if product.has_rating else None,
        image=product.image or None,
    )


def present_products(products: List[Product]) -> List[ProductView]:
    return [present_product(p, i) for i, p in enumerate(products, start=1)]
