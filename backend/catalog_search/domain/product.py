"""
Product Domain Model

Represents a product entity in the catalog.
This is the single source of truth for product data structure.

Author: TM3
"""
import math
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Product(BaseModel):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Internal product ID (primary key, immutable)
        title: Product title (unique)
        brand: Product brand
        description: Product description
        price: Sale price (non-negative)
        created_at: When product was created
        updated_at: When product was last updated
    """

    id: int = Field(..., description="Internal product ID")
    title: str = Field(..., description="Product title")
    brand: str = Field("", description="Product brand")
    description: str = Field("", description="Product description")
    price: Decimal = Field(..., description="Sale price", ge=0)
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True, frozen=True)

    def to_dict(self) -> dict:
        """
        Convert to a JSON friendly dictionary

        Decimal price becomes float, timestamps become ISO strings.
        """
        data = self.model_dump()
        data['price'] = float(self.price)
        data['created_at'] = self.created_at.isoformat() if self.created_at else None
        data['updated_at'] = self.updated_at.isoformat() if self.updated_at else None
        return data


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    title: str = Field(..., min_length=1, max_length=255)
    brand: str = ""
    description: str = ""
    price: Decimal = Field(..., ge=0)


class ProductPage(BaseModel):
    """Paginated product listing returned by GET /api/products"""
    products: List[dict]
    total_items: int
    current_page: int
    total_pages: int
    has_next: bool
    has_previous: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def build(cls, products: List[Product], total_items: int, limit: int, offset: int) -> "ProductPage":
        """Compute page numbers from limit/offset (pages are 1-based)"""
        total_pages = math.ceil(total_items / limit)
        current_page = offset // limit + 1
        return cls(
            products=[product.to_dict() for product in products],
            total_items=total_items,
            current_page=current_page,
            total_pages=total_pages,
            has_next=current_page < total_pages,
            has_previous=current_page > 1,
        )
