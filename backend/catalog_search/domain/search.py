"""
Search Domain Models

SearchResult and ResultItem are created fresh for every search and never
persisted. They serialize to camelCase (isPalindrome, totalItems,
originalPrice, finalPrice, discountPercentage).

Author: TM3
"""
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catalog_search.domain.product import Product


class PriceQuote(BaseModel):
    """Output of the discount pricing rule"""
    original_price: Decimal
    final_price: Decimal
    discount_percentage: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_discounted(self) -> bool:
        return self.discount_percentage is not None


class ResultItem(BaseModel):
    """Projection of a Product plus its display pricing"""
    id: int
    title: str
    brand: str
    description: str
    original_price: float
    final_price: float
    discount_percentage: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def from_product(cls, product: Product, quote: PriceQuote) -> "ResultItem":
        return cls(
            id=product.id,
            title=product.title,
            brand=product.brand,
            description=product.description,
            original_price=float(quote.original_price),
            final_price=float(quote.final_price),
            discount_percentage=quote.discount_percentage,
        )


class SearchResult(BaseModel):
    """Aggregate result of one search request"""
    query: str
    is_palindrome: bool
    items: List[ResultItem] = Field(default_factory=list)
    total_items: int = 0

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self) -> dict:
        """
        Serialize for the HTTP response

        discountPercentage is only present on discounted items.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
