"""
Discount Pricing Rule

Computes the display price of a search result: half price, rounded half-up
to cents, when the query was a palindrome; the original price otherwise.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from catalog_search.domain.search import PriceQuote

PALINDROME_DISCOUNT_PERCENTAGE = 50

_CENTS = Decimal('0.01')

Price = Union[Decimal, int, float, str]


class DiscountPricingRule:
    """Applies the palindrome discount to a single price"""

    def __init__(self, discount_percentage: int = PALINDROME_DISCOUNT_PERCENTAGE):
        self.discount_percentage = discount_percentage
        self._factor = (Decimal(100) - Decimal(discount_percentage)) / Decimal(100)

    @staticmethod
    def _to_decimal(value: Price) -> Decimal:
        # str() keeps the decimal rendering of floats (33.33, not 33.3299999...)
        if isinstance(value, Decimal):
            return value
        return Decimal(str(value))

    def price(self, original_price: Price, is_palindrome_match: bool) -> PriceQuote:
        """
        Price one product

        Args:
            original_price: Non-negative price (Decimal, int, float or numeric str)
            is_palindrome_match: Whether the search query was a palindrome

        Returns:
            PriceQuote with discount_percentage set only when discounted

        Raises:
            ValueError: If the price is negative
        """
        original = self._to_decimal(original_price)
        if original < 0:
            raise ValueError(f"Price must be non-negative, got {original}")

        if not is_palindrome_match:
            return PriceQuote(original_price=original, final_price=original)

        final = (original * self._factor).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return PriceQuote(
            original_price=original,
            final_price=final,
            discount_percentage=self.discount_percentage,
        )
