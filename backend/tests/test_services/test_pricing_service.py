"""
Unit tests for DiscountPricingRule
"""
from decimal import Decimal

import pytest

from catalog_search.services.pricing_service import PALINDROME_DISCOUNT_PERCENTAGE, DiscountPricingRule


@pytest.fixture
def rule():
    return DiscountPricingRule()


class TestDiscountPricingRule:
    """Test palindrome discount arithmetic"""

    @pytest.mark.parametrize('price, expected', [
        ('99.99', Decimal('50.00')),
        ('33.33', Decimal('16.67')),
        ('89.95', Decimal('44.98')),
        ('100.00', Decimal('50.00')),
        ('0', Decimal('0')),
        ('0.01', Decimal('0.01')),
        ('12345678.99', Decimal('6172839.50')),
    ])
    def test_palindrome_halves_price_rounding_half_up(self, rule, price, expected):
        quote = rule.price(Decimal(price), True)

        assert quote.final_price == expected
        assert quote.original_price == Decimal(price)
        assert quote.discount_percentage == 50
        assert quote.is_discounted is True

    def test_no_palindrome_keeps_price(self, rule):
        quote = rule.price(Decimal('99.99'), False)

        assert quote.final_price == Decimal('99.99')
        assert quote.original_price == Decimal('99.99')
        assert quote.discount_percentage is None
        assert quote.is_discounted is False

    def test_accepts_float_int_and_str(self, rule):
        assert rule.price(33.33, True).final_price == Decimal('16.67')
        assert rule.price(89.95, True).final_price == Decimal('44.98')
        assert rule.price(10, True).final_price == Decimal('5.00')
        assert rule.price('99.99', True).final_price == Decimal('50.00')

    @pytest.mark.parametrize('price', ['0', '0.01', '0.03', '1.99', '49.995', '1000000.01'])
    def test_final_price_never_exceeds_original(self, rule, price):
        for flag in (True, False):
            quote = rule.price(Decimal(price), flag)
            assert quote.final_price <= quote.original_price

    def test_negative_price_is_rejected(self, rule):
        with pytest.raises(ValueError):
            rule.price(Decimal('-1'), True)

    def test_default_discount_is_fifty_percent(self):
        assert PALINDROME_DISCOUNT_PERCENTAGE == 50
