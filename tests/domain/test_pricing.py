"""Unit tests for the pricing policy."""

from decimal import Decimal

from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing import DEFAULT_PRICING_POLICY, PricingPolicy


class TestShipping:

    def test_flat_fee_below_threshold(self):
        assert DEFAULT_PRICING_POLICY.shipping_for(Money.of("49.99")) == Money.of("9.99")

    def test_free_at_exactly_threshold(self):
        assert DEFAULT_PRICING_POLICY.shipping_for(Money.of("50.00")) == Money.zero()

    def test_empty_cart_still_charged_flat_fee(self):
        assert DEFAULT_PRICING_POLICY.shipping_for(Money.zero()) == Money.of("9.99")


class TestSummarize:

    def test_below_threshold(self):
        summary = DEFAULT_PRICING_POLICY.summarize(Money.of("30.00"))
        assert summary.shipping == Money.of("9.99")
        assert summary.tax == Money.of("2.40")
        assert summary.total == Money.of("42.39")
        assert summary.amount_to_free_shipping == Money.of("20.00")
        assert summary.free_shipping is False

    def test_above_threshold(self):
        summary = DEFAULT_PRICING_POLICY.summarize(Money.of("100.00"))
        assert summary.free_shipping is True
        assert summary.total == Money.of("108.00")
        assert summary.amount_to_free_shipping == Money.zero()

    def test_tax_not_rounded_until_display(self):
        summary = DEFAULT_PRICING_POLICY.summarize(Money.of("19.99"))
        assert summary.tax.amount == Decimal("1.5992")
        assert str(summary.tax) == "$1.60"
        assert str(summary.total) == "$31.58"

    def test_custom_policy(self):
        policy = PricingPolicy(
            free_shipping_threshold=Money.of("25"),
            flat_shipping_fee=Money.of("5"),
            tax_rate=Decimal("0.10"),
        )
        summary = policy.summarize(Money.of("20"))
        assert summary.total == Money.of("27")
