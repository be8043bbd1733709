"""Unit tests for the Product aggregate."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Category, Product
from storefront.domain.model.value_objects import Money


def _create(**overrides) -> Product:
    fields = dict(
        id="1",
        name="Smart Fitness Watch",
        description="Tracks heart rate and sleep.",
        price=Money.of("199.99"),
        category=Category.ELECTRONICS,
    )
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreate:

    def test_happy_path_strips_name(self):
        product = _create(name="  Watch  ")
        assert product.name == "Watch"
        assert product.in_stock is True

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            _create(price=Money.of("0"))

    def test_short_description_rejected(self):
        with pytest.raises(ValidationError, match="at least 10"):
            _create(description="Too short")

    def test_original_price_below_price_rejected(self):
        with pytest.raises(ValidationError, match="below price"):
            _create(original_price=Money.of("150.00"))

    def test_rating_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 5"):
            _create(rating=Decimal("5.1"))

    def test_negative_review_count_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _create(review_count=-1)


class TestProductRevise:

    def test_returns_new_product(self):
        product = _create()
        revised = product.revise(price=Money.of("149.99"), featured=True)
        assert revised.price == Money.of("149.99")
        assert revised.featured is True
        assert product.price == Money.of("199.99")

    def test_revision_is_validated(self):
        with pytest.raises(ValidationError):
            _create().revise(name="")

    def test_id_cannot_change(self):
        with pytest.raises(ValidationError, match="cannot be changed"):
            _create().revise(id="2")


class TestDiscountPercent:

    def test_no_original_price(self):
        assert _create().discount_percent == 0

    def test_rounded_to_whole_percent(self):
        product = _create(original_price=Money.of("249.99"))
        assert product.discount_percent == 20


class TestCategory:

    def test_from_slug_is_case_insensitive(self):
        assert Category.from_slug(" Books ") is Category.BOOKS

    def test_unknown_slug_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category"):
            Category.from_slug("toys")

    def test_label(self):
        assert Category.HOME.label == "Home & Living"
