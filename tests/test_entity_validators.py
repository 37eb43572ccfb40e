"""Tests for the product, category and supplier field rules."""

from decimal import Decimal

import pytest

from shared.core.exceptions import ValidationError
from inventory_service.app.schemas.category_schemas import CategoryCreate
from inventory_service.app.schemas.product_schemas import ProductCreate
from inventory_service.app.schemas.supplier_schemas import SupplierCreate
from inventory_service.app.validators.entity_validators import (
    collect_category_violations,
    collect_product_violations,
    collect_supplier_violations,
    validate_category,
    validate_product,
    validate_supplier,
)


def product(**overrides) -> ProductCreate:
    data = {"name": "Widget", "sku": "W-100", "price": Decimal("9.99"), "quantity": 5}
    data.update(overrides)
    return ProductCreate(**data)


def rules_by_field(violations):
    return {v.field: v.rule for v in violations}


# ============================================================================
# Product rules
# ============================================================================


class TestProductRules:
    """Tests for the product rule table."""

    def test_valid_product_has_no_violations(self) -> None:
        assert collect_product_violations(product()) == []
        validate_product(product())

    def test_none_candidate_is_a_violation(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_product(None)

        assert exc_info.value.field == "product"
        assert exc_info.value.message == "Product is required"

    def test_missing_required_fields_are_reported_per_field(self) -> None:
        violations = collect_product_violations(ProductCreate())

        assert rules_by_field(violations) == {
            "name": "required",
            "sku": "required",
            "price": "required",
            "quantity": "required",
        }

    def test_blank_name_counts_as_missing(self) -> None:
        assert rules_by_field(collect_product_violations({
            "name": "   ", "sku": "S", "price": 1, "quantity": 0,
        })) == {"name": "required"}

    @pytest.mark.parametrize("name", ["W", "x" * 101])
    def test_name_length_bounds(self, name: str) -> None:
        assert rules_by_field(collect_product_violations(product(name=name))) == {"name": "length"}

    def test_name_length_edges_are_accepted(self) -> None:
        assert collect_product_violations(product(name="Wi")) == []
        assert collect_product_violations(product(name="x" * 100)) == []

    def test_sku_longer_than_fifty_characters(self) -> None:
        assert rules_by_field(collect_product_violations(product(sku="S" * 51))) == {"sku": "length"}

    def test_description_limit(self) -> None:
        assert collect_product_violations(product(description="d" * 500)) == []
        assert rules_by_field(
            collect_product_violations(product(description="d" * 501))
        ) == {"description": "length"}

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.50")])
    def test_price_must_be_positive(self, price: Decimal) -> None:
        violations = collect_product_violations(product(price=price))

        assert rules_by_field(violations) == {"price": "min_exclusive"}
        assert violations[0].message == "Price must be greater than 0"

    @pytest.mark.parametrize("price", [Decimal("1.234"), Decimal("12345678901"), Decimal("0.001")])
    def test_price_digits(self, price: Decimal) -> None:
        assert rules_by_field(collect_product_violations(product(price=price))) == {"price": "digits"}

    @pytest.mark.parametrize("price", [Decimal("9.90"), Decimal("100"), Decimal("9999999999.99")])
    def test_price_digits_accepted(self, price: Decimal) -> None:
        assert collect_product_violations(product(price=price)) == []

    def test_negative_quantity_and_min_stock_level(self) -> None:
        violations = collect_product_violations(product(quantity=-1, min_stock_level=-3))

        assert rules_by_field(violations) == {
            "quantity": "min",
            "min_stock_level": "min",
        }

    def test_stock_counts_beyond_integer_column_are_rejected(self) -> None:
        violations = collect_product_violations(product(quantity=2**31, min_stock_level=2**64))

        assert rules_by_field(violations) == {
            "quantity": "max",
            "min_stock_level": "max",
        }

    def test_largest_storable_stock_count_is_valid(self) -> None:
        assert collect_product_violations(product(quantity=2**31 - 1, min_stock_level=2**31 - 1)) == []

    def test_zero_quantity_is_valid(self) -> None:
        assert collect_product_violations(product(quantity=0, min_stock_level=0)) == []

    def test_min_stock_level_defaults_to_ten(self) -> None:
        assert product().min_stock_level == 10
        assert product(min_stock_level=None).min_stock_level == 10

    def test_validation_error_carries_all_violations(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_product(product(name="W", price=Decimal("0")))

        assert [v.field for v in exc_info.value.violations] == ["name", "price"]
        assert exc_info.value.message == "Product name must be between 2 and 100 characters"


# ============================================================================
# Category rules
# ============================================================================


class TestCategoryRules:
    """Tests for the category rule table."""

    def test_valid_category(self) -> None:
        validate_category(CategoryCreate(name="Electronics", description="Gadgets"))

    def test_none_candidate(self) -> None:
        assert rules_by_field(collect_category_violations(None)) == {"category": "required"}

    def test_empty_name_is_required(self) -> None:
        # empty strings are normalised to None by the input schema
        assert rules_by_field(collect_category_violations(CategoryCreate(name=""))) == {"name": "required"}

    @pytest.mark.parametrize("name", ["E", "e" * 51])
    def test_name_length(self, name: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_category(CategoryCreate(name=name))

        assert exc_info.value.field == "name"
        assert exc_info.value.violations[0].rule == "length"

    def test_description_limit(self) -> None:
        assert rules_by_field(
            collect_category_violations(CategoryCreate(name="Tools", description="d" * 201))
        ) == {"description": "length"}


# ============================================================================
# Supplier rules
# ============================================================================


class TestSupplierRules:
    """Tests for the supplier rule table."""

    def test_supplier_without_optional_fields(self) -> None:
        validate_supplier(SupplierCreate(name="Acme"))

    def test_empty_email_is_treated_as_absent(self) -> None:
        supplier = SupplierCreate(name="Acme", email="")

        assert supplier.email is None
        assert collect_supplier_violations(supplier) == []

    @pytest.mark.parametrize("email", ["acme.com", "acme@example", "plain"])
    def test_email_needs_at_sign_and_dot(self, email: str) -> None:
        violations = collect_supplier_violations(SupplierCreate(name="Acme", email=email))

        assert rules_by_field(violations) == {"email": "email"}

    def test_valid_email(self) -> None:
        assert collect_supplier_violations(SupplierCreate(name="Acme", email="a@b.com")) == []

    def test_length_limits(self) -> None:
        violations = collect_supplier_violations(SupplierCreate(
            name="A",
            contact_person="c" * 101,
            phone="1" * 21,
            address="a" * 201,
        ))

        assert rules_by_field(violations) == {
            "name": "length",
            "contact_person": "length",
            "phone": "length",
            "address": "length",
        }
