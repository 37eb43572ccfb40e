"""Field rules for products, categories and suppliers.

Each entity has a rule table: an ordered list of ``FieldRule`` entries. The
rules are pure; uniqueness and referential checks live in the crud modules
because they need the database.

A candidate may be a pydantic input schema, an ORM instance or a plain dict.
Only ``required`` rules fire on a missing value; every other rule skips
absent fields, so optional fields are validated only when supplied.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, List, Optional

from shared.core.exceptions import ValidationError, Violation

# Stock counts are stored in a 32-bit INTEGER column
MAX_STOCK_COUNT = 2**31 - 1


@dataclass(frozen=True)
class FieldRule:
    field: str
    rule: str
    message: str
    check: Callable[[Any], bool]
    applies_to_missing: bool = False


def _is_missing(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip() == ""


def required(field: str, message: str) -> FieldRule:
    return FieldRule(field, "required", message,
                     lambda v: not _is_missing(v), applies_to_missing=True)


def length(field: str, message: str, min_len: int = 0, max_len: Optional[int] = None) -> FieldRule:
    def check(value):
        size = len(str(value))
        return size >= min_len and (max_len is None or size <= max_len)
    return FieldRule(field, "length", message, check)


def _as_decimal(value) -> Optional[Decimal]:
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def greater_than(field: str, message: str, bound) -> FieldRule:
    def check(value):
        number = _as_decimal(value)
        return number is not None and number > bound
    return FieldRule(field, "min_exclusive", message, check)


def at_least(field: str, message: str, bound) -> FieldRule:
    def check(value):
        number = _as_decimal(value)
        return number is not None and number >= bound
    return FieldRule(field, "min", message, check)


def at_most(field: str, message: str, bound) -> FieldRule:
    def check(value):
        number = _as_decimal(value)
        return number is not None and number <= bound
    return FieldRule(field, "max", message, check)


def digits(field: str, message: str, integer: int, fraction: int) -> FieldRule:
    def check(value):
        number = _as_decimal(value)
        if number is None:
            return False
        # trailing zeros do not count: 9.90 has one fractional digit
        _, digit_tuple, exponent = number.normalize().as_tuple()
        fraction_digits = max(0, -exponent)
        integer_digits = max(0, len(digit_tuple) + exponent)
        return integer_digits <= integer and fraction_digits <= fraction
    return FieldRule(field, "digits", message, check)


def email_shape(field: str, message: str) -> FieldRule:
    return FieldRule(field, "email", message,
                     lambda v: "@" in v and "." in v)


PRODUCT_RULES: List[FieldRule] = [
    required("name", "Product name is required"),
    length("name", "Product name must be between 2 and 100 characters", 2, 100),
    required("sku", "Product SKU is required"),
    length("sku", "Product SKU must be between 1 and 50 characters", 1, 50),
    length("description", "Product description cannot exceed 500 characters", max_len=500),
    required("price", "Price is required"),
    greater_than("price", "Price must be greater than 0", 0),
    digits("price", "Price format is invalid: at most 10 integer digits and 2 decimal places", 10, 2),
    required("quantity", "Quantity is required"),
    at_least("quantity", "Quantity cannot be negative", 0),
    at_most("quantity", f"Quantity cannot exceed {MAX_STOCK_COUNT}", MAX_STOCK_COUNT),
    at_least("min_stock_level", "Minimum stock level cannot be negative", 0),
    at_most("min_stock_level", f"Minimum stock level cannot exceed {MAX_STOCK_COUNT}", MAX_STOCK_COUNT),
]

CATEGORY_RULES: List[FieldRule] = [
    required("name", "Category name is required"),
    length("name", "Category name must be between 2 and 50 characters", 2, 50),
    length("description", "Category description cannot exceed 200 characters", max_len=200),
]

SUPPLIER_RULES: List[FieldRule] = [
    required("name", "Supplier name is required"),
    length("name", "Supplier name must be between 2 and 100 characters", 2, 100),
    length("contact_person", "Contact person name cannot exceed 100 characters", max_len=100),
    email_shape("email", "Please provide a valid email address"),
    length("email", "Email cannot exceed 100 characters", max_len=100),
    length("phone", "Phone number cannot exceed 20 characters", max_len=20),
    length("address", "Address cannot exceed 200 characters", max_len=200),
]


def _field_value(candidate, field: str):
    if isinstance(candidate, dict):
        return candidate.get(field)
    return getattr(candidate, field, None)


def collect_violations(candidate, rules: List[FieldRule], entity: str) -> List[Violation]:
    """Run a rule table and return every violation, at most one per field."""
    if candidate is None:
        return [Violation(entity.lower(), "required", f"{entity} is required")]

    violations: List[Violation] = []
    failed_fields = set()
    for rule in rules:
        if rule.field in failed_fields:
            continue
        value = _field_value(candidate, rule.field)
        if _is_missing(value) and not rule.applies_to_missing:
            continue
        if not rule.check(value):
            failed_fields.add(rule.field)
            violations.append(Violation(rule.field, rule.rule, rule.message))
    return violations


def collect_product_violations(candidate) -> List[Violation]:
    return collect_violations(candidate, PRODUCT_RULES, "Product")


def collect_category_violations(candidate) -> List[Violation]:
    return collect_violations(candidate, CATEGORY_RULES, "Category")


def collect_supplier_violations(candidate) -> List[Violation]:
    return collect_violations(candidate, SUPPLIER_RULES, "Supplier")


def validate_product(candidate) -> None:
    violations = collect_product_violations(candidate)
    if violations:
        raise ValidationError(violations)


def validate_category(candidate) -> None:
    violations = collect_category_violations(candidate)
    if violations:
        raise ValidationError(violations)


def validate_supplier(candidate) -> None:
    violations = collect_supplier_violations(candidate)
    if violations:
        raise ValidationError(violations)
