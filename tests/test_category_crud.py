"""Tests for category uniqueness, search and the delete guard."""

import uuid

import pytest
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, DuplicateKeyError, NotFoundError, ValidationError
from inventory_service.app.crud import category_crud, product_crud
from inventory_service.app.schemas.category_schemas import CategoryCreate, CategoryUpdate


class TestCategoryWrites:
    """Tests for creating and updating categories."""

    def test_create(self, make_category) -> None:
        created = make_category(name="Electronics", description="Gadgets")

        assert isinstance(created.id, uuid.UUID)
        assert created.name == "Electronics"
        assert created.description == "Gadgets"
        assert created.product_count == 0

    def test_duplicate_name(self, db: Session, make_category) -> None:
        make_category(name="Electronics")

        with pytest.raises(DuplicateKeyError):
            make_category(name="Electronics")

        assert category_crud.get_total_category_count(db) == 1

    def test_invalid_name(self, make_category) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_category(name="E")

        assert exc_info.value.field == "name"

    def test_update(self, db: Session, make_category) -> None:
        created = make_category(name="Electronics")

        updated = category_crud.update_category(
            db, created.id, CategoryUpdate(name="Electronic Goods", description="All of them"))

        assert updated.name == "Electronic Goods"
        assert updated.description == "All of them"
        assert updated.created_at == created.created_at

    def test_update_to_existing_name(self, db: Session, make_category) -> None:
        make_category(name="Tools")
        garden = make_category(name="Garden")

        with pytest.raises(DuplicateKeyError):
            category_crud.update_category(db, garden.id, CategoryUpdate(name="Tools"))

    def test_update_keeping_own_name(self, db: Session, make_category) -> None:
        tools = make_category(name="Tools")

        updated = category_crud.update_category(
            db, tools.id, CategoryUpdate(name="Tools", description="Hand tools"))

        assert updated.description == "Hand tools"

    def test_update_unknown_id(self, db: Session) -> None:
        with pytest.raises(NotFoundError):
            category_crud.update_category(db, uuid.uuid4(), CategoryUpdate(name="Tools"))


class TestCategoryDelete:
    """Tests for the category delete guard."""

    def test_delete_blocked_while_products_reference_it(self, db: Session, make_category, make_product) -> None:
        tools = make_category(name="Tools")
        hammer = make_product(sku="H-1", category_id=tools.id)

        with pytest.raises(ConflictError) as exc_info:
            category_crud.delete_category(db, tools.id)

        assert "associated products" in exc_info.value.message
        assert category_crud.get_category_by_id(db, tools.id) is not None

        product_crud.delete_product(db, hammer.id)

        assert category_crud.delete_category(db, tools.id) is True
        assert category_crud.get_category_by_id(db, tools.id) is None

    def test_delete_empty_category(self, db: Session, make_category) -> None:
        empty = make_category(name="Empty")

        assert category_crud.delete_category(db, empty.id) is True
        assert category_crud.get_total_category_count(db) == 0

    def test_delete_unknown_id(self, db: Session) -> None:
        with pytest.raises(NotFoundError):
            category_crud.delete_category(db, uuid.uuid4())


class TestCategoryQueries:
    """Tests for category listing and search."""

    def test_list_is_ordered_by_name_with_counts(self, db: Session, make_category, make_product) -> None:
        tools = make_category(name="Tools")
        make_category(name="Garden")
        make_product(sku="T-1", category_id=tools.id)
        make_product(sku="T-2", category_id=tools.id)

        categories = category_crud.get_categories(db)

        assert [(c.name, c.product_count) for c in categories] == [("Garden", 0), ("Tools", 2)]

    def test_search_is_case_insensitive(self, db: Session, make_category) -> None:
        make_category(name="Power Tools")
        make_category(name="Hand Tools")
        make_category(name="Garden")

        assert [c.name for c in category_crud.search_categories(db, "TOOLS")] == ["Hand Tools", "Power Tools"]

    def test_blank_search_returns_all_by_name(self, db: Session, make_category) -> None:
        make_category(name="Tools")
        make_category(name="Apparel")

        assert [c.name for c in category_crud.search_categories(db, " ")] == ["Apparel", "Tools"]
        assert [c.name for c in category_crud.search_categories(db, None)] == ["Apparel", "Tools"]
