# app/crud/category_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, DuplicateKeyError, NotFoundError
from shared.helpers.datetime_helper import utcnow
from shared.helpers.db_helper import commit_or_raise, contains_pattern
from ..models.category import Category
from ..models.product import Product
from ..schemas.category_schemas import CategoryCreate, CategoryOut, CategoryUpdate
from ..validators.entity_validators import validate_category

logger = logging.getLogger(__name__)


def _product_counts():
    return (
        select(Product.category_id.label("category_id"),
               func.count(Product.id).label("product_count"))
        .where(Product.category_id.isnot(None))
        .group_by(Product.category_id)
        .subquery()
    )


def _category_out(category: Category, product_count: int) -> CategoryOut:
    out = CategoryOut.model_validate(category)
    out.product_count = product_count or 0
    return out


def _list_with_counts(db: Session, *filters) -> List[CategoryOut]:
    counts = _product_counts()
    rows = (
        db.query(Category, func.coalesce(counts.c.product_count, 0))
        .outerjoin(counts, counts.c.category_id == Category.id)
        .filter(*filters)
        .order_by(Category.name.asc())
        .all()
    )
    return [_category_out(category, count) for category, count in rows]

# ----------------- Lookups -----------------


def get_category_by_id(db: Session, category_id: UUID) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_category_or_404(db: Session, category_id: UUID) -> Category:
    db_category = get_category_by_id(db, category_id)
    if not db_category:
        raise NotFoundError("Category", category_id)
    return db_category


def name_exists(db: Session, name: str, exclude_id: Optional[UUID] = None) -> bool:
    condition = Category.name == name
    if exclude_id is not None:
        condition = condition & (Category.id != exclude_id)
    return db.query(exists().where(condition)).scalar()


def count_category_products(db: Session, category_id: UUID) -> int:
    return db.query(func.count(Product.id)).filter(
        Product.category_id == category_id
    ).scalar() or 0


def get_category(db: Session, category_id: UUID) -> CategoryOut:
    db_category = get_category_or_404(db, category_id)
    return _category_out(db_category, count_category_products(db, category_id))

# ----------------- Listing & Search -----------------


def get_categories(db: Session) -> List[CategoryOut]:
    return _list_with_counts(db)


def search_categories(db: Session, search: Optional[str] = None) -> List[CategoryOut]:
    if not search or not search.strip():
        return get_categories(db)

    pattern = contains_pattern(search.strip())
    return _list_with_counts(db, Category.name.ilike(pattern, escape="\\"))


def get_category_lookup(db: Session):
    return db.query(Category.id, Category.name).order_by(Category.name.asc()).all()


def get_total_category_count(db: Session) -> int:
    return db.query(func.count(Category.id)).scalar() or 0

# ----------------- Create / Update -----------------


def create_category(db: Session, category: CategoryCreate) -> CategoryOut:
    validate_category(category)

    if name_exists(db, category.name):
        logger.warning("Rejected duplicate category name %s", category.name)
        raise DuplicateKeyError("Category", "name", category.name)

    db_category = Category(name=category.name,
                           description=category.description)
    db.add(db_category)
    commit_or_raise(db, lambda e: DuplicateKeyError(
        "Category", "name", category.name))
    db.refresh(db_category)

    logger.info("Created category %s (%s)", db_category.id, db_category.name)
    return _category_out(db_category, 0)


def update_category(db: Session, category_id: UUID, category: CategoryUpdate) -> CategoryOut:
    db_category = get_category_or_404(db, category_id)

    validate_category(category)

    if name_exists(db, category.name, exclude_id=category_id):
        logger.warning("Rejected rename of category %s to existing name %s",
                       category_id, category.name)
        raise DuplicateKeyError("Category", "name", category.name)

    db_category.name = category.name
    db_category.description = category.description
    db_category.updated_at = utcnow()

    commit_or_raise(db, lambda e: DuplicateKeyError(
        "Category", "name", category.name))
    db.refresh(db_category)

    logger.info("Updated category %s", category_id)
    return _category_out(db_category, count_category_products(db, category_id))

# ----------------- Delete -----------------


def delete_category(db: Session, category_id: UUID) -> bool:
    # Lock the row so the product count and the delete see the same state
    db_category = (
        db.query(Category)
        .filter(Category.id == category_id)
        .with_for_update()
        .first()
    )
    if not db_category:
        raise NotFoundError("Category", category_id)

    product_count = count_category_products(db, category_id)
    if product_count > 0:
        db.rollback()
        logger.warning("Refused to delete category %s with %s products",
                       category_id, product_count)
        raise ConflictError(
            f"Cannot delete category with associated products ({product_count}). "
            "Please reassign or delete products first."
        )

    db.delete(db_category)
    commit_or_raise(db, lambda e: ConflictError(
        "Cannot delete category with associated products. "
        "Please reassign or delete products first."
    ))

    logger.info("Deleted category %s", category_id)
    return True
