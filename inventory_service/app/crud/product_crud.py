# app/crud/product_crud.py
import logging
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, func, or_
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, DuplicateKeyError, InvalidArgumentError, NotFoundError
from shared.helpers.db_helper import commit_or_raise, contains_pattern
from ..models.category import Category
from ..models.product import Product
from ..models.supplier import Supplier
from ..schemas.product_schemas import ProductCreate, ProductListResponse, ProductOut, ProductRequest, ProductUpdate
from ..validators.entity_validators import MAX_STOCK_COUNT, validate_product

logger = logging.getLogger(__name__)

# Fields overwritten by a full update; sku and id are fixed at creation
MUTABLE_FIELDS = (
    "name",
    "description",
    "price",
    "quantity",
    "min_stock_level",
    "category_id",
    "supplier_id",
)

SORT_COLUMNS = {
    "name": Product.name,
    "sku": Product.sku,
    "price": Product.price,
    "quantity": Product.quantity,
    "created_at": Product.created_at,
    "updated_at": Product.updated_at,
}

# ----------------- Lookups -----------------


def get_product_by_id(db: Session, product_id: UUID) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def get_product_or_404(db: Session, product_id: UUID) -> Product:
    db_product = get_product_by_id(db, product_id)
    if not db_product:
        raise NotFoundError("Product", product_id)
    return db_product


def get_product_by_sku(db: Session, sku: str) -> Optional[Product]:
    return db.query(Product).filter(Product.sku == sku).first()


def sku_exists(db: Session, sku: str) -> bool:
    return db.query(exists().where(Product.sku == sku)).scalar()


def ensure_references_exist(db: Session, category_id: Optional[UUID], supplier_id: Optional[UUID]):
    if category_id is not None and not db.query(exists().where(Category.id == category_id)).scalar():
        raise NotFoundError("Category", category_id)
    if supplier_id is not None and not db.query(exists().where(Supplier.id == supplier_id)).scalar():
        raise NotFoundError("Supplier", supplier_id)


def _integrity_error(db: Session, sku: str):
    # The store rejected the write: a racing insert took the sku, or a
    # referenced category/supplier vanished before commit
    if sku_exists(db, sku):
        return DuplicateKeyError("Product", "SKU", sku)
    return ConflictError("Referenced category or supplier no longer exists")

# ----------------- Listing & Search -----------------


def _paginate(db: Session, query, params: ProductRequest) -> ProductListResponse:
    total = query.with_entities(func.count(Product.id)).scalar()

    sort_column = SORT_COLUMNS[params.sort_by]
    ordering = sort_column.desc() if params.sort_dir == "desc" else sort_column.asc()

    products = (
        query
        .order_by(ordering, Product.id.asc())
        .offset(params.offset)
        .limit(params.limit)
        .all()
    )
    results = [ProductOut.model_validate(p) for p in products]

    return ProductListResponse(products=results, total=total, page=max(params.page, 0), size=params.limit)


def get_products(db: Session, params: ProductRequest) -> ProductListResponse:
    return _paginate(db, db.query(Product), params)


def get_all_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.name.asc(), Product.id.asc()).all()


def search_products(db: Session, params: ProductRequest) -> ProductListResponse:
    if not params.q or not params.q.strip():
        return get_products(db, params)

    pattern = contains_pattern(params.q.strip())
    query = db.query(Product).filter(
        or_(
            Product.name.ilike(pattern, escape="\\"),
            Product.sku.ilike(pattern, escape="\\"),
        )
    )
    return _paginate(db, query, params)


def get_products_by_category(db: Session, category_id: UUID) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.category_id == category_id)
        .order_by(Product.name.asc(), Product.id.asc())
        .all()
    )


def get_products_by_supplier(db: Session, supplier_id: UUID) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.supplier_id == supplier_id)
        .order_by(Product.name.asc(), Product.id.asc())
        .all()
    )


def get_low_stock_products(db: Session) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.quantity <= Product.min_stock_level)
        .order_by(Product.name.asc(), Product.id.asc())
        .all()
    )


def get_low_stock_count(db: Session) -> int:
    return db.query(func.count(Product.id)).filter(
        Product.quantity <= Product.min_stock_level
    ).scalar() or 0


def get_products_by_price_range(db: Session, min_price: Decimal, max_price: Decimal) -> List[Product]:
    if min_price > max_price:
        raise InvalidArgumentError(
            f"Minimum price {min_price} cannot exceed maximum price {max_price}")

    return (
        db.query(Product)
        .filter(Product.price >= min_price, Product.price <= max_price)
        .order_by(Product.price.asc(), Product.id.asc())
        .all()
    )


def get_total_product_count(db: Session) -> int:
    return db.query(func.count(Product.id)).scalar() or 0

# ----------------- Create -----------------


def create_product(db: Session, product: ProductCreate) -> Product:
    validate_product(product)

    if sku_exists(db, product.sku):
        logger.warning("Rejected product with duplicate sku %s", product.sku)
        raise DuplicateKeyError("Product", "SKU", product.sku)

    ensure_references_exist(db, product.category_id, product.supplier_id)

    db_product = Product(
        sku=product.sku,
        **{field: getattr(product, field) for field in MUTABLE_FIELDS}
    )
    db.add(db_product)
    commit_or_raise(db, lambda e: _integrity_error(db, product.sku))
    db.refresh(db_product)

    logger.info("Created product %s (sku=%s)", db_product.id, db_product.sku)
    return db_product

# ----------------- Update -----------------


def update_product(db: Session, product_id: UUID, product: ProductUpdate) -> Product:
    db_product = get_product_or_404(db, product_id)
    if product is None:
        validate_product(None)

    # Validate the merged result before touching the persistent instance
    update_data = {field: getattr(product, field) for field in MUTABLE_FIELDS}
    validate_product({**update_data, "sku": db_product.sku})
    ensure_references_exist(
        db, update_data["category_id"], update_data["supplier_id"])

    for field, value in update_data.items():
        setattr(db_product, field, value)
    db_product.touch()

    commit_or_raise(db, lambda e: ConflictError(
        "Referenced category or supplier no longer exists"))
    db.refresh(db_product)

    logger.info("Updated product %s", product_id)
    return db_product


def update_stock(db: Session, product_id: UUID, quantity: int) -> Product:
    db_product = get_product_or_404(db, product_id)

    if quantity is None or quantity < 0:
        raise InvalidArgumentError("Stock quantity cannot be negative")
    if quantity > MAX_STOCK_COUNT:
        raise InvalidArgumentError(f"Stock quantity cannot exceed {MAX_STOCK_COUNT}")

    db_product.quantity = quantity
    db_product.touch()

    commit_or_raise(db, lambda e: InvalidArgumentError(
        "Stock quantity rejected by the database"))
    db.refresh(db_product)

    logger.info("Stock for product %s set to %s", product_id, quantity)
    return db_product

# ----------------- Delete -----------------


def delete_product(db: Session, product_id: UUID) -> bool:
    db_product = get_product_or_404(db, product_id)

    db.delete(db_product)
    commit_or_raise(db, lambda e: ConflictError(
        "Product could not be deleted"))

    logger.info("Deleted product %s", product_id)
    return True
