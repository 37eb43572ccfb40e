# app/crud/supplier_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import exists, func, select
from sqlalchemy.orm import Session

from shared.core.exceptions import ConflictError, DuplicateKeyError, NotFoundError
from shared.helpers.datetime_helper import utcnow
from shared.helpers.db_helper import commit_or_raise, contains_pattern
from ..models.product import Product
from ..models.supplier import Supplier
from ..schemas.supplier_schemas import SupplierCreate, SupplierOut, SupplierUpdate
from ..validators.entity_validators import validate_supplier

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("name", "contact_person", "email", "phone", "address")


def _supplier_out(supplier: Supplier, product_count: int) -> SupplierOut:
    out = SupplierOut.model_validate(supplier)
    out.product_count = product_count or 0
    return out


def _list_with_counts(db: Session, *filters) -> List[SupplierOut]:
    counts = (
        select(Product.supplier_id.label("supplier_id"),
               func.count(Product.id).label("product_count"))
        .where(Product.supplier_id.isnot(None))
        .group_by(Product.supplier_id)
        .subquery()
    )
    rows = (
        db.query(Supplier, func.coalesce(counts.c.product_count, 0))
        .outerjoin(counts, counts.c.supplier_id == Supplier.id)
        .filter(*filters)
        .order_by(Supplier.name.asc(), Supplier.id.asc())
        .all()
    )
    return [_supplier_out(supplier, count) for supplier, count in rows]

# ----------------- Lookups -----------------


def get_supplier_by_id(db: Session, supplier_id: UUID) -> Optional[Supplier]:
    return db.query(Supplier).filter(Supplier.id == supplier_id).first()


def get_supplier_or_404(db: Session, supplier_id: UUID) -> Supplier:
    db_supplier = get_supplier_by_id(db, supplier_id)
    if not db_supplier:
        raise NotFoundError("Supplier", supplier_id)
    return db_supplier


def email_exists(db: Session, email: str, exclude_id: Optional[UUID] = None) -> bool:
    condition = Supplier.email == email
    if exclude_id is not None:
        condition = condition & (Supplier.id != exclude_id)
    return db.query(exists().where(condition)).scalar()


def count_supplier_products(db: Session, supplier_id: UUID) -> int:
    return db.query(func.count(Product.id)).filter(
        Product.supplier_id == supplier_id
    ).scalar() or 0


def get_supplier(db: Session, supplier_id: UUID) -> SupplierOut:
    db_supplier = get_supplier_or_404(db, supplier_id)
    return _supplier_out(db_supplier, count_supplier_products(db, supplier_id))

# ----------------- Listing & Search -----------------


def get_suppliers(db: Session) -> List[SupplierOut]:
    return _list_with_counts(db)


def search_suppliers(db: Session, search: Optional[str] = None) -> List[SupplierOut]:
    if not search or not search.strip():
        return get_suppliers(db)

    pattern = contains_pattern(search.strip())
    return _list_with_counts(db, Supplier.name.ilike(pattern, escape="\\"))


def get_supplier_lookup(db: Session):
    return db.query(Supplier.id, Supplier.name).order_by(Supplier.name.asc()).all()


def get_total_supplier_count(db: Session) -> int:
    return db.query(func.count(Supplier.id)).scalar() or 0

# ----------------- Create / Update -----------------


def create_supplier(db: Session, supplier: SupplierCreate) -> SupplierOut:
    validate_supplier(supplier)

    if supplier.email and email_exists(db, supplier.email):
        logger.warning("Rejected supplier with duplicate email %s", supplier.email)
        raise DuplicateKeyError("Supplier", "email", supplier.email)

    db_supplier = Supplier(
        **{field: getattr(supplier, field) for field in MUTABLE_FIELDS})
    db.add(db_supplier)
    commit_or_raise(db, lambda e: DuplicateKeyError(
        "Supplier", "email", supplier.email))
    db.refresh(db_supplier)

    logger.info("Created supplier %s (%s)", db_supplier.id, db_supplier.name)
    return _supplier_out(db_supplier, 0)


def update_supplier(db: Session, supplier_id: UUID, supplier: SupplierUpdate) -> SupplierOut:
    db_supplier = get_supplier_or_404(db, supplier_id)

    validate_supplier(supplier)

    if supplier.email and email_exists(db, supplier.email, exclude_id=supplier_id):
        logger.warning("Rejected email change of supplier %s to existing %s",
                       supplier_id, supplier.email)
        raise DuplicateKeyError("Supplier", "email", supplier.email)

    for field in MUTABLE_FIELDS:
        setattr(db_supplier, field, getattr(supplier, field))
    db_supplier.updated_at = utcnow()

    commit_or_raise(db, lambda e: DuplicateKeyError(
        "Supplier", "email", supplier.email))
    db.refresh(db_supplier)

    logger.info("Updated supplier %s", supplier_id)
    return _supplier_out(db_supplier, count_supplier_products(db, supplier_id))

# ----------------- Delete -----------------


def delete_supplier(db: Session, supplier_id: UUID) -> bool:
    db_supplier = (
        db.query(Supplier)
        .filter(Supplier.id == supplier_id)
        .with_for_update()
        .first()
    )
    if not db_supplier:
        raise NotFoundError("Supplier", supplier_id)

    product_count = count_supplier_products(db, supplier_id)
    if product_count > 0:
        db.rollback()
        logger.warning("Refused to delete supplier %s with %s products",
                       supplier_id, product_count)
        raise ConflictError(
            f"Cannot delete supplier with associated products ({product_count}). "
            "Please reassign or delete products first."
        )

    db.delete(db_supplier)
    commit_or_raise(db, lambda e: ConflictError(
        "Cannot delete supplier with associated products. "
        "Please reassign or delete products first."
    ))

    logger.info("Deleted supplier %s", supplier_id)
    return True
