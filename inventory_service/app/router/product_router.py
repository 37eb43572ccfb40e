# app/routers/product_router.py
from decimal import Decimal
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.core.database import get_inventory_db as get_db
from shared.core.exceptions import NotFoundError
from shared.core.schemas import JsonOutResult
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.product_schemas import ProductCreate, ProductListResponse, ProductOut, ProductRequest, ProductUpdate
from ..crud import product_crud as crud

router = APIRouter(prefix="/api/products", tags=["products"])


def _out(products) -> List[ProductOut]:
    return [ProductOut.model_validate(p) for p in products]

# ---------------- List all products ----------------


@router.get("/", response_model=JsonOutResult[ProductListResponse])
def read_products(
    params: ProductRequest = Depends(),
    db: Session = Depends(get_db)
):
    return success_response(crud.get_products(db, params))


@router.get("/all", response_model=JsonOutResult[List[ProductOut]])
def read_all_products(db: Session = Depends(get_db)):
    return success_response(_out(crud.get_all_products(db)))


@router.get("/search", response_model=JsonOutResult[ProductListResponse])
def search_products(
    params: ProductRequest = Depends(),
    db: Session = Depends(get_db)
):
    return success_response(crud.search_products(db, params))


@router.get("/low-stock", response_model=JsonOutResult[List[ProductOut]])
def read_low_stock_products(db: Session = Depends(get_db)):
    return success_response(_out(crud.get_low_stock_products(db)))


@router.get("/low-stock/count", response_model=JsonOutResult[int])
def read_low_stock_count(db: Session = Depends(get_db)):
    return success_response(crud.get_low_stock_count(db))


@router.get("/count", response_model=JsonOutResult[int])
def read_product_count(db: Session = Depends(get_db)):
    return success_response(crud.get_total_product_count(db))


@router.get("/price-range", response_model=JsonOutResult[List[ProductOut]])
def read_products_by_price_range(
    min_price: Decimal = Query(...),
    max_price: Decimal = Query(...),
    db: Session = Depends(get_db)
):
    return success_response(_out(crud.get_products_by_price_range(db, min_price, max_price)))


@router.get("/category/{category_id}", response_model=JsonOutResult[List[ProductOut]])
def read_products_by_category(category_id: UUID, db: Session = Depends(get_db)):
    return success_response(_out(crud.get_products_by_category(db, category_id)))


@router.get("/supplier/{supplier_id}", response_model=JsonOutResult[List[ProductOut]])
def read_products_by_supplier(supplier_id: UUID, db: Session = Depends(get_db)):
    return success_response(_out(crud.get_products_by_supplier(db, supplier_id)))


@router.get("/sku/{sku}", response_model=JsonOutResult[ProductOut])
def read_product_by_sku(sku: str, db: Session = Depends(get_db)):
    db_product = crud.get_product_by_sku(db, sku)
    if not db_product:
        raise NotFoundError("Product", sku)
    return success_response(ProductOut.model_validate(db_product))


@router.get("/check-sku/{sku}", response_model=JsonOutResult[bool])
def check_sku(sku: str, db: Session = Depends(get_db)):
    return success_response(crud.sku_exists(db, sku))

# Keep parameterized routes AFTER static routes


@router.get("/{product_id}", response_model=JsonOutResult[ProductOut])
def read_product(product_id: UUID, db: Session = Depends(get_db)):
    return success_response(ProductOut.model_validate(crud.get_product_or_404(db, product_id)))


@router.post("/", response_model=JsonOutResult[ProductOut], status_code=201)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    db_product = crud.create_product(db, product)
    return success_response(
        ProductOut.model_validate(db_product),
        message="Product created successfully",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY,
    )


@router.put("/{product_id}", response_model=JsonOutResult[ProductOut])
def update_product(product_id: UUID, product: ProductUpdate, db: Session = Depends(get_db)):
    db_product = crud.update_product(db, product_id, product)
    return success_response(
        ProductOut.model_validate(db_product),
        message="Product updated successfully",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY,
    )


@router.patch("/{product_id}/stock", response_model=JsonOutResult[ProductOut])
def update_stock(
    product_id: UUID,
    quantity: int = Query(...),
    db: Session = Depends(get_db)
):
    db_product = crud.update_stock(db, product_id, quantity)
    return success_response(
        ProductOut.model_validate(db_product),
        message="Stock updated successfully",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY,
    )

# ---------------- Delete Product ----------------


@router.delete("/{product_id}", response_model=JsonOutResult[None])
def delete_product(product_id: UUID, db: Session = Depends(get_db)):
    crud.delete_product(db, product_id)
    return success_response(
        None,
        message="Product deleted successfully",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY,
    )
