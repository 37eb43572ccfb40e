# app/routers/supplier_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.core.database import get_inventory_db as get_db
from shared.core.schemas import JsonOutResult, Lookup
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.supplier_schemas import SupplierCreate, SupplierOut, SupplierUpdate
from ..crud import supplier_crud as crud

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])

# ---------------- List all suppliers ----------------


@router.get("/", response_model=JsonOutResult[List[SupplierOut]])
def read_suppliers(db: Session = Depends(get_db)):
    return success_response(crud.get_suppliers(db))


@router.get("/search", response_model=JsonOutResult[List[SupplierOut]])
def search_suppliers(q: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return success_response(crud.search_suppliers(db, q))


@router.get("/count", response_model=JsonOutResult[int])
def read_supplier_count(db: Session = Depends(get_db)):
    return success_response(crud.get_total_supplier_count(db))


@router.get("/lookup", response_model=JsonOutResult[List[Lookup]])
def get_supplier_lookup(db: Session = Depends(get_db)):
    return success_response([Lookup.model_validate(row) for row in crud.get_supplier_lookup(db)])


@router.get("/{supplier_id}", response_model=JsonOutResult[SupplierOut])
def read_supplier(supplier_id: UUID, db: Session = Depends(get_db)):
    return success_response(crud.get_supplier(db, supplier_id))

# -------create-------------------------------


@router.post("/", response_model=JsonOutResult[SupplierOut], status_code=201)
def create_supplier(supplier: SupplierCreate, db: Session = Depends(get_db)):
    return success_response(
        crud.create_supplier(db, supplier),
        message="Supplier created successfully",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY,
    )

# ---------------- Update Supplier ----------------


@router.put("/{supplier_id}", response_model=JsonOutResult[SupplierOut])
def update_supplier(supplier_id: UUID, supplier: SupplierUpdate, db: Session = Depends(get_db)):
    return success_response(
        crud.update_supplier(db, supplier_id, supplier),
        message="Supplier updated successfully",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY,
    )


@router.delete("/{supplier_id}", response_model=JsonOutResult[None])
def delete_supplier(supplier_id: UUID, db: Session = Depends(get_db)):
    crud.delete_supplier(db, supplier_id)
    return success_response(
        None,
        message="Supplier deleted successfully",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY,
    )
