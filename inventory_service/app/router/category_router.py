from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from shared.core.database import get_inventory_db as get_db
from shared.core.schemas import JsonOutResult, Lookup
from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.category_schemas import CategoryCreate, CategoryOut, CategoryUpdate
from ..crud import category_crud as crud

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("/", response_model=JsonOutResult[List[CategoryOut]])
def read_categories(db: Session = Depends(get_db)):
    return success_response(crud.get_categories(db))

#  Static endpoints stay above the parameterized routes


@router.get("/search", response_model=JsonOutResult[List[CategoryOut]])
def search_categories(q: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return success_response(crud.search_categories(db, q))


@router.get("/count", response_model=JsonOutResult[int])
def read_category_count(db: Session = Depends(get_db)):
    return success_response(crud.get_total_category_count(db))


@router.get("/lookup", response_model=JsonOutResult[List[Lookup]])
def get_category_lookup(db: Session = Depends(get_db)):
    return success_response([Lookup.model_validate(row) for row in crud.get_category_lookup(db)])


@router.get("/{category_id}", response_model=JsonOutResult[CategoryOut])
def read_category(category_id: UUID, db: Session = Depends(get_db)):
    return success_response(crud.get_category(db, category_id))


@router.post("/", response_model=JsonOutResult[CategoryOut], status_code=201)
def create_category(category: CategoryCreate, db: Session = Depends(get_db)):
    return success_response(
        crud.create_category(db, category),
        message="Category created successfully",
        status_code=AppStatusCode.CREATED_SUCCESSFULLY,
    )


@router.put("/{category_id}", response_model=JsonOutResult[CategoryOut])
def update_category(category_id: UUID, category: CategoryUpdate, db: Session = Depends(get_db)):
    return success_response(
        crud.update_category(db, category_id, category),
        message="Category updated successfully",
        status_code=AppStatusCode.UPDATED_SUCCESSFULLY,
    )

# ---------------- Delete Category ----------------


@router.delete("/{category_id}", response_model=JsonOutResult[None])
def delete_category(category_id: UUID, db: Session = Depends(get_db)):
    crud.delete_category(db, category_id)
    return success_response(
        None,
        message="Category deleted successfully",
        status_code=AppStatusCode.DELETED_SUCCESSFULLY,
    )
